"""Navigation models."""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class NavigationEntry:
    """A title/link pair derived from one document."""

    title: str
    ref: str

    def to_dict(self) -> Dict[str, str]:
        return {"title": self.title, "ref": self.ref}


@dataclass(frozen=True)
class PageNavigation:
    """The table of contents as seen from a single page.

    Attributes:
        entries: Full table of contents in reading order
        current: Entry of the page being rendered
        previous: Entry before the current one, if any
        next: Entry after the current one, if any
    """

    entries: Tuple[NavigationEntry, ...]
    current: NavigationEntry
    previous: Optional[NavigationEntry] = None
    next: Optional[NavigationEntry] = None
