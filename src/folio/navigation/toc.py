"""Table-of-contents building."""

import re
import unicodedata
from typing import List, Sequence

from folio.exceptions import NotFoundError, ParseError
from folio.models.document import Collection, Document
from folio.models.navigation import NavigationEntry, PageNavigation

_NON_WORD = re.compile(r"[\W_]+")


def _fold(char: str) -> str:
    ascii_form = unicodedata.normalize("NFKD", char).encode("ascii", "ignore").decode("ascii")
    return ascii_form or char


def slugify(text: str) -> str:
    """Turn a title into a URL-safe reference.

    ``"Starting Out"`` becomes ``"starting-out"``. Accents are stripped
    (``"Café"`` becomes ``"cafe"``) but other scripts are kept as they are,
    so ``"Введение"`` becomes ``"введение"``. Runs of anything that is not a
    letter or digit collapse into a single hyphen.

    Raises:
        ParseError: If nothing usable is left
    """
    folded = "".join(_fold(char) for char in unicodedata.normalize("NFC", text))
    slug = _NON_WORD.sub("-", folded.lower()).strip("-")
    if not slug:
        raise ParseError(f"Cannot derive a reference from {text!r}")
    return slug


def navigation_entry(document: Document) -> NavigationEntry:
    return NavigationEntry(title=document.title, ref=document.identifier)


def build_toc(collection: Collection) -> List[NavigationEntry]:
    """Build the table of contents, one entry per document in reading order."""
    return [navigation_entry(doc) for doc in collection]


def page_navigation(toc: Sequence[NavigationEntry], ref: str) -> PageNavigation:
    """Locate a page in the table of contents along with its neighbours.

    Args:
        toc: Table of contents from build_toc
        ref: Reference of the current page

    Returns:
        Navigation view for the page

    Raises:
        NotFoundError: If no entry has the given reference
    """
    entries = tuple(toc)
    for index, entry in enumerate(entries):
        if entry.ref == ref:
            return PageNavigation(
                entries=entries,
                current=entry,
                previous=entries[index - 1] if index > 0 else None,
                next=entries[index + 1] if index + 1 < len(entries) else None,
            )
    raise NotFoundError(f"No navigation entry for '{ref}'", stage="render")
