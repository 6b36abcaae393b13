"""Themed terminal output for the folio command."""

from pathlib import Path
from typing import Iterable, Optional, Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from folio.exceptions import FolioError
from folio.models.navigation import NavigationEntry

FOLIO_THEME = Theme(
    {
        "heading": "bold white",
        "number": "dim white",
        "title": "white",
        "ref": "cyan",
        "success": "green",
        "warning": "yellow",
        "error": "red",
        "stats": "bold white",
        "detail": "dim white",
    }
)


class FolioConsole:
    """Prints build progress, tables of contents and load or render errors.

    Messages, titles and paths come from user content, so they are printed
    with Rich markup disabled.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console(theme=FOLIO_THEME)

    def build_started(self, source: Path, output: Path) -> None:
        self.console.print("\n► Building site", style="heading")
        self.console.print(f"  {source} -> {output}", style="detail", markup=False)

    def build_summary(self, chapters: int, written: int, skipped: int) -> None:
        """Print the counts of a finished build."""
        style = "success" if not skipped else "warning"
        self.console.print("\n✓ Completed build", style=style)
        for label, value in (
            ("Chapters", chapters),
            ("Files written", written),
            ("Skipped", skipped),
        ):
            self.console.print(f"  {label}: ", style="stats", end="")
            self.console.print(str(value), style="detail")

    def chapter_table(
        self, entries: Sequence[NavigationEntry], title: Optional[str] = None
    ) -> None:
        """Print the table of contents, one row per chapter in reading order."""
        table = Table(title=title, title_style="heading", header_style="heading")
        table.add_column("#", style="number", justify="right")
        table.add_column("Title", style="title")
        table.add_column("Reference", style="ref")
        for number, entry in enumerate(entries, start=1):
            table.add_row(str(number), Text(entry.title), Text(entry.ref))
        self.console.print(table)

    def report_errors(self, errors: Iterable[FolioError], label: Optional[str] = None) -> int:
        """Print each error with its type, stage and source.

        Args:
            errors: Errors collected while loading or rendering
            label: Prefix for each line, such as ``"Skipped"``

        Returns:
            Number of errors printed
        """
        count = 0
        for error in errors:
            kind = type(error).__name__
            if error.stage:
                kind = f"{kind} ({error.stage})"
            heading = f"{label}: {kind}" if label else kind
            self.console.print(f"✗ {heading}", style="error", markup=False)
            self.console.print(f"  {error.message}", style="detail", markup=False)
            if error.source:
                self.console.print(f"  {error.source}", style="detail", markup=False)
            count += 1
        return count

    def error(self, message: str, detail: Optional[str] = None) -> None:
        self.console.print(f"✗ {message}", style="error", markup=False)
        if detail:
            self.console.print(f"  {detail}", style="detail", markup=False)

    def success(self, message: str) -> None:
        self.console.print(f"✓ {message}", style="success", markup=False)
