"""Utility helpers."""

from folio.utils.console import FOLIO_THEME, FolioConsole

__all__ = ["FOLIO_THEME", "FolioConsole"]
