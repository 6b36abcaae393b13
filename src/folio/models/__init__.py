"""Folio data models."""

from folio.models.document import Collection, Document
from folio.models.navigation import NavigationEntry, PageNavigation

__all__ = ["Collection", "Document", "NavigationEntry", "PageNavigation"]
