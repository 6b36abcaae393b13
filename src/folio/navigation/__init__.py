"""Navigation building."""

from folio.navigation.toc import build_toc, navigation_entry, page_navigation, slugify

__all__ = ["build_toc", "navigation_entry", "page_navigation", "slugify"]
