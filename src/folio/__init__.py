"""Folio - assemble ordered markdown chapters into a navigable static site."""

__version__ = "0.1.0"

from folio.content import ContentLoader, load_collection
from folio.exceptions import (
    ConfigurationError,
    FolioError,
    NotFoundError,
    ParseError,
    RenderError,
)
from folio.models import Collection, Document, NavigationEntry, PageNavigation
from folio.navigation import build_toc, page_navigation, slugify
from folio.pipeline import BuildResult, SitePipeline
from folio.render import RendererAdapter

__all__ = [
    "BuildResult",
    "Collection",
    "ConfigurationError",
    "ContentLoader",
    "Document",
    "FolioError",
    "NavigationEntry",
    "NotFoundError",
    "PageNavigation",
    "ParseError",
    "RenderError",
    "RendererAdapter",
    "SitePipeline",
    "build_toc",
    "load_collection",
    "page_navigation",
    "slugify",
]
