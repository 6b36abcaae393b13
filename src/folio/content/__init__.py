"""Content loading."""

from folio.content.frontmatter import extract_frontmatter
from folio.content.loader import ContentLoader, load_collection

__all__ = ["ContentLoader", "extract_frontmatter", "load_collection"]
