"""Adapter between Folio documents and the Jinja2 templating engine."""

from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import markdown
import structlog
from jinja2 import (
    ChoiceLoader,
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
    TemplateNotFound,
    TemplateSyntaxError,
    UndefinedError,
    select_autoescape,
)

from folio.config.settings import FolioConfig
from folio.exceptions import ConfigurationError, NotFoundError, RenderError
from folio.models.document import Document
from folio.models.navigation import NavigationEntry, PageNavigation
from folio.navigation.toc import page_navigation

logger = structlog.get_logger(__name__)

BUNDLED_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"


class RendererAdapter:
    """Marshals documents and navigation into template context and renders them."""

    def __init__(
        self, config: Optional[FolioConfig] = None, template_dir: Optional[Path] = None
    ) -> None:
        """Initialize the adapter.

        Args:
            config: Folio configuration; defaults are used when omitted
            template_dir: User template directory, searched before the bundled
                templates. Overrides ``config.render.template_dir``.

        Raises:
            ConfigurationError: If the template directory is missing or a
                markdown extension cannot be loaded
        """
        self.config = config or FolioConfig()
        render_config = self.config.render
        self.template_dir = template_dir or render_config.template_dir

        search_path = [BUNDLED_TEMPLATE_DIR]
        if self.template_dir is not None:
            if not Path(self.template_dir).is_dir():
                raise ConfigurationError("Template directory not found", source=self.template_dir)
            search_path.insert(0, Path(self.template_dir))

        self.env = Environment(
            loader=ChoiceLoader([FileSystemLoader(str(p)) for p in search_path]),
            autoescape=select_autoescape(["html", "xml"]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
        )

        try:
            self.markdown = markdown.Markdown(extensions=list(render_config.markdown_extensions))
        except (ImportError, AttributeError, ValueError) as e:
            raise ConfigurationError(f"Cannot load markdown extensions: {e}") from e

    def to_html(self, body: str) -> str:
        """Convert a markdown body to HTML."""
        self.markdown.reset()
        return self.markdown.convert(body)

    def template_for(self, document: Document) -> str:
        """Pick the template for a document.

        Raises:
            RenderError: If the document declares a layout with no template
        """
        if not document.layout:
            return self.config.render.default_template
        name = f"{document.layout}.html"
        if name not in self.env.list_templates():
            raise RenderError(
                f"No template for layout '{document.layout}'",
                source=document.source_path,
                details={"template": name},
            )
        return name

    def build_context(self, document: Document, navigation: PageNavigation) -> Dict[str, Any]:
        """Shape a document and its navigation the way templates expect."""
        return {
            "site": self.config.site.model_dump(),
            "document": document.to_dict(),
            "content": self.to_html(document.body),
            "toc": self._toc_context(navigation.entries, navigation.current),
            "previous": navigation.previous.to_dict() if navigation.previous else None,
            "next": navigation.next.to_dict() if navigation.next else None,
            "output_suffix": self.config.site.output_suffix,
        }

    def render(self, document: Document, navigation: Sequence[NavigationEntry]) -> str:
        """Render one document.

        Args:
            document: Document to render
            navigation: Full table of contents

        Returns:
            Rendered output

        Raises:
            RenderError: If the document is not in the navigation or the
                template engine rejects the input
        """
        try:
            page_nav = page_navigation(navigation, document.identifier)
        except NotFoundError as e:
            raise RenderError(e.message, source=document.source_path) from e

        template_name = self.template_for(document)
        output = self._render_template(
            template_name, self.build_context(document, page_nav), source=document.source_path
        )
        logger.debug("document_rendered", identifier=document.identifier, template=template_name)
        return output

    def render_index(self, navigation: Sequence[NavigationEntry]) -> str:
        """Render the index page listing the table of contents."""
        context = {
            "site": self.config.site.model_dump(),
            "toc": self._toc_context(navigation, None),
            "output_suffix": self.config.site.output_suffix,
        }
        return self._render_template(self.config.render.index_template, context, source=None)

    @staticmethod
    def _toc_context(
        entries: Sequence[NavigationEntry], current: Optional[NavigationEntry]
    ) -> List[Dict[str, Any]]:
        return [dict(entry.to_dict(), current=entry == current) for entry in entries]

    def _render_template(self, name: str, context: Dict[str, Any], source: Optional[Path]) -> str:
        try:
            template = self.env.get_template(name)
            return template.render(**context)
        except TemplateNotFound as e:
            raise RenderError(f"Template not found: {e.name}", source=source) from e
        except TemplateSyntaxError as e:
            raise RenderError(
                f"Template syntax error: {e.message}",
                source=source,
                details={"template": e.name, "line": e.lineno},
            ) from e
        except UndefinedError as e:
            raise RenderError(
                f"Template rejected input: {e.message}",
                source=source,
                details={"template": name},
            ) from e
        except TemplateError as e:
            raise RenderError(f"Failed to render {name}: {e}", source=source) from e
