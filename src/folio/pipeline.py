"""Site building pipeline: load, build the table of contents, render, write."""

import asyncio
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

import structlog

from folio.config.settings import ErrorTolerance, FolioConfig
from folio.content.loader import ContentLoader, Sources
from folio.exceptions import FolioError
from folio.models.document import Collection
from folio.models.navigation import NavigationEntry
from folio.navigation.toc import build_toc
from folio.render.adapter import RendererAdapter

logger = structlog.get_logger(__name__)

MANIFEST_NAME = "toc.json"


@dataclass
class BuildResult:
    """Outcome of a site build.

    ``collection`` and ``toc`` hold only the pages that were published.
    """

    collection: Collection
    toc: List[NavigationEntry]
    written: List[Path] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    errors: List[FolioError] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.errors


class SitePipeline:
    """Runs the loader, table-of-contents builder and renderer in one pass."""

    def __init__(
        self,
        config: Optional[FolioConfig] = None,
        loader: Optional[ContentLoader] = None,
        renderer: Optional[RendererAdapter] = None,
    ) -> None:
        self.config = config or FolioConfig()
        self.error_tolerance = self.config.processing.error_tolerance
        self.loader = loader or ContentLoader(self.config)
        self.renderer = renderer or RendererAdapter(self.config)

    def load(self, source: Sources) -> Collection:
        if self.config.processing.concurrent_reads:
            return asyncio.run(self.loader.load_async(source))
        return self.loader.load(source)

    def build(self, source: Sources, output_dir: Path) -> BuildResult:
        """Build the site.

        Args:
            source: Directory or list of chapter files
            output_dir: Directory that receives the rendered pages

        Returns:
            Build result with written paths and any skipped documents

        Raises:
            FolioError: On the first error when errors are not tolerated
        """
        collection = self.load(source)
        result = BuildResult(collection=collection, toc=build_toc(collection))
        for error in self.loader.errors:
            result.errors.append(error)
            result.skipped.append(error.source or "")

        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        suffix = self.config.site.output_suffix

        for identifier, output in self._render_pages(result):
            result.written.append(self._write(output_dir / f"{identifier}{suffix}", output))

        index = self.renderer.render_index(result.toc)
        result.written.append(
            self._write(output_dir / f"{self.config.site.index_name}{suffix}", index)
        )

        if self.config.processing.write_manifest:
            entries = [entry.to_dict() for entry in result.toc]
            manifest = json.dumps(entries, indent=2, ensure_ascii=False)
            result.written.append(self._write(output_dir / MANIFEST_NAME, manifest + "\n"))

        logger.info(
            "site_built",
            output_dir=str(output_dir),
            written=len(result.written),
            skipped=len(result.skipped),
        )
        return result

    def _render_pages(self, result: BuildResult) -> List[Tuple[str, str]]:
        """Render every page against the navigation of the pages that render.

        A page that fails is dropped from the collection and the table of
        contents, and the rest are rendered again so no page links to it.
        """
        while True:
            pages = []
            failed = []
            for document in result.collection:
                try:
                    output = self.renderer.render(document, result.toc)
                    pages.append((document.identifier, output))
                except FolioError as e:
                    if self.error_tolerance == ErrorTolerance.STRICT:
                        raise
                    logger.warning(
                        "document_skipped", identifier=document.identifier, error=e.message
                    )
                    result.errors.append(e)
                    result.skipped.append(document.identifier)
                    failed.append(document.identifier)
            if not failed:
                return pages
            result.collection = Collection(
                doc for doc in result.collection if doc.identifier not in failed
            )
            result.toc = build_toc(result.collection)

    @staticmethod
    def _write(path: Path, content: str) -> Path:
        path.write_text(content, encoding="utf-8")
        return path
