"""Chapter loading."""

import asyncio
import re
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Union

import aiofiles
import structlog

from folio.config.settings import ContentConfig, ErrorTolerance, FolioConfig
from folio.content.frontmatter import extract_frontmatter
from folio.exceptions import FolioError, NotFoundError, ParseError
from folio.models.document import Collection, Document
from folio.navigation.toc import slugify

logger = structlog.get_logger(__name__)

Sources = Union[str, Path, Sequence[Union[str, Path]]]

_LEADING_NUMBER = re.compile(r"^(\d+)")


class ContentLoader:
    """Loads markdown chapters into an ordered collection.

    Ordinals come from the ``order`` front-matter key, falling back to a
    leading number in the filename and then to the file's position among
    the sources. Identifiers come from ``slug`` or, failing that, the title.
    """

    def __init__(
        self,
        config: Optional[FolioConfig] = None,
        error_tolerance: Optional[ErrorTolerance] = None,
    ) -> None:
        """Initialize the loader.

        Args:
            config: Folio configuration; defaults are used when omitted
            error_tolerance: Overrides ``config.processing.error_tolerance``
        """
        config = config or FolioConfig()
        self.content_config: ContentConfig = config.content
        self.error_tolerance = ErrorTolerance(
            error_tolerance or config.processing.error_tolerance
        )
        self.errors: List[FolioError] = []

    def discover(self, sources: Sources) -> List[Path]:
        """Resolve sources to an ordered list of files.

        A directory yields its markdown files sorted by name; a sequence of
        paths is kept in the given order.

        Raises:
            NotFoundError: If the directory is missing, or a listed file is
                missing and errors are not tolerated
        """
        if isinstance(sources, (str, Path)):
            directory = Path(sources)
            if not directory.is_dir():
                raise NotFoundError("Source directory not found", source=directory)
            extensions = {ext.lower() for ext in self.content_config.extensions}
            return sorted(
                (p for p in directory.iterdir() if p.is_file() and p.suffix.lower() in extensions),
                key=lambda p: p.name,
            )

        paths = []
        for source in sources:
            path = Path(source)
            if not path.is_file():
                self._handle_error(NotFoundError("Source file not found", source=path))
                continue
            paths.append(path)
        return paths

    def load(self, sources: Sources) -> Collection:
        """Load sources into a collection.

        Raises:
            NotFoundError: If a source is missing
            ParseError: If front-matter is missing or invalid, or ordinals or
                identifiers collide
        """
        self.errors = []
        paths = self.discover(sources)
        logger.info("loading_sources", count=len(paths))

        documents = []
        for position, path in enumerate(paths, start=1):
            try:
                content = self._read(path)
                documents.append(self.parse(path, content, position))
            except FolioError as e:
                self._handle_error(e)
        return self._assemble(documents)

    async def load_async(self, sources: Sources) -> Collection:
        """Load sources with concurrent file reads.

        Produces the same collection as :meth:`load`.
        """
        self.errors = []
        paths = self.discover(sources)
        logger.info("loading_sources", count=len(paths), concurrent=True)

        results = await asyncio.gather(
            *(self._read_async(path) for path in paths), return_exceptions=True
        )

        documents = []
        for position, (path, result) in enumerate(zip(paths, results), start=1):
            try:
                if isinstance(result, BaseException):
                    raise result
                documents.append(self.parse(path, result, position))
            except FolioError as e:
                self._handle_error(e)
        return self._assemble(documents)

    def parse(self, path: Path, content: str, position: int) -> Document:
        """Build a document from file content.

        Args:
            path: Source path
            content: Raw file content
            position: 1-based position of the file among the sources

        Returns:
            The parsed document

        Raises:
            ParseError: If the front-matter is missing or invalid
        """
        frontmatter, body = extract_frontmatter(content, source=path)
        title = self._title(frontmatter, path)
        document = Document(
            identifier=self._identifier(frontmatter, title, path),
            title=title,
            ordinal=self._ordinal(frontmatter, path, position),
            body=body,
            layout=self._optional_str(frontmatter, "layout", path),
            description=self._optional_str(frontmatter, "description", path),
            source_path=path,
        )
        logger.debug(
            "document_loaded",
            identifier=document.identifier,
            ordinal=document.ordinal,
            source=str(path),
        )
        return document

    def _read(self, path: Path) -> str:
        try:
            return path.read_text(encoding=self.content_config.encoding)
        except UnicodeDecodeError as e:
            raise ParseError(f"Cannot decode source: {e}", source=path) from e
        except (FileNotFoundError, IsADirectoryError) as e:
            raise NotFoundError("Source file not found", source=path) from e
        except OSError as e:
            raise ParseError(f"Cannot read source: {e.strerror or e}", source=path) from e

    async def _read_async(self, path: Path) -> str:
        try:
            async with aiofiles.open(path, "r", encoding=self.content_config.encoding) as f:
                return await f.read()
        except UnicodeDecodeError as e:
            raise ParseError(f"Cannot decode source: {e}", source=path) from e
        except (FileNotFoundError, IsADirectoryError) as e:
            raise NotFoundError("Source file not found", source=path) from e
        except OSError as e:
            raise ParseError(f"Cannot read source: {e.strerror or e}", source=path) from e

    @staticmethod
    def _title(frontmatter: Dict[str, Any], path: Path) -> str:
        title = frontmatter.get("title")
        if isinstance(title, bool) or not isinstance(title, (str, int, float)):
            raise ParseError("Front-matter is missing a title", source=path)
        title = str(title).strip()
        if not title:
            raise ParseError("Front-matter title is empty", source=path)
        return title

    @staticmethod
    def _identifier(frontmatter: Dict[str, Any], title: str, path: Path) -> str:
        slug = frontmatter.get("slug", title)
        if not isinstance(slug, str):
            raise ParseError("Front-matter slug must be a string", source=path)
        try:
            return slugify(slug)
        except ParseError as e:
            raise ParseError(e.message, source=path) from e

    @staticmethod
    def _ordinal(frontmatter: Dict[str, Any], path: Path, position: int) -> int:
        if "order" in frontmatter:
            order = frontmatter["order"]
            if isinstance(order, bool) or not isinstance(order, int):
                raise ParseError(
                    "Front-matter order must be an integer",
                    source=path,
                    details={"order": order},
                )
            return order
        match = _LEADING_NUMBER.match(path.name)
        if match:
            return int(match.group(1))
        return position

    @staticmethod
    def _optional_str(frontmatter: Dict[str, Any], key: str, path: Path) -> Optional[str]:
        value = frontmatter.get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            raise ParseError(f"Front-matter {key} must be a string", source=path)
        return value.strip() or None

    def _assemble(self, documents: Iterable[Document]) -> Collection:
        ordered: List[Document] = []
        ordinals: Dict[int, Document] = {}
        identifiers: Dict[str, Document] = {}
        for doc in sorted(documents, key=self._sort_key):
            clash = ordinals.get(doc.ordinal)
            if clash is not None:
                self._handle_error(
                    ParseError(
                        f"Duplicate ordinal {doc.ordinal}",
                        source=doc.source_path,
                        details={"other": str(clash.source_path)},
                    )
                )
                continue
            clash = identifiers.get(doc.identifier)
            if clash is not None:
                self._handle_error(
                    ParseError(
                        f"Duplicate identifier '{doc.identifier}'",
                        source=doc.source_path,
                        details={"other": str(clash.source_path)},
                    )
                )
                continue
            ordinals[doc.ordinal] = doc
            identifiers[doc.identifier] = doc
            ordered.append(doc)

        logger.info("collection_loaded", documents=len(ordered), skipped=len(self.errors))
        return Collection(ordered)

    @staticmethod
    def _sort_key(document: Document) -> Tuple[int, str]:
        return document.ordinal, str(document.source_path or "")

    def _handle_error(self, error: FolioError) -> None:
        if self.error_tolerance == ErrorTolerance.STRICT:
            raise error
        logger.warning(
            "document_skipped",
            error=error.message,
            source=error.source,
            error_type=type(error).__name__,
        )
        self.errors.append(error)


def load_collection(sources: Sources, config: Optional[FolioConfig] = None) -> Collection:
    """Load sources into a collection with the configured error policy."""
    return ContentLoader(config).load(sources)
