"""Document and collection models."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, Optional, Tuple, overload

from folio.exceptions import ParseError


@dataclass(frozen=True)
class Document:
    """One chapter: its front-matter derived metadata and raw markdown body."""

    identifier: str
    title: str
    ordinal: int
    body: str
    layout: Optional[str] = None
    description: Optional[str] = None
    source_path: Optional[Path] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert the document to a plain dictionary.

        Returns:
            Dictionary with all document fields; the source path as a string.
        """
        return {
            "identifier": self.identifier,
            "title": self.title,
            "ordinal": self.ordinal,
            "layout": self.layout,
            "description": self.description,
            "source_path": str(self.source_path) if self.source_path else None,
            "body": self.body,
        }


class Collection:
    """Ordered, immutable sequence of documents in reading order.

    Ordinals must be strictly increasing and identifiers unique.
    """

    __slots__ = ("_documents",)

    def __init__(self, documents: Iterable[Document] = ()) -> None:
        docs = tuple(documents)
        self._validate(docs)
        self._documents: Tuple[Document, ...] = docs

    @staticmethod
    def _validate(documents: Tuple[Document, ...]) -> None:
        seen_ids: Dict[str, Document] = {}
        previous: Optional[Document] = None
        for doc in documents:
            if previous is not None and doc.ordinal <= previous.ordinal:
                raise ParseError(
                    f"Ordinal {doc.ordinal} of '{doc.identifier}' does not follow "
                    f"ordinal {previous.ordinal} of '{previous.identifier}'",
                    source=doc.source_path,
                    details={"ordinal": doc.ordinal},
                )
            if doc.identifier in seen_ids:
                raise ParseError(
                    f"Duplicate document identifier '{doc.identifier}'",
                    source=doc.source_path,
                    details={"other": str(seen_ids[doc.identifier].source_path)},
                )
            seen_ids[doc.identifier] = doc
            previous = doc

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[Document]:
        return iter(self._documents)

    @overload
    def __getitem__(self, index: int) -> Document: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[Document, ...]: ...

    def __getitem__(self, index):
        return self._documents[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Collection):
            return NotImplemented
        return self._documents == other._documents

    def __hash__(self) -> int:
        return hash(self._documents)

    def __repr__(self) -> str:
        return f"Collection({[d.identifier for d in self._documents]!r})"

    def get(self, identifier: str) -> Optional[Document]:
        """Look up a document by identifier."""
        for doc in self._documents:
            if doc.identifier == identifier:
                return doc
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {"documents": [doc.to_dict() for doc in self._documents]}
