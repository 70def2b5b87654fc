"""Abstract document store interface.

Defines the minimal surface the search core needs from a document database
(CRUD plus an idempotent text index and text queries), enabling a MongoDB
backend in production and an in-process backend for tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, List, Optional, Sequence, Tuple

from charsearch.search.criteria import TextCriteria

# (document key, 1 for ascending or -1 for descending)
SortPairs = List[Tuple[str, int]]


@dataclass(frozen=True, slots=True)
class TextIndexInfo:
    """Describes one text index active on a collection."""

    name: str
    fields: FrozenSet[str]


class DocumentStore(ABC):
    """Abstract interface for a collection of character documents.

    Implementations translate their driver failures into
    ``StoreConnectivityError``, ``IndexDefinitionError`` and ``QueryError``.
    """

    @abstractmethod
    def ensure_text_index(self, fields: Sequence[str]) -> None:
        """Create a text index over ``fields`` unless an identical one exists."""

    @abstractmethod
    def text_indexes(self) -> List[TextIndexInfo]:
        """Return the text indexes currently defined on the collection."""

    @abstractmethod
    def find_text(self, criteria: TextCriteria, sort: SortPairs) -> List[Dict[str, Any]]:
        """Return documents matching any criteria term, ordered by ``sort``."""

    @abstractmethod
    def insert_many(self, docs: Sequence[Dict[str, Any]]) -> List[Any]:
        """Insert documents and return the identifiers assigned to them."""

    @abstractmethod
    def find_one(self, doc_id: str) -> Optional[Dict[str, Any]]:
        """Return the document with the given id, or None."""

    @abstractmethod
    def replace_one(self, doc_id: str, doc: Dict[str, Any]) -> bool:
        """Replace the fields of an existing document. Returns False if missing."""

    @abstractmethod
    def delete_one(self, doc_id: str) -> bool:
        """Delete a document by id. Returns False if it did not exist."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored documents."""

    @abstractmethod
    def drop(self) -> None:
        """Drop every document and index of the collection."""
        raise NotImplementedError
