"""In-process document store with whoosh-backed text matching.

Documents live in an insertion-ordered dict; the text index is a whoosh index
in RAM that is built lazily by ``ensure_text_index`` and kept in step with
every write afterwards. Behaviour follows the MongoDB backend where tests
depend on it: one text index per collection, text queries fail without one,
stemmed case-insensitive matching, binary string ordering.
"""

from __future__ import annotations

import copy
import logging
import threading
from typing import Any, Dict, List, Optional, Sequence, Set, Tuple

from bson import ObjectId
from whoosh.analysis import StandardAnalyzer, StemFilter
from whoosh.fields import ID, TEXT, Schema
from whoosh.filedb.filestore import RamStorage
from whoosh.index import Index
from whoosh.query import Or, Query, Term

from charsearch.exceptions import IndexDefinitionError, QueryError
from charsearch.search.criteria import TextCriteria

from .base import DocumentStore, SortPairs, TextIndexInfo

logger = logging.getLogger(__name__)

# whoosh field holding the document id; underscore names are reserved by whoosh
_DOCID = "docid"


def _index_name(fields: Sequence[str]) -> str:
    # Same naming scheme MongoDB uses for auto-named indexes
    return "_".join(f"{f}_text" for f in fields)


def _make_schema(fields: Sequence[str]) -> Schema:
    # Snowball English stemming, single-letter words kept, as in MongoDB text indexes
    analyzer = StandardAnalyzer(minsize=1) | StemFilter(lang="en")
    schema = Schema(**{_DOCID: ID(stored=True, unique=True)})
    for f in fields:
        schema.add(f, TEXT(analyzer=analyzer))
    return schema


def _sort_key(value: Any) -> Tuple[bool, Any]:
    # Missing values order before present ones, as in MongoDB
    return (value is not None, value)


class EmbeddedDocumentStore(DocumentStore):
    """A single in-memory collection. Thread-safe; all access is serialised."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._documents: Dict[str, Dict[str, Any]] = {}
        self._index: Optional[Index] = None
        self._text_fields: Tuple[str, ...] = ()

    # ----- Text index -----

    def ensure_text_index(self, fields: Sequence[str]) -> None:
        requested = tuple(fields)
        if not requested:
            raise IndexDefinitionError("A text index needs at least one field")
        with self._lock:
            if self._index is not None:
                if set(requested) == set(self._text_fields):
                    return
                raise IndexDefinitionError(
                    "Only one text index per collection is allowed; found existing "
                    f"text index {_index_name(self._text_fields)}"
                )
            index = RamStorage().create_index(_make_schema(requested))
            writer = index.writer()
            for doc_id, doc in self._documents.items():
                writer.add_document(**self._index_row(doc_id, doc, requested))
            writer.commit()
            self._index = index
            self._text_fields = requested
            logger.info(
                "Created text index %s over %d documents",
                _index_name(requested),
                len(self._documents),
            )

    def text_indexes(self) -> List[TextIndexInfo]:
        with self._lock:
            if self._index is None:
                return []
            return [
                TextIndexInfo(name=_index_name(self._text_fields), fields=frozenset(self._text_fields))
            ]

    @staticmethod
    def _index_row(doc_id: str, doc: Dict[str, Any], fields: Sequence[str]) -> Dict[str, str]:
        row = {_DOCID: doc_id}
        for f in fields:
            value = doc.get(f)
            row[f] = "" if value is None else str(value)
        return row

    def _reindex(self, doc_id: str, doc: Optional[Dict[str, Any]]) -> None:
        """Update or remove one document in the text index, if there is one."""
        if self._index is None:
            return
        writer = self._index.writer()
        if doc is None:
            writer.delete_by_term(_DOCID, doc_id)
        else:
            writer.update_document(**self._index_row(doc_id, doc, self._text_fields))
        writer.commit()

    # ----- Queries -----

    def _build_query(self, index: Index, criteria: TextCriteria) -> Optional[Query]:
        schema = index.schema
        subqueries: List[Query] = []
        for term in criteria.terms:
            for f in self._text_fields:
                for token in schema[f].process_text(term, mode="query"):
                    subqueries.append(Term(f, token))
        if not subqueries:
            return None
        return Or(subqueries)

    def find_text(self, criteria: TextCriteria, sort: SortPairs) -> List[Dict[str, Any]]:
        with self._lock:
            if self._index is None:
                raise QueryError("text index required for $text query")
            query = self._build_query(self._index, criteria)
            if query is None:
                return []
            with self._index.searcher() as searcher:
                matched: Set[str] = {hit[_DOCID] for hit in searcher.search(query, limit=None)}
            docs = [copy.deepcopy(d) for i, d in self._documents.items() if i in matched]

        # Stable sorts from the last key to the first keep ties in insertion order
        for key, direction in reversed(sort):
            docs.sort(key=lambda d: _sort_key(d.get(key)), reverse=direction < 0)
        return docs

    # ----- CRUD -----

    def insert_many(self, docs: Sequence[Dict[str, Any]]) -> List[Any]:
        ids: List[Any] = []
        with self._lock:
            for doc in docs:
                doc_id = str(doc.get("_id") or ObjectId())
                if doc_id in self._documents:
                    raise QueryError(f"Duplicate key: _id {doc_id!r}")
                stored = dict(doc, _id=doc_id)
                self._documents[doc_id] = stored
                self._reindex(doc_id, stored)
                ids.append(doc_id)
        return ids

    def find_one(self, doc_id: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            doc = self._documents.get(doc_id)
            return copy.deepcopy(doc) if doc is not None else None

    def replace_one(self, doc_id: str, doc: Dict[str, Any]) -> bool:
        with self._lock:
            if doc_id not in self._documents:
                return False
            stored = {k: v for k, v in doc.items() if k != "_id"}
            stored["_id"] = doc_id
            self._documents[doc_id] = stored
            self._reindex(doc_id, stored)
            return True

    def delete_one(self, doc_id: str) -> bool:
        with self._lock:
            if self._documents.pop(doc_id, None) is None:
                return False
            self._reindex(doc_id, None)
            return True

    def count(self) -> int:
        with self._lock:
            return len(self._documents)

    def drop(self) -> None:
        with self._lock:
            self._documents.clear()
            self._index = None
            self._text_fields = ()
