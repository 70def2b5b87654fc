"""Executes text predicates against the document store."""

from __future__ import annotations

import logging
from typing import List, Optional

from charsearch.search.criteria import TextCriteria
from charsearch.search.sorting import Sort
from charsearch.storage.base import DocumentStore
from charsearch.storage.models import Character

logger = logging.getLogger(__name__)


class SearchExecutor:
    """Runs a ``TextCriteria`` with an ordering and maps hits to ``Character``."""

    def __init__(self, store: DocumentStore) -> None:
        self._store = store

    def search(self, criteria: TextCriteria, sort: Optional[Sort] = None) -> List[Character]:
        """Return every character matching ``criteria``, ordered by ``sort``.

        An empty criteria matches nothing and returns ``[]`` without a store
        round trip. Store failures propagate unchanged.

        Raises:
            QueryError: Unknown sort property, or the store rejected the query.
            StoreConnectivityError: The store could not be reached.
        """
        pairs = (sort or Sort.unsorted()).to_pairs(Character.FIELD_MAPPING)
        if criteria.is_empty():
            logger.debug("Empty text criteria, skipping query")
            return []

        docs = self._store.find_text(criteria, pairs)
        logger.debug("Text query %r matched %d documents", criteria.terms, len(docs))
        return [Character.from_document(d) for d in docs]
