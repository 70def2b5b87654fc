"""Text index management for the character collection."""

from __future__ import annotations

import logging
from typing import Sequence, Tuple

from charsearch.storage.base import DocumentStore
from charsearch.storage.models import Character

logger = logging.getLogger(__name__)


class TextIndexManager:
    """Ensures the collection's text index exists before a search runs.

    Keeps no record of earlier calls: every ``ensure_text_index`` goes to the
    store, which treats an identical definition as a no-op and serialises
    overlapping creations.
    """

    def __init__(
        self,
        store: DocumentStore,
        fields: Sequence[str] = Character.TEXT_INDEXED_FIELDS,
    ) -> None:
        self._store = store
        self._fields: Tuple[str, ...] = tuple(fields)

    @property
    def fields(self) -> Tuple[str, ...]:
        return self._fields

    def ensure_text_index(self) -> None:
        """Create the text index over the configured fields if it is missing.

        Raises:
            IndexDefinitionError: The store rejected the index definition.
            StoreConnectivityError: The store could not be reached.
        """
        logger.debug("Ensuring text index on %s", ", ".join(self._fields))
        self._store.ensure_text_index(self._fields)
