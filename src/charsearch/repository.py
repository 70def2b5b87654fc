"""Character repository: text search plus the basic persistence operations.

``find_by_text`` is the main entry point. It ensures the text index, turns the
query string into a match-any predicate and executes it, on every call.
``find_all_by`` runs a caller-built predicate directly.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Union

from charsearch.search.criteria import TextCriteria, build_predicate
from charsearch.search.executor import SearchExecutor
from charsearch.search.index import TextIndexManager
from charsearch.search.sorting import Sort
from charsearch.storage.base import DocumentStore
from charsearch.storage.models import Character

logger = logging.getLogger(__name__)


class CharacterRepository:
    """Stateless facade over a shared, externally owned ``DocumentStore``."""

    def __init__(self, store: DocumentStore) -> None:
        self._store = store
        self._index_manager = TextIndexManager(store, Character.TEXT_INDEXED_FIELDS)
        self._executor = SearchExecutor(store)

    @property
    def store(self) -> DocumentStore:
        return self._store

    # ----- Search -----

    def find_by_text(self, text: str, sort: Optional[Sort] = None) -> List[Character]:
        """Return characters whose name or publisher contains any word of ``text``.

        Empty or whitespace-only text returns ``[]``.
        """
        self._index_manager.ensure_text_index()
        criteria = build_predicate(text)
        return self._executor.search(criteria, sort)

    def find_all_by(self, criteria: TextCriteria, sort: Optional[Sort] = None) -> List[Character]:
        """Execute a pre-built predicate. The text index must already exist."""
        return self._executor.search(criteria, sort)

    # ----- Persistence -----

    def insert(self, characters: Union[Character, Iterable[Character]]) -> List[Character]:
        """Insert new characters and return them with their assigned ids."""
        items = [characters] if isinstance(characters, Character) else list(characters)
        for c in items:
            if c.id is not None:
                raise ValueError(f"Character {c.name!r} already has id {c.id!r}; use save()")
        ids = self._store.insert_many([c.to_document() for c in items])
        logger.debug("Inserted %d characters", len(ids))
        return [c.with_id(doc_id) for c, doc_id in zip(items, ids)]

    def save(self, character: Character) -> Character:
        """Insert a new character, or overwrite the fields of an existing one."""
        if character.id is None:
            return self.insert(character)[0]
        if not self._store.replace_one(character.id, character.to_document()):
            raise LookupError(f"No character with id {character.id!r}")
        return character

    def find_by_id(self, character_id: str) -> Optional[Character]:
        doc = self._store.find_one(character_id)
        return Character.from_document(doc) if doc is not None else None

    def delete(self, character: Union[Character, str]) -> bool:
        character_id = character.id if isinstance(character, Character) else character
        if character_id is None:
            return False
        return self._store.delete_one(character_id)

    def count(self) -> int:
        return self._store.count()

    def drop_collection(self) -> None:
        """Remove every character and index. Intended for test teardown."""
        self._store.drop()
