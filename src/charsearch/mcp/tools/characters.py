"""Character tools for FastMCP.

Expose text search over the character collection and a way to add entries.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from fastmcp import FastMCP

from charsearch.repository import CharacterRepository
from charsearch.search.sorting import Sort
from charsearch.storage.models import Character


def _serialize_character(c: Character) -> Dict[str, Any]:
    return {"id": c.id, "name": c.name, "publisher": c.publisher}


def register_character_tools(mcp: FastMCP, get_state: Callable[[], Any]) -> None:
    """Register character tools on the given FastMCP instance.

    Reads the repository from ``state.repository``.
    """

    def _repository() -> CharacterRepository:
        state = get_state()
        repo = getattr(state, "repository", None)
        if repo is None:
            raise RuntimeError("Character repository is not initialized")
        return repo

    @mcp.tool
    def character_search(text: str, sort: Optional[str] = "name") -> Dict[str, Any]:
        """Find characters whose name or publisher contains any word of `text`.

        Parameters
        ----------
        text: str
            Free-form words, e.g. "captain marvel". Any word may match.
        sort: str | None
            Comma-separated properties (id, name, publisher); prefix with "-" for
            descending, e.g. "-publisher,name". Default: "name".
        """
        repo = _repository()
        hits = repo.find_by_text(text, Sort.parse(sort or ""))
        items: List[Dict[str, Any]] = [_serialize_character(c) for c in hits]
        return {"count": len(items), "characters": items}

    @mcp.tool
    def character_add(name: str, publisher: str) -> Dict[str, Any]:
        """Store a new character and return it with its assigned id."""
        repo = _repository()
        created = repo.insert(Character(name=name, publisher=publisher))[0]
        return _serialize_character(created)
