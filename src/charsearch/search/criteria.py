"""Text predicates for the character collection.

A ``TextCriteria`` holds the terms of a "match any" full-text query. It is a
plain value: building one never touches the store.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple


def tokenize(text: str) -> List[str]:
    """Split ``text`` on runs of whitespace.

    Leading and trailing whitespace produce no empty tokens, so an empty or
    all-whitespace string yields ``[]``.
    """
    return text.split()


def _neutralize(term: str) -> str:
    # MongoDB reads a leading "-" as negation and quotes as a phrase
    return term.replace('"', " ").lstrip("-").strip()


@dataclass(frozen=True, slots=True)
class TextCriteria:
    """Matches a document when at least one term occurs in a text-indexed field."""

    terms: Tuple[str, ...] = ()

    @classmethod
    def matching_any(cls, *words: str) -> TextCriteria:
        """Build criteria from terms the caller already knows."""
        return cls(terms=tuple(w for w in words if w))

    def is_empty(self) -> bool:
        return not self.terms

    def search_string(self) -> str:
        """Render the terms as a MongoDB ``$search`` string (space separated = OR)."""
        parts = (_neutralize(t) for t in self.terms)
        return " ".join(p for p in parts if p)

    def get_criteria_object(self) -> Dict[str, Any]:
        return {"$text": {"$search": self.search_string()}}


def build_predicate(text: str) -> TextCriteria:
    """Turn a free-form query string into a match-any ``TextCriteria``."""
    return TextCriteria(terms=tuple(tokenize(text)))
