"""Pydantic models for charsearch storage.

Defines the searchable ``Character`` entity and its mapping to raw store
documents.
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Character(BaseModel):
    """A named character tagged with its publisher."""

    model_config = ConfigDict(validate_assignment=True, str_strip_whitespace=True)

    # Fields covered by the collection's text index
    TEXT_INDEXED_FIELDS: ClassVar[Tuple[str, ...]] = ("name", "publisher")
    # Entity attribute -> document key
    FIELD_MAPPING: ClassVar[Dict[str, str]] = {
        "id": "_id",
        "name": "name",
        "publisher": "publisher",
    }

    id: Optional[str] = Field(default=None, frozen=True)
    name: str = Field(min_length=1)
    publisher: str = Field(min_length=1)

    def to_document(self) -> Dict[str, Any]:
        """Return the store document for this character."""
        doc: Dict[str, Any] = {"name": self.name, "publisher": self.publisher}
        if self.id is not None:
            doc["_id"] = self.id
        return doc

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> Character:
        raw_id = doc.get("_id")
        return cls(
            id=str(raw_id) if raw_id is not None else None,
            name=doc["name"],
            publisher=doc["publisher"],
        )

    def with_id(self, doc_id: Any) -> Character:
        """Return a copy carrying the identifier assigned by the store."""
        return Character(id=str(doc_id), name=self.name, publisher=self.publisher)
