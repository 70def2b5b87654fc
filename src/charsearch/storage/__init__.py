"""Document stores and the Character entity."""

from .base import DocumentStore, TextIndexInfo
from .embedded import EmbeddedDocumentStore
from .factory import create_store
from .models import Character
from .mongo import MongoDocumentStore, get_client

__all__ = [
    "Character",
    "DocumentStore",
    "EmbeddedDocumentStore",
    "MongoDocumentStore",
    "TextIndexInfo",
    "create_store",
    "get_client",
]
