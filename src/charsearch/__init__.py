"""
charsearch - Free-text search over publisher-tagged characters in a document store.
"""

from charsearch.repository import CharacterRepository
from charsearch.search.criteria import TextCriteria, build_predicate, tokenize
from charsearch.search.sorting import Direction, Order, Sort
from charsearch.storage import Character, EmbeddedDocumentStore, MongoDocumentStore

__version__ = "0.1.0"

__all__ = [
    "Character",
    "CharacterRepository",
    "Direction",
    "EmbeddedDocumentStore",
    "MongoDocumentStore",
    "Order",
    "Sort",
    "TextCriteria",
    "build_predicate",
    "tokenize",
    "__version__",
]
