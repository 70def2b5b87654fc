"""Custom exception hierarchy for charsearch.

These exceptions allow callers to discriminate error categories
and handle them appropriately while preserving the original context.
Store failures are never retried here; they are re-raised with the
driver exception chained as ``__cause__``.
"""

from __future__ import annotations


class CharSearchError(Exception):
    """Base class for all charsearch exceptions."""


class ConfigError(CharSearchError):
    """Raised when configuration loading or validation fails."""


class StorageError(CharSearchError):
    """Raised when the document store encounters an error."""


class StoreConnectivityError(StorageError):
    """Raised when the document store cannot be reached."""


class IndexDefinitionError(StorageError):
    """Raised when the store rejects or cannot create the text index."""


class QueryError(StorageError):
    """Raised for malformed sort specifications or queries rejected by the store."""
