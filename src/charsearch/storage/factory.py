"""Build the configured document store from settings."""

from __future__ import annotations

from charsearch.config import Settings
from charsearch.exceptions import ConfigError

from .base import DocumentStore
from .embedded import EmbeddedDocumentStore
from .mongo import MongoDocumentStore, get_client


def create_store(settings: Settings) -> DocumentStore:
    """Create the store selected by ``settings.store.backend``."""
    backend = settings.store.backend
    if backend == "embedded":
        return EmbeddedDocumentStore()
    if backend == "mongo":
        cfg = settings.mongo
        client = get_client(
            cfg.url,
            server_selection_timeout_ms=cfg.server_selection_timeout_ms,
            app_name=cfg.app_name,
        )
        return MongoDocumentStore.from_client(client, cfg.database, cfg.collection)
    raise ConfigError(f"Unknown store backend: {backend!r}")
