import logging

import pytest

from charsearch.config import load_settings
from charsearch.exceptions import ConfigError
from charsearch.logging_config import setup_logging
from charsearch.storage.embedded import EmbeddedDocumentStore
from charsearch.storage.factory import create_store
from charsearch.storage.mongo import MongoDocumentStore


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    # Keep a developer's .env out of the picture
    monkeypatch.chdir(tmp_path)
    for key in ("CHARSEARCH_STORE__BACKEND", "CHARSEARCH_MONGO__URL", "CHARSEARCH_MONGO__COLLECTION"):
        monkeypatch.delenv(key, raising=False)


def test_defaults() -> None:
    settings = load_settings()
    assert settings.store.backend == "mongo"
    assert settings.mongo.url == "mongodb://localhost:27017"
    assert settings.mongo.collection == "character"
    assert settings.app.transport == "stdio"


def test_nested_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CHARSEARCH_STORE__BACKEND", "embedded")
    monkeypatch.setenv("CHARSEARCH_MONGO__COLLECTION", "heroes")
    settings = load_settings()
    assert settings.store.backend == "embedded"
    assert settings.mongo.collection == "heroes"


def test_create_store_embedded(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CHARSEARCH_STORE__BACKEND", "embedded")
    assert isinstance(create_store(load_settings()), EmbeddedDocumentStore)


def test_create_store_mongo(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CHARSEARCH_MONGO__URL", "mongodb://127.0.0.1:1")
    monkeypatch.setenv("CHARSEARCH_MONGO__COLLECTION", "heroes")
    store = create_store(load_settings())
    assert isinstance(store, MongoDocumentStore)
    assert store.collection.name == "heroes"
    store.collection.database.client.close()


def test_create_store_rejects_bad_mongo_url(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CHARSEARCH_MONGO__URL", "postgresql://localhost/db")
    with pytest.raises(ConfigError):
        create_store(load_settings())


def test_setup_logging_accepts_level_names(tmp_path) -> None:
    log_file = tmp_path / "logs" / "charsearch.log"
    root = logging.getLogger()
    saved = (list(root.handlers), root.level)
    try:
        setup_logging("debug", log_file=str(log_file))
        assert root.level == logging.DEBUG
        logging.getLogger("charsearch.test").debug("hello")
        for h in root.handlers:
            h.flush()
        assert "hello" in log_file.read_text(encoding="utf-8")
    finally:
        for h in root.handlers:
            h.close()
        root.handlers[:] = saved[0]
        root.setLevel(saved[1])
