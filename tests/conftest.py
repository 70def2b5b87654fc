import os
from typing import Iterator, List

import pytest

from charsearch.repository import CharacterRepository
from charsearch.storage.base import DocumentStore
from charsearch.storage.embedded import EmbeddedDocumentStore
from charsearch.storage.models import Character

MONGO_URL_ENV = "CHARSEARCH_TEST_MONGO_URL"


def comic_characters() -> List[Character]:
    return [
        Character(name="Captain Marvel", publisher="Marvel"),
        Character(name="Joker", publisher="DC"),
        Character(name="Thanos", publisher="Marvel"),
    ]


@pytest.fixture
def store() -> EmbeddedDocumentStore:
    return EmbeddedDocumentStore()


@pytest.fixture
def repository(store: DocumentStore) -> Iterator[CharacterRepository]:
    repo = CharacterRepository(store)
    yield repo
    repo.drop_collection()


@pytest.fixture
def seeded(repository: CharacterRepository) -> List[Character]:
    return repository.insert(comic_characters())


@pytest.fixture
def mongo_store() -> Iterator[DocumentStore]:
    url = os.environ.get(MONGO_URL_ENV)
    if not url:
        pytest.skip(f"{MONGO_URL_ENV} not set")

    from charsearch.storage.mongo import MongoDocumentStore, get_client

    client = get_client(url, server_selection_timeout_ms=3000)
    store = MongoDocumentStore.from_client(client, "charsearch_test", "character")
    store.drop()
    try:
        yield store
    finally:
        store.drop()
        client.close()
