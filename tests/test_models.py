import pytest
from bson import ObjectId
from pydantic import ValidationError

from charsearch.storage.models import Character


def test_name_and_publisher_are_required() -> None:
    with pytest.raises(ValidationError):
        Character(name="Joker")  # type: ignore[call-arg]
    with pytest.raises(ValidationError):
        Character(name="", publisher="DC")
    with pytest.raises(ValidationError):
        Character(name="Joker", publisher="")


def test_whitespace_only_values_are_rejected() -> None:
    with pytest.raises(ValidationError):
        Character(name="   ", publisher="DC")
    with pytest.raises(ValidationError):
        Character(name="Joker", publisher=" \t")
    c = Character(name="  Joker ", publisher="DC")
    assert c.name == "Joker"
    with pytest.raises(ValidationError):
        c.publisher = "  "


def test_fields_can_be_updated_but_not_emptied() -> None:
    c = Character(name="Joker", publisher="DC")
    c.publisher = "DC Comics"
    assert c.publisher == "DC Comics"
    with pytest.raises(ValidationError):
        c.name = ""


def test_id_is_immutable() -> None:
    c = Character(name="Joker", publisher="DC").with_id("abc")
    with pytest.raises(ValidationError):
        c.id = "other"
    assert c.id == "abc"


def test_document_mapping() -> None:
    oid = ObjectId()
    c = Character.from_document({"_id": oid, "name": "Thanos", "publisher": "Marvel"})
    assert c.id == str(oid)
    assert c.to_document() == {"_id": str(oid), "name": "Thanos", "publisher": "Marvel"}
    assert Character(name="Thanos", publisher="Marvel").to_document() == {
        "name": "Thanos",
        "publisher": "Marvel",
    }


def test_text_indexed_fields() -> None:
    assert Character.TEXT_INDEXED_FIELDS == ("name", "publisher")
