"""Unit tests for CategorySerializer."""

from datetime import UTC, datetime
from dataclasses import replace

import pytest

from taxoseed.application.serializers import CategorySerializer
from taxoseed.domain.entities import Category
from taxoseed.domain.exceptions import (
    MissingField,
    MissingIdentifier,
    TypeMismatch,
    UnknownField,
)


def test_deserialize_vertical() -> None:
    category = CategorySerializer.deserialize({"id": "aa", "name": "Apparel & Accessories"})
    assert category == Category(id="aa", name="Apparel & Accessories")
    assert category.is_vertical


def test_deserialize_child_with_attributes() -> None:
    category = CategorySerializer.deserialize(
        {"id": "aa-1", "name": "Clothing", "parent_id": "aa", "attributes": [3, 1]}
    )
    assert category.parent_id == "aa"
    assert category.attributes == (3, 1)
    assert not category.is_vertical


def test_null_parent_is_vertical() -> None:
    category = CategorySerializer.deserialize({"id": "aa", "name": "A", "parent_id": None})
    assert category.is_vertical


def test_missing_id() -> None:
    with pytest.raises(MissingIdentifier):
        CategorySerializer.deserialize({"name": "Clothing"})


@pytest.mark.parametrize("bad_id", [1, "", ["aa"]])
def test_id_wrong_type(bad_id: object) -> None:
    with pytest.raises(TypeMismatch) as exc_info:
        CategorySerializer.deserialize({"id": bad_id, "name": "Clothing"})
    assert exc_info.value.field == "id"


def test_missing_name() -> None:
    with pytest.raises(MissingField) as exc_info:
        CategorySerializer.deserialize({"id": "aa-1"})
    assert exc_info.value.field == "name"
    assert exc_info.value.identifier == "aa-1"


def test_null_name_is_type_mismatch() -> None:
    with pytest.raises(TypeMismatch) as exc_info:
        CategorySerializer.deserialize({"id": "aa-1", "name": None})
    assert exc_info.value.field == "name"
    assert exc_info.value.identifier == "aa-1"


def test_unknown_key_rejected() -> None:
    with pytest.raises(UnknownField) as exc_info:
        CategorySerializer.deserialize({"id": "aa-1", "name": "Clothing", "parnet_id": "aa"})
    assert exc_info.value.field == "parnet_id"
    assert exc_info.value.identifier == "aa-1"


def test_parent_wrong_type() -> None:
    with pytest.raises(TypeMismatch) as exc_info:
        CategorySerializer.deserialize({"id": "aa-1", "name": "Clothing", "parent_id": 1})
    assert exc_info.value.field == "parent_id"


def test_attribute_not_an_integer() -> None:
    with pytest.raises(TypeMismatch) as exc_info:
        CategorySerializer.deserialize({"id": "aa-1", "name": "Clothing", "attributes": [1, "color"]})
    assert exc_info.value.field == "attributes[1]"
    assert exc_info.value.identifier == "aa-1"


def test_serialize_reproduces_definition() -> None:
    raw = {"id": "aa-1", "name": "Clothing", "parent_id": "aa", "attributes": [1, 2]}
    assert CategorySerializer.serialize(CategorySerializer.deserialize(raw)) == raw


def test_serialize_vertical_omits_parent_and_attributes() -> None:
    assert CategorySerializer.serialize(Category(id="aa", name="A")) == {"id": "aa", "name": "A"}


def test_created_at_excluded_from_equality() -> None:
    category = CategorySerializer.deserialize({"id": "aa", "name": "A"})
    stored = replace(category, created_at=datetime.now(UTC))
    assert stored == category
