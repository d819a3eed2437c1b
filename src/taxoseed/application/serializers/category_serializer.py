"""Category serializer.

Raw layout (one entry of ``categories/<vertical>.yml``)::

    id: aa-1
    name: Clothing
    parent_id: aa
    attributes: [1, 3]
"""

from typing import Any

from taxoseed.application.serializers.fields import (
    read_int_list,
    read_str,
    read_str_id,
    reject_unknown_keys,
    require_mapping,
)
from taxoseed.domain.entities import Category

CATEGORY_KEYS = frozenset({"id", "name", "parent_id", "attributes"})


class CategorySerializer:
    """Codec between raw category definitions and Category entities."""

    @classmethod
    def deserialize(cls, raw: object) -> Category:
        """Build a Category from a raw definition. Never touches storage."""
        data = require_mapping(raw, "category")
        category_id = read_str_id(data, "Category")
        reject_unknown_keys(data, CATEGORY_KEYS, category_id)
        return Category(
            id=category_id,
            name=read_str(data, "name", category_id),
            parent_id=read_str(data, "parent_id", category_id, required=False),
            attributes=read_int_list(data, "attributes", category_id),
        )

    @classmethod
    def serialize(cls, category: Category) -> dict[str, Any]:
        raw: dict[str, Any] = {"id": category.id, "name": category.name}
        if category.parent_id is not None:
            raw["parent_id"] = category.parent_id
        if category.attributes:
            raw["attributes"] = list(category.attributes)
        return raw
