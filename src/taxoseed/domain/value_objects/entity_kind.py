"""Kinds of catalog records, each with its own identifier space."""

from enum import StrEnum


class EntityKind(StrEnum):
    """Catalog record kinds."""

    PROPERTY = "property"
    PROPERTY_VALUE = "property_value"
    CATEGORY = "category"
