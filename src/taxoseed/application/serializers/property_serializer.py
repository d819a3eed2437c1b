"""Property and property value serializers.

Raw layout (one entry of ``attributes/attributes.yml``)::

    id: 1
    name: Color
    friendly_id: color
    description: Defines the primary color or pattern
    values:
      - id: 1
        name: Black
        friendly_id: color__black
"""

from typing import Any

from taxoseed.application.serializers.fields import (
    read_int,
    read_int_id,
    read_list,
    read_str,
    reject_unknown_keys,
    require_mapping,
)
from taxoseed.domain.entities import Property, PropertyValue

PROPERTY_KEYS = frozenset({"id", "name", "friendly_id", "description", "values"})
VALUE_KEYS = frozenset({"id", "name", "friendly_id"})


class PropertyValueSerializer:
    """Codec for a value nested in its owner's ``values`` list."""

    @classmethod
    def deserialize(cls, raw: object, property_id: int, position: int) -> PropertyValue:
        """Build the value at `position` of property `property_id`.

        Errors are reported against the owning property definition.
        """
        prefix = f"values[{position}]."
        data = require_mapping(raw, prefix.rstrip("."), property_id)
        reject_unknown_keys(data, VALUE_KEYS, property_id, prefix=prefix)
        return PropertyValue(
            id=read_int(data, "id", property_id, prefix=prefix),
            name=read_str(data, "name", property_id, prefix=prefix),
            friendly_id=read_str(data, "friendly_id", property_id, prefix=prefix),
            property_id=property_id,
            position=position,
        )

    @classmethod
    def serialize(cls, value: PropertyValue) -> dict[str, Any]:
        return {
            "id": value.id,
            "name": value.name,
            "friendly_id": value.friendly_id,
        }


class PropertySerializer:
    """Codec between raw property definitions and Property entities."""

    @classmethod
    def deserialize(cls, raw: object) -> Property:
        """Build a Property from a raw definition.

        Raises MissingIdentifier, MissingField, TypeMismatch or UnknownField.
        Never touches storage.
        """
        data = require_mapping(raw, "property")
        property_id = read_int_id(data, "Property")
        reject_unknown_keys(data, PROPERTY_KEYS, property_id)
        return Property(
            id=property_id,
            name=read_str(data, "name", property_id),
            friendly_id=read_str(data, "friendly_id", property_id),
            description=read_str(data, "description", property_id, required=False),
            values=tuple(
                PropertyValueSerializer.deserialize(item, property_id, position)
                for position, item in enumerate(read_list(data, "values", property_id))
            ),
        )

    @classmethod
    def serialize(cls, prop: Property) -> dict[str, Any]:
        """Inverse of deserialize; optional keys are emitted only when set."""
        raw: dict[str, Any] = {
            "id": prop.id,
            "name": prop.name,
            "friendly_id": prop.friendly_id,
        }
        if prop.description is not None:
            raw["description"] = prop.description
        if prop.values:
            raw["values"] = [PropertyValueSerializer.serialize(v) for v in prop.values]
        return raw
