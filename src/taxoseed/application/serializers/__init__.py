"""Definition serializers - raw mapping <-> domain entity."""

from taxoseed.application.serializers.category_serializer import CategorySerializer
from taxoseed.application.serializers.property_serializer import (
    PropertySerializer,
    PropertyValueSerializer,
)

__all__ = [
    "CategorySerializer",
    "PropertySerializer",
    "PropertyValueSerializer",
]
