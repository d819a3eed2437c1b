"""Domain entities."""

from taxoseed.domain.entities.category import Category
from taxoseed.domain.entities.property import Property, PropertyValue

__all__ = [
    "Category",
    "Property",
    "PropertyValue",
]
