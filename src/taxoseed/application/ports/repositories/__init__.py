"""Repository ports."""

from taxoseed.application.ports.repositories.category_repository import (
    CategoryRepository,
)
from taxoseed.application.ports.repositories.property_repository import (
    PropertyRepository,
)

__all__ = [
    "CategoryRepository",
    "PropertyRepository",
]
