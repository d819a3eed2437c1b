"""Domain value objects."""

from taxoseed.domain.value_objects.entity_kind import EntityKind

__all__ = [
    "EntityKind",
]
