"""Property entity - attribute definition with its enumerated values."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class PropertyValue:
    """Allowed value of a property, ordered by position within its owner."""

    id: int
    name: str
    friendly_id: str
    property_id: int
    position: int


@dataclass(frozen=True)
class Property:
    """Property - attribute that categories reference by id."""

    id: int
    name: str
    friendly_id: str
    description: str | None = None
    values: tuple[PropertyValue, ...] = ()
    created_at: datetime | None = field(default=None, compare=False)
