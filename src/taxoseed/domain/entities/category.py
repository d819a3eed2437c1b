"""Category entity - node of the taxonomy forest."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class Category:
    """Category - parent is referenced by id; no parent means a vertical."""

    id: str
    name: str
    parent_id: str | None = None
    attributes: tuple[int, ...] = ()
    created_at: datetime | None = field(default=None, compare=False)

    @property
    def is_vertical(self) -> bool:
        return self.parent_id is None
