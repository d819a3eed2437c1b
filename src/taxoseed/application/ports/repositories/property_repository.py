"""Property repository port."""

from collections.abc import Sequence
from typing import Protocol

from taxoseed.domain.entities import Property


class PropertyRepository(Protocol):
    """Port for property persistence. Values are stored with their owner."""

    async def get_by_id(self, property_id: int) -> Property | None: ...

    async def create(self, prop: Property) -> Property: ...

    async def replace(self, prop: Property) -> Property: ...

    async def delete_values(self, property_ids: Sequence[int]) -> None: ...

    async def count(self) -> int: ...

    async def delete_all(self) -> None: ...
