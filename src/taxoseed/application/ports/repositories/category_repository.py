"""Category repository port."""

from typing import Protocol

from taxoseed.domain.entities import Category


class CategoryRepository(Protocol):
    """Port for category persistence."""

    async def get_by_id(self, category_id: str) -> Category | None: ...

    async def create(self, category: Category) -> Category: ...

    async def count(self, *, verticals_only: bool = False) -> int: ...

    async def delete_all(self) -> None: ...
