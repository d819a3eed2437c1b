"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from taxoseed.application.ports.repositories.category_repository import (
    CategoryRepository,
)
from taxoseed.application.ports.repositories.property_repository import (
    PropertyRepository,
)


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def properties(self) -> PropertyRepository: ...

    @property
    def categories(self) -> CategoryRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...
