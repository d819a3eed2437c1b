"""Pytest fixtures for taxoseed tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import replace
from datetime import UTC, datetime
from typing import Any

import pytest

from taxoseed.domain.entities import Category, Property
from taxoseed.domain.exceptions import DuplicateIdentifier
from taxoseed.domain.value_objects import EntityKind


# --- Fake repositories ---


class FakePropertyRepository:
    """In-memory property repository with kind-scoped id uniqueness."""

    def __init__(self) -> None:
        self._by_id: dict[int, Property] = {}

    def _check_value_ids(self, prop: Property) -> None:
        for other in self._by_id.values():
            if other.id == prop.id:
                continue
            taken = {v.id for v in other.values}
            for v in prop.values:
                if v.id in taken:
                    raise DuplicateIdentifier(EntityKind.PROPERTY_VALUE, v.id)

    async def get_by_id(self, property_id: int) -> Property | None:
        return self._by_id.get(property_id)

    async def create(self, prop: Property) -> Property:
        if prop.id in self._by_id:
            raise DuplicateIdentifier(EntityKind.PROPERTY, prop.id)
        self._check_value_ids(prop)
        self._by_id[prop.id] = replace(prop, created_at=datetime.now(UTC))
        return prop

    async def replace(self, prop: Property) -> Property:
        self._check_value_ids(prop)
        existing = self._by_id.get(prop.id)
        created_at = existing.created_at if existing else datetime.now(UTC)
        self._by_id[prop.id] = replace(prop, created_at=created_at)
        return prop

    async def delete_values(self, property_ids) -> None:
        for property_id in property_ids:
            if property_id in self._by_id:
                self._by_id[property_id] = replace(self._by_id[property_id], values=())

    async def count(self) -> int:
        return len(self._by_id)

    async def delete_all(self) -> None:
        self._by_id.clear()


class FakeCategoryRepository:
    """In-memory category repository."""

    def __init__(self) -> None:
        self._by_id: dict[str, Category] = {}

    async def get_by_id(self, category_id: str) -> Category | None:
        return self._by_id.get(category_id)

    async def create(self, category: Category) -> Category:
        if category.id in self._by_id:
            raise DuplicateIdentifier(EntityKind.CATEGORY, category.id)
        self._by_id[category.id] = replace(category, created_at=datetime.now(UTC))
        return category

    async def count(self, *, verticals_only: bool = False) -> int:
        if verticals_only:
            return sum(1 for c in self._by_id.values() if c.is_vertical)
        return len(self._by_id)

    async def delete_all(self) -> None:
        self._by_id.clear()


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work; rollback restores the state seen at begin()."""

    def __init__(self) -> None:
        self.properties = FakePropertyRepository()
        self.categories = FakeCategoryRepository()
        self.commits = 0
        self.rollbacks = 0
        self._snapshot: tuple[dict, dict] | None = None

    def begin(self) -> None:
        self._snapshot = (dict(self.properties._by_id), dict(self.categories._by_id))

    async def commit(self) -> None:
        self.commits += 1
        self._snapshot = None

    async def rollback(self) -> None:
        self.rollbacks += 1
        if self._snapshot is not None:
            self.properties._by_id, self.categories._by_id = self._snapshot
            self._snapshot = None


def make_uow_factory(uow: FakeUnitOfWork):
    """Factory sharing one in-memory store across calls, like a real database."""

    @asynccontextmanager
    async def factory() -> AsyncIterator[FakeUnitOfWork]:
        uow.begin()
        try:
            yield uow
            await uow.commit()
        except BaseException:
            await uow.rollback()
            raise

    return factory


# --- Raw definition builders ---


def make_raw_property(property_id: int, value_count: int = 2) -> dict[str, Any]:
    """Raw property definition; value ids are derived from the property id."""
    raw: dict[str, Any] = {
        "id": property_id,
        "name": f"Property {property_id}",
        "friendly_id": f"property_{property_id}",
    }
    if value_count:
        raw["values"] = [
            {
                "id": property_id * 100 + i,
                "name": f"Value {i}",
                "friendly_id": f"property_{property_id}__value_{i}",
            }
            for i in range(value_count)
        ]
    return raw


def make_raw_vertical(
    prefix: str,
    size: int,
    attributes: list[int] | None = None,
) -> list[dict[str, Any]]:
    """Raw category file: one vertical followed by size - 1 descendants.

    Odd children hang off the vertical, even ones off the previous child.
    """
    records: list[dict[str, Any]] = [{"id": prefix, "name": f"Vertical {prefix}"}]
    for i in range(1, size):
        parent = prefix if i % 2 else f"{prefix}-{i - 1}"
        record: dict[str, Any] = {"id": f"{prefix}-{i}", "name": f"Category {prefix}-{i}", "parent_id": parent}
        if attributes:
            record["attributes"] = list(attributes)
        records.append(record)
    return records


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory store for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager over the shared fake store."""
    return make_uow_factory(fake_uow)


@pytest.fixture
def raw_properties() -> list[dict[str, Any]]:
    """Ten property definitions, ids 1..10."""
    return [make_raw_property(i) for i in range(1, 11)]


@pytest.fixture
def raw_category_files() -> list[list[dict[str, Any]]]:
    """Two category files of sizes 3 and 5, one vertical each."""
    return [
        make_raw_vertical("aa", 3, attributes=[1, 2]),
        make_raw_vertical("bb", 5, attributes=[3]),
    ]
