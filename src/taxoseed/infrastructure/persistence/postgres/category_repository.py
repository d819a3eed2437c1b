"""PostgreSQL category repository implementation."""

from collections.abc import Sequence

from psycopg import AsyncConnection
from psycopg.errors import UniqueViolation

from taxoseed.domain.entities import Category
from taxoseed.domain.exceptions import DuplicateIdentifier
from taxoseed.domain.value_objects import EntityKind


def _category_from_rows(row: Sequence, attribute_rows: Sequence[Sequence]) -> Category:
    """Build Category from a `category` row and its `category_property` rows.

    attribute_rows: (property_id,), ordered by position.
    """
    return Category(
        id=row[0],
        name=row[1],
        parent_id=row[2],
        created_at=row[3],
        attributes=tuple(a[0] for a in attribute_rows),
    )


class PostgresCategoryRepository:
    """Category repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, category_id: str) -> Category | None:
        """Get category with its attribute ids."""
        cur = await self._conn.execute(
            "SELECT id, name, parent_id, created_at FROM category WHERE id = %s",
            (category_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        cur = await self._conn.execute(
            "SELECT property_id FROM category_property "
            "WHERE category_id = %s ORDER BY position",
            (category_id,),
        )
        return _category_from_rows(r, await cur.fetchall())

    async def create(self, category: Category) -> Category:
        """Create category with its given id; parent must already exist."""
        try:
            await self._conn.execute(
                "INSERT INTO category (id, name, parent_id) VALUES (%s, %s, %s)",
                (category.id, category.name, category.parent_id),
            )
        except UniqueViolation as e:
            raise DuplicateIdentifier(EntityKind.CATEGORY, category.id) from e
        for position, property_id in enumerate(category.attributes):
            await self._conn.execute(
                "INSERT INTO category_property (category_id, position, property_id) "
                "VALUES (%s, %s, %s)",
                (category.id, position, property_id),
            )
        return category

    async def count(self, *, verticals_only: bool = False) -> int:
        """Count categories; verticals_only restricts to roots."""
        q = "SELECT count(*) FROM category"
        if verticals_only:
            q += " WHERE parent_id IS NULL"
        cur = await self._conn.execute(q)
        r = await cur.fetchone()
        return r[0]

    async def delete_all(self) -> None:
        """Delete all categories; attribute links cascade."""
        await self._conn.execute("DELETE FROM category")
