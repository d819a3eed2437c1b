"""PostgreSQL property repository implementation."""

from collections.abc import Sequence

from psycopg import AsyncConnection
from psycopg.errors import UniqueViolation

from taxoseed.domain.entities import Property, PropertyValue
from taxoseed.domain.exceptions import DuplicateIdentifier
from taxoseed.domain.value_objects import EntityKind


def _property_from_rows(row: Sequence, value_rows: Sequence[Sequence]) -> Property:
    """Build Property from a `property` row and its `property_value` rows.

    value_rows: (id, name, friendly_id, position), ordered by position.
    """
    return Property(
        id=row[0],
        name=row[1],
        friendly_id=row[2],
        description=row[3],
        created_at=row[4],
        values=tuple(
            PropertyValue(
                id=v[0],
                name=v[1],
                friendly_id=v[2],
                property_id=row[0],
                position=v[3],
            )
            for v in value_rows
        ),
    )


class PostgresPropertyRepository:
    """Property repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, property_id: int) -> Property | None:
        """Get property with its values by id."""
        cur = await self._conn.execute(
            "SELECT id, name, friendly_id, description, created_at FROM property WHERE id = %s",
            (property_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        cur = await self._conn.execute(
            "SELECT id, name, friendly_id, position FROM property_value "
            "WHERE property_id = %s ORDER BY position",
            (property_id,),
        )
        return _property_from_rows(r, await cur.fetchall())

    async def create(self, prop: Property) -> Property:
        """Create property and its values with their given ids."""
        try:
            await self._conn.execute(
                "INSERT INTO property (id, name, friendly_id, description) "
                "VALUES (%s, %s, %s, %s)",
                (prop.id, prop.name, prop.friendly_id, prop.description),
            )
        except UniqueViolation as e:
            raise DuplicateIdentifier(EntityKind.PROPERTY, prop.id) from e
        await self._insert_values(prop)
        return prop

    async def replace(self, prop: Property) -> Property:
        """Create or overwrite property; its values are rewritten."""
        await self._conn.execute(
            "INSERT INTO property (id, name, friendly_id, description) "
            "VALUES (%s, %s, %s, %s) "
            "ON CONFLICT (id) DO UPDATE SET name = EXCLUDED.name, "
            "friendly_id = EXCLUDED.friendly_id, description = EXCLUDED.description",
            (prop.id, prop.name, prop.friendly_id, prop.description),
        )
        await self._conn.execute(
            "DELETE FROM property_value WHERE property_id = %s",
            (prop.id,),
        )
        await self._insert_values(prop)
        return prop

    async def delete_values(self, property_ids: Sequence[int]) -> None:
        """Delete the values owned by the given properties."""
        await self._conn.execute(
            "DELETE FROM property_value WHERE property_id = ANY(%s)",
            (list(property_ids),),
        )

    async def _insert_values(self, prop: Property) -> None:
        for v in prop.values:
            try:
                await self._conn.execute(
                    "INSERT INTO property_value (id, property_id, name, friendly_id, position) "
                    "VALUES (%s, %s, %s, %s, %s)",
                    (v.id, prop.id, v.name, v.friendly_id, v.position),
                )
            except UniqueViolation as e:
                raise DuplicateIdentifier(EntityKind.PROPERTY_VALUE, v.id) from e

    async def count(self) -> int:
        cur = await self._conn.execute("SELECT count(*) FROM property")
        r = await cur.fetchone()
        return r[0]

    async def delete_all(self) -> None:
        """Delete all properties; values cascade."""
        await self._conn.execute("DELETE FROM property")
