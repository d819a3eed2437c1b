"""Import properties use case."""

from collections.abc import Sequence

import structlog

from taxoseed.application.dto.seed_dto import ImportResult
from taxoseed.application.serializers import PropertySerializer
from taxoseed.domain.entities import Property
from taxoseed.domain.exceptions import DuplicateIdentifier
from taxoseed.domain.value_objects import EntityKind

logger = structlog.get_logger(__name__)


def _check_unique_ids(properties: list[Property]) -> None:
    """Reject repeated property or value ids within one batch."""
    property_ids: set[int] = set()
    value_ids: set[int] = set()
    for prop in properties:
        if prop.id in property_ids:
            raise DuplicateIdentifier(EntityKind.PROPERTY, prop.id)
        property_ids.add(prop.id)
        for value in prop.values:
            if value.id in value_ids:
                raise DuplicateIdentifier(EntityKind.PROPERTY_VALUE, value.id)
            value_ids.add(value.id)


class ImportPropertiesUseCase:
    """Persist raw property definitions under their own identifiers."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, raw_definitions: Sequence[object]) -> ImportResult:
        """Deserialize the whole batch, then create or replace each property.

        Nothing is written unless every definition deserializes.
        """
        properties = [PropertySerializer.deserialize(raw) for raw in raw_definitions]
        _check_unique_ids(properties)

        result = ImportResult(kind=EntityKind.PROPERTY)
        async with self._uow_factory() as uow:
            stored_ids = {
                prop.id
                for prop in properties
                if await uow.properties.get_by_id(prop.id) is not None
            }
            # value ids may move between properties of the batch
            if stored_ids:
                await uow.properties.delete_values(sorted(stored_ids))

            for prop in properties:
                if prop.id in stored_ids:
                    await uow.properties.replace(prop)
                    result.replaced += 1
                else:
                    await uow.properties.create(prop)
                    result.created += 1

        logger.info(
            "properties_imported",
            created=result.created,
            replaced=result.replaced,
            values=sum(len(p.values) for p in properties),
        )
        return result
