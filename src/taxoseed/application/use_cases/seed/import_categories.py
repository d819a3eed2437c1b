"""Import categories use case."""

from collections.abc import Sequence

import structlog

from taxoseed.application.dto.seed_dto import ImportResult
from taxoseed.application.serializers import CategorySerializer
from taxoseed.domain.entities import Category
from taxoseed.domain.exceptions import UnresolvedParent, UnresolvedProperty, ValidationError
from taxoseed.domain.value_objects import EntityKind

logger = structlog.get_logger(__name__)


def _deserialize_files(raw_files: Sequence[object]) -> list[list[Category]]:
    files: list[list[Category]] = []
    for index, records in enumerate(raw_files):
        if not isinstance(records, list):
            raise ValidationError(f"Category file #{index} must be a list of definitions")
        files.append([CategorySerializer.deserialize(raw) for raw in records])
    return files


class ImportCategoriesUseCase:
    """Persist per-vertical category lists in source order.

    A category may only name a parent that was already persisted earlier in
    the same pass, so the imported hierarchy is acyclic by construction.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, raw_files: Sequence[object]) -> ImportResult:
        """Import every file; one file is expected to hold one vertical."""
        files = _deserialize_files(raw_files)

        result = ImportResult(kind=EntityKind.CATEGORY)
        persisted: set[str] = set()
        known_properties: set[int] = set()
        async with self._uow_factory() as uow:
            for index, categories in enumerate(files):
                verticals = 0
                for category in categories:
                    if category.parent_id is not None and category.parent_id not in persisted:
                        raise UnresolvedParent(category.id, category.parent_id)
                    for property_id in category.attributes:
                        if property_id in known_properties:
                            continue
                        if await uow.properties.get_by_id(property_id) is None:
                            raise UnresolvedProperty(category.id, property_id)
                        known_properties.add(property_id)
                    await uow.categories.create(category)
                    persisted.add(category.id)
                    if category.is_vertical:
                        verticals += 1
                if verticals != 1:
                    logger.warning(
                        "category_file_vertical_count",
                        file_index=index,
                        verticals=verticals,
                    )
                logger.debug(
                    "category_file_imported",
                    file_index=index,
                    categories=len(categories),
                )
                result.created += len(categories)
                result.verticals += verticals

        logger.info(
            "categories_imported",
            files=len(files),
            created=result.created,
            verticals=result.verticals,
        )
        return result
