"""Seed catalog use case - load definitions and run both importers."""

import structlog

from taxoseed.application.dto.seed_dto import SeedSummary
from taxoseed.application.ports import DefinitionSource
from taxoseed.application.use_cases.seed.import_categories import ImportCategoriesUseCase
from taxoseed.application.use_cases.seed.import_properties import ImportPropertiesUseCase
from taxoseed.application.use_cases.seed.reset_catalog import ResetCatalogUseCase

logger = structlog.get_logger(__name__)


class SeedCatalogUseCase:
    """Seed the catalog from a definition source.

    Properties are imported before categories so that category attribute
    references resolve. Each importer commits its own transaction.
    """

    def __init__(
        self,
        import_properties: ImportPropertiesUseCase,
        import_categories: ImportCategoriesUseCase,
        reset_catalog: ResetCatalogUseCase,
    ) -> None:
        self._import_properties = import_properties
        self._import_categories = import_categories
        self._reset_catalog = reset_catalog

    async def execute(self, source: DefinitionSource, reset: bool = False) -> SeedSummary:
        raw_properties = source.load_properties()
        raw_category_files = source.load_category_files()

        if reset:
            await self._reset_catalog.execute()

        properties = await self._import_properties.execute(raw_properties)
        categories = await self._import_categories.execute(raw_category_files)

        logger.info(
            "catalog_seeded",
            properties=properties.total,
            categories=categories.total,
            verticals=categories.verticals,
            reset=reset,
        )
        return SeedSummary(properties=properties, categories=categories, reset=reset)
