"""Reset catalog use case."""

import structlog

logger = structlog.get_logger(__name__)


class ResetCatalogUseCase:
    """Destroy every category, property and property value."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self) -> None:
        async with self._uow_factory() as uow:
            # categories reference properties, so they go first
            await uow.categories.delete_all()
            await uow.properties.delete_all()
        logger.info("catalog_reset")
