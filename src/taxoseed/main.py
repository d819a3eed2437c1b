"""Application entry point and composition root."""

import argparse
import asyncio

import structlog

from taxoseed import __version__
from taxoseed.application.use_cases.seed.import_categories import ImportCategoriesUseCase
from taxoseed.application.use_cases.seed.import_properties import ImportPropertiesUseCase
from taxoseed.application.use_cases.seed.reset_catalog import ResetCatalogUseCase
from taxoseed.application.use_cases.seed.seed_catalog import SeedCatalogUseCase
from taxoseed.application.use_cases.seed.verify_seed import VerifySeedUseCase
from taxoseed.config import Settings, get_settings
from taxoseed.domain.exceptions import TaxoseedError
from taxoseed.infrastructure.definitions.yaml_source import YamlDefinitionSource
from taxoseed.infrastructure.persistence.postgres.connection import create_pool
from taxoseed.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory,
)
from taxoseed.logging import setup_logging

logger = structlog.get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="taxoseed",
        description="Seed and verify the taxonomy catalog",
    )
    parser.add_argument("--version", action="version", version=f"taxoseed {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    seed = sub.add_parser("seed", help="Import properties and categories")
    seed.add_argument("--data-dir", help="Definitions directory (default: settings.data_dir)")
    seed.add_argument(
        "--reset",
        action="store_true",
        help="Destroy the existing catalog before importing",
    )

    verify = sub.add_parser("verify", help="Compare the stored catalog with its definitions")
    verify.add_argument("--data-dir", help="Definitions directory (default: settings.data_dir)")

    sub.add_parser("reset", help="Destroy every category and property")
    return parser


async def run_command(args: argparse.Namespace, settings: Settings) -> int:
    """Composition root - wire use cases to PostgreSQL and run one command."""
    pool = create_pool(
        settings.database_url,
        min_size=settings.pool_min_size,
        max_size=settings.pool_max_size,
    )
    async with pool:
        uow_factory = create_uow_factory(pool)
        reset_catalog = ResetCatalogUseCase(unit_of_work_factory=uow_factory)

        if args.command == "reset":
            await reset_catalog.execute()
            return 0

        source = YamlDefinitionSource(args.data_dir or settings.data_dir)

        if args.command == "seed":
            seed_catalog = SeedCatalogUseCase(
                import_properties=ImportPropertiesUseCase(unit_of_work_factory=uow_factory),
                import_categories=ImportCategoriesUseCase(unit_of_work_factory=uow_factory),
                reset_catalog=reset_catalog,
            )
            await seed_catalog.execute(source, reset=args.reset)
            return 0

        verify_seed = VerifySeedUseCase(unit_of_work_factory=uow_factory)
        report = await verify_seed.execute(
            source.load_properties(),
            source.load_category_files(),
        )
        for kind, identifier in report.missing:
            logger.error("record_missing", kind=str(kind), identifier=identifier)
        for mismatch in report.mismatches:
            logger.error(
                "record_mismatch",
                kind=str(mismatch.kind),
                identifier=mismatch.identifier,
                fields=mismatch.fields,
            )
        return 0 if report.ok else 1


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(settings)
    try:
        return asyncio.run(run_command(args, settings))
    except TaxoseedError as e:
        logger.error(
            "command_failed",
            command=args.command,
            error=str(e),
            error_type=type(e).__name__,
            identifier=getattr(e, "identifier", None),
            field=getattr(e, "field", None),
        )
        return 1
