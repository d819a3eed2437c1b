"""structlog + stdlib logging setup."""

import logging

import structlog
from structlog.contextvars import merge_contextvars

from taxoseed.config import Settings


def setup_logging(settings: Settings | None = None) -> None:
    """Route structlog and stdlib records through one console handler.

    Records are rendered as JSON when `settings.log_json` is set, otherwise
    with the human-readable console renderer.
    """
    level_name = (settings.log_level if settings else "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    renderer = (
        structlog.processors.JSONRenderer()
        if settings is not None and settings.log_json
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    logging.captureWarnings(True)

    processor_formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.add_log_level,
            merge_contextvars,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
        # plain stdlib records (psycopg, warnings) enter here
        foreign_pre_chain=[
            structlog.stdlib.add_logger_name,
            merge_contextvars,
        ],
    )

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(processor_formatter)
    logging.basicConfig(level=level, handlers=[handler], force=True)

    structlog.configure(
        processors=[
            merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
