"""Alembic migration environment.

Reads the database URL from taxoseed settings (TAXOSEED_DATABASE_URL or .env)
and runs migrations with the psycopg (v3) sync driver.
"""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine

from taxoseed.config import get_settings

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)
target_metadata = None


def _sync_db_url() -> str:
    """Return the settings URL with the psycopg driver enforced."""
    url = get_settings().database_url
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+psycopg://", 1)
    return url


def run_migrations_offline() -> None:
    context.configure(url=_sync_db_url(), target_metadata=target_metadata, literal_binds=True)
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable = create_engine(_sync_db_url())
    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
