"""PostgreSQL async connection pool."""

from psycopg_pool import AsyncConnectionPool


def create_pool(conninfo: str, min_size: int = 1, max_size: int = 4) -> AsyncConnectionPool:
    """Create async connection pool.

    Pool is created with open=False. Caller must open it before use
    (the CLI does so with `async with pool`).
    """
    return AsyncConnectionPool(
        conninfo=conninfo,
        min_size=min_size,
        max_size=max_size,
        open=False,
    )
