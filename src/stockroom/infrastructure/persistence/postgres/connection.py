"""PostgreSQL async connection pool for the role and permission catalog."""

from psycopg_pool import AsyncConnectionPool


def create_pool(
    conninfo: str, min_size: int = 2, max_size: int = 10, *, name: str = "stockroom"
) -> AsyncConnectionPool:
    """Create an unopened pool.

    Connections are checked before checkout, so a restarted database does not
    surface as a failed authorization lookup. Open it with ``await pool.open()``
    (PoolLifespanMiddleware, or the seed script).
    """
    return AsyncConnectionPool(
        conninfo=conninfo,
        min_size=min_size,
        max_size=max_size,
        name=name,
        check=AsyncConnectionPool.check_connection,
        open=False,
    )
