"""Pool lifespan middleware - opens the catalog pool on startup."""

import logging
from typing import Any

from psycopg_pool import AsyncConnectionPool, PoolTimeout

logger = logging.getLogger("stockroom.db")


class PoolLifespanMiddleware:
    """Opens the pool when the ASGI server starts and closes it on shutdown.

    With ``connect_timeout`` set, startup waits until ``min_size`` connections
    are established and fails if the database stays unreachable.
    """

    def __init__(
        self, pool: AsyncConnectionPool, connect_timeout: float | None = None
    ) -> None:
        self._pool = pool
        self._connect_timeout = connect_timeout

    async def process_startup(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        if self._connect_timeout is None:
            await self._pool.open()
        else:
            try:
                await self._pool.open(wait=True, timeout=self._connect_timeout)
            except PoolTimeout:
                logger.error(
                    "Database unreachable after %.1fs (pool %s)",
                    self._connect_timeout,
                    self._pool.name,
                )
                raise
        logger.info("Connection pool %s opened (max_size=%d)", self._pool.name, self._pool.max_size)

    async def process_shutdown(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        await self._pool.close()
        logger.info("Connection pool %s closed", self._pool.name)
