"""Lifespan middleware - opens the pool on startup, closes pool and clients on shutdown."""

import logging
from typing import Any

from psycopg_pool import AsyncConnectionPool

logger = logging.getLogger(__name__)


class PoolLifespanMiddleware:
    """Middleware that opens the connection pool on startup and closes on shutdown.

    ``closeables`` are extra resources with an ``aclose()`` coroutine (the
    entitlement HTTP client) released after the pool.
    """

    def __init__(self, pool: AsyncConnectionPool, closeables: tuple = ()) -> None:
        self._pool = pool
        self._closeables = closeables

    async def process_startup(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Open pool when ASGI server starts."""
        await self._pool.open()
        logger.info("Connection pool opened")

    async def process_shutdown(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Close pool when ASGI server shuts down."""
        await self._pool.close()
        for resource in self._closeables:
            await resource.aclose()
        logger.info("Connection pool closed")
