"""PostgreSQL Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from psycopg import AsyncConnection
from psycopg_pool import AsyncConnectionPool

from taskperm.infrastructure.persistence.postgres.hierarchy_repository import (
    PostgresHierarchyRepository,
)
from taskperm.infrastructure.persistence.postgres.override_repository import (
    PostgresOverrideRepository,
)


class PostgresUnitOfWork:
    """One pooled connection and one transaction shared by both repositories."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn
        self.overrides = PostgresOverrideRepository(conn)
        self.hierarchy = PostgresHierarchyRepository(conn)

    async def commit(self) -> None:
        await self._conn.commit()

    async def rollback(self) -> None:
        await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool):
    """Create UnitOfWork factory (async context manager).

    The transaction commits when the block exits cleanly and rolls back
    otherwise; the connection goes back to the pool either way.
    """

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        async with pool.connection() as conn:
            uow = PostgresUnitOfWork(conn)
            try:
                yield uow
            except BaseException:
                await uow.rollback()
                raise
            await uow.commit()

    return factory
