"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from taskperm.application.ports.repositories.hierarchy_repository import (
    HierarchyRepository,
)
from taskperm.application.ports.repositories.override_repository import (
    OverrideRepository,
)


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def overrides(self) -> OverrideRepository: ...

    @property
    def hierarchy(self) -> HierarchyRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...
