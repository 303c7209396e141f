"""Override repository port."""

from typing import Protocol

from taskperm.domain.entities import Override
from taskperm.domain.value_objects import ScopeType


class OverrideRepository(Protocol):
    """Port for override persistence, keyed by (scope_type, scope_id, user_id).

    ``upsert`` must be atomic per key (last write wins). Rows come back with
    the level as stored, which may not be a valid :class:`OverrideLevel`.
    """

    async def get(self, scope_type: ScopeType, scope_id: str, user_id: str) -> Override | None: ...

    async def list_by_scope(self, scope_type: ScopeType, scope_id: str) -> list[Override]: ...

    async def upsert(self, override: Override) -> Override: ...

    async def delete(self, scope_type: ScopeType, scope_id: str, user_id: str) -> bool: ...
