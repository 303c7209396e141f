"""PostgreSQL override repository implementation."""

from psycopg import AsyncConnection

from taskperm.domain.entities import Override
from taskperm.domain.value_objects import ScopeType

_COLUMNS = "scope_type, scope_id, user_id, level, created_at, updated_at, assigned_by"


def _row_to_override(r: tuple) -> Override:
    return Override(
        scope_type=ScopeType(r[0]),
        scope_id=r[1],
        user_id=r[2],
        level=r[3],
        created_at=r[4],
        updated_at=r[5],
        assigned_by=r[6],
    )


class PostgresOverrideRepository:
    """Override repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get(self, scope_type: ScopeType, scope_id: str, user_id: str) -> Override | None:
        """Get override by key."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM permission_override "
            "WHERE scope_type = %s AND scope_id = %s AND user_id = %s",
            (str(scope_type), scope_id, user_id),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_override(r)

    async def list_by_scope(self, scope_type: ScopeType, scope_id: str) -> list[Override]:
        """List overrides at a scope."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM permission_override "
            "WHERE scope_type = %s AND scope_id = %s ORDER BY user_id",
            (str(scope_type), scope_id),
        )
        rows = await cur.fetchall()
        return [_row_to_override(r) for r in rows]

    async def upsert(self, override: Override) -> Override:
        """Insert or replace the override for its key in one statement."""
        cur = await self._conn.execute(
            "INSERT INTO permission_override "
            f"({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s) "
            "ON CONFLICT (scope_type, scope_id, user_id) DO UPDATE SET "
            "level = EXCLUDED.level, updated_at = EXCLUDED.updated_at, "
            "assigned_by = EXCLUDED.assigned_by "
            f"RETURNING {_COLUMNS}",
            (
                str(override.scope_type),
                override.scope_id,
                override.user_id,
                str(override.level),
                override.created_at,
                override.updated_at,
                override.assigned_by,
            ),
        )
        r = await cur.fetchone()
        return _row_to_override(r)

    async def delete(self, scope_type: ScopeType, scope_id: str, user_id: str) -> bool:
        """Delete override by key. Returns False if there was none."""
        cur = await self._conn.execute(
            "DELETE FROM permission_override "
            "WHERE scope_type = %s AND scope_id = %s AND user_id = %s",
            (str(scope_type), scope_id, user_id),
        )
        return cur.rowcount > 0
