"""PostgreSQL hierarchy repository - reads the host application's tables.

Expected tables (owned and migrated by the host application):

- ``workspace (id, plan_tier)``
- ``workspace_member (workspace_id, user_id, role)``
- ``space (id, workspace_id)``
- ``folder (id, space_id)``
- ``task_list (id, space_id, folder_id)``
- ``task (id, list_id, assignee_id)``
"""

from psycopg import AsyncConnection

from taskperm.domain.entities import Location, Task
from taskperm.domain.value_objects import ResourceKind

_LOCATE_SQL: dict[ResourceKind, str] = {
    ResourceKind.WORKSPACE: "SELECT w.id, NULL, NULL, NULL FROM workspace w WHERE w.id = %s",
    ResourceKind.SPACE: "SELECT s.workspace_id, s.id, NULL, NULL FROM space s WHERE s.id = %s",
    ResourceKind.FOLDER: (
        "SELECT s.workspace_id, s.id, f.id, NULL "
        "FROM folder f JOIN space s ON s.id = f.space_id WHERE f.id = %s"
    ),
    ResourceKind.LIST: (
        "SELECT s.workspace_id, s.id, l.folder_id, l.id "
        "FROM task_list l JOIN space s ON s.id = l.space_id WHERE l.id = %s"
    ),
}


class PostgresHierarchyRepository:
    """Hierarchy repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def locate(self, kind: ResourceKind, resource_id: str) -> Location | None:
        """Get the ancestors of a workspace, space, folder or list."""
        sql = _LOCATE_SQL.get(kind)
        if sql is None:
            raise ValueError(f"Cannot locate {kind} directly, load the task first")
        cur = await self._conn.execute(sql, (resource_id,))
        r = await cur.fetchone()
        if not r:
            return None
        return Location(
            workspace_id=str(r[0]),
            space_id=str(r[1]) if r[1] is not None else None,
            folder_id=str(r[2]) if r[2] is not None else None,
            list_id=str(r[3]) if r[3] is not None else None,
        )

    async def get_task(self, task_id: str) -> Task | None:
        """Get task by id."""
        cur = await self._conn.execute(
            "SELECT id, list_id, assignee_id FROM task WHERE id = %s",
            (task_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return Task(
            id=str(r[0]),
            list_id=str(r[1]),
            assignee_id=str(r[2]) if r[2] is not None else None,
        )

    async def get_workspace_role(self, workspace_id: str, user_id: str) -> str | None:
        """Get the raw role string of a workspace member."""
        cur = await self._conn.execute(
            "SELECT role FROM workspace_member WHERE workspace_id = %s AND user_id = %s",
            (workspace_id, user_id),
        )
        r = await cur.fetchone()
        return r[0] if r else None

    async def get_plan_tier(self, workspace_id: str) -> str | None:
        """Get the raw access-control tier of the workspace's plan."""
        cur = await self._conn.execute(
            "SELECT plan_tier FROM workspace WHERE id = %s",
            (workspace_id,),
        )
        r = await cur.fetchone()
        return r[0] if r else None
