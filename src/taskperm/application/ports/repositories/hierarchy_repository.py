"""Hierarchy repository port - read-only view of workspaces, spaces, folders, lists and tasks."""

from typing import Protocol

from taskperm.domain.entities import Location, Task
from taskperm.domain.value_objects import ResourceKind


class HierarchyRepository(Protocol):
    """Port for the resource hierarchy owned by the host application."""

    async def locate(self, kind: ResourceKind, resource_id: str) -> Location | None: ...

    async def get_task(self, task_id: str) -> Task | None: ...

    async def get_workspace_role(self, workspace_id: str, user_id: str) -> str | None: ...

    async def get_plan_tier(self, workspace_id: str) -> str | None: ...
