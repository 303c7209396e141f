"""Pytest fixtures for TaskPerm tests."""

from __future__ import annotations

from contextlib import asynccontextmanager
from dataclasses import replace

import pytest

from taskperm.domain.entities import Location, Override, Task
from taskperm.domain.value_objects import ResourceKind, ScopeType


# --- Fake repositories ---


class FakeOverrideRepository:
    """In-memory override repository keyed by (scope_type, scope_id, user_id)."""

    def __init__(self) -> None:
        self._by_key: dict[tuple[ScopeType, str, str], Override] = {}

    async def get(self, scope_type: ScopeType, scope_id: str, user_id: str) -> Override | None:
        return self._by_key.get((scope_type, scope_id, user_id))

    async def list_by_scope(self, scope_type: ScopeType, scope_id: str) -> list[Override]:
        return [
            o
            for o in self._by_key.values()
            if o.scope_type == scope_type and o.scope_id == scope_id
        ]

    async def upsert(self, override: Override) -> Override:
        existing = self._by_key.get(override.key)
        if existing:
            override = replace(override, created_at=existing.created_at)
        self._by_key[override.key] = override
        return override

    async def delete(self, scope_type: ScopeType, scope_id: str, user_id: str) -> bool:
        return self._by_key.pop((scope_type, scope_id, user_id), None) is not None

    def put_raw(self, override: Override) -> None:
        """Helper to store a row as-is, including invalid levels (for tests)."""
        self._by_key[override.key] = override


class FakeHierarchyRepository:
    """In-memory workspace / space / folder / list / task hierarchy."""

    def __init__(self) -> None:
        self._workspaces: dict[str, str | None] = {}  # workspace_id -> plan tier
        self._members: dict[tuple[str, str], str] = {}  # (workspace_id, user_id) -> role
        self._locations: dict[tuple[ResourceKind, str], Location] = {}
        self._tasks: dict[str, Task] = {}

    async def locate(self, kind: ResourceKind, resource_id: str) -> Location | None:
        return self._locations.get((kind, resource_id))

    async def get_task(self, task_id: str) -> Task | None:
        return self._tasks.get(task_id)

    async def get_workspace_role(self, workspace_id: str, user_id: str) -> str | None:
        return self._members.get((workspace_id, user_id))

    async def get_plan_tier(self, workspace_id: str) -> str | None:
        return self._workspaces.get(workspace_id)

    def add_workspace(self, workspace_id: str, plan_tier: str | None = "basic") -> None:
        self._workspaces[workspace_id] = plan_tier
        self._locations[(ResourceKind.WORKSPACE, workspace_id)] = Location(workspace_id)

    def set_plan_tier(self, workspace_id: str, plan_tier: str | None) -> None:
        self._workspaces[workspace_id] = plan_tier

    def add_member(self, workspace_id: str, user_id: str, role: str) -> None:
        self._members[(workspace_id, user_id)] = role

    def add_space(self, workspace_id: str, space_id: str) -> None:
        self._locations[(ResourceKind.SPACE, space_id)] = Location(workspace_id, space_id)

    def add_folder(self, space_id: str, folder_id: str) -> None:
        space = self._locations[(ResourceKind.SPACE, space_id)]
        self._locations[(ResourceKind.FOLDER, folder_id)] = Location(
            space.workspace_id, space_id, folder_id
        )

    def add_list(self, space_id: str, list_id: str, folder_id: str | None = None) -> None:
        space = self._locations[(ResourceKind.SPACE, space_id)]
        self._locations[(ResourceKind.LIST, list_id)] = Location(
            space.workspace_id, space_id, folder_id, list_id
        )

    def add_task(self, list_id: str, task_id: str, assignee_id: str | None = None) -> None:
        self._tasks[task_id] = Task(id=task_id, list_id=list_id, assignee_id=assignee_id)


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.overrides = FakeOverrideRepository()
        self.hierarchy = FakeHierarchyRepository()
        self.commits = 0

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        pass


def make_workspace_uow() -> FakeUnitOfWork:
    """UoW with one workspace ``ws-1``::

        ws-1 (basic)
        └── space-1
            ├── folder-1
            │   └── list-1
            │       └── task-1 (assigned to u2)
            └── list-2 (no folder)
                └── task-2 (unassigned)

    Members: owner (OWNER), admin (ADMIN), u1 and u2 (MEMBER), guest (GUEST).
    """
    uow = FakeUnitOfWork()
    h = uow.hierarchy
    h.add_workspace("ws-1", "basic")
    for user_id, role in [
        ("owner", "OWNER"),
        ("admin", "ADMIN"),
        ("u1", "MEMBER"),
        ("u2", "MEMBER"),
        ("guest", "GUEST"),
    ]:
        h.add_member("ws-1", user_id, role)
    h.add_space("ws-1", "space-1")
    h.add_folder("space-1", "folder-1")
    h.add_list("space-1", "list-1", folder_id="folder-1")
    h.add_list("space-1", "list-2")
    h.add_task("list-1", "task-1", assignee_id="u2")
    h.add_task("list-2", "task-2")
    return uow


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Seeded in-memory UnitOfWork, shared by every factory call in a test."""
    return make_workspace_uow()


@pytest.fixture
def uow_factory(fake_uow):
    """Factory returning async context manager that yields ``fake_uow``."""

    @asynccontextmanager
    async def _factory():
        yield fake_uow
        await fake_uow.commit()

    return _factory


@pytest.fixture
def mock_permission_checker():
    """AsyncMock for PermissionChecker - returns True by default."""
    from unittest.mock import AsyncMock

    mock = AsyncMock()
    mock.check.return_value = True
    return mock
