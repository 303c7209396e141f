"""Unit tests for HierarchyPermissionChecker."""

from datetime import UTC, datetime

import pytest

from taskperm.domain.entities import Override
from taskperm.domain.value_objects import (
    OverrideLevel,
    PermissionAction as A,
    ResourceKind,
    ResourceRef,
    ScopeType,
    WorkspaceRole,
)
from taskperm.infrastructure.permission.permission_checker import HierarchyPermissionChecker


def _override(scope: ScopeType, scope_id: str, user_id: str, level) -> Override:
    now = datetime.now(UTC)
    return Override(scope, scope_id, user_id, level, now, now)


async def _put(fake_uow, scope, scope_id, user_id, level) -> None:
    await fake_uow.overrides.upsert(_override(scope, scope_id, user_id, level))


TASK_1 = ResourceRef(ResourceKind.TASK, "task-1")
TASK_2 = ResourceRef(ResourceKind.TASK, "task-2")
LIST_1 = ResourceRef(ResourceKind.LIST, "list-1")
LIST_2 = ResourceRef(ResourceKind.LIST, "list-2")


@pytest.mark.asyncio
async def test_role_decides_without_overrides(uow_factory) -> None:
    checker = HierarchyPermissionChecker(uow_factory)
    assert await checker.check("u1", A.VIEW_TASK, TASK_1) is True
    assert await checker.check("u1", A.CREATE_TASK, LIST_1) is False
    assert await checker.check("admin", A.CREATE_TASK, LIST_1) is True
    assert await checker.check("owner", A.DELETE_WORKSPACE, LIST_1) is True


@pytest.mark.asyncio
async def test_task_assignee_loaded_from_store(uow_factory) -> None:
    """task-1 is assigned to u2, so only u2 of the members may edit it."""
    checker = HierarchyPermissionChecker(uow_factory)
    assert await checker.check("u1", A.EDIT_TASK, TASK_1) is False
    assert await checker.check("u2", A.EDIT_TASK, TASK_1) is True
    assert await checker.check("admin", A.EDIT_TASK, TASK_1) is True
    # Unassigned task: any member may edit.
    assert await checker.check("u1", A.CHANGE_STATUS, TASK_2) is True


@pytest.mark.asyncio
async def test_stored_assignee_wins_over_caller_supplied(uow_factory) -> None:
    """A caller cannot claim a task by naming themselves as its assignee."""
    checker = HierarchyPermissionChecker(uow_factory)
    assert await checker.check("u1", A.EDIT_TASK, TASK_1, assignee_id="u1") is False
    assert await checker.check("u1", A.CHANGE_STATUS, TASK_2, assignee_id="u2") is True
    resolved = await checker.resolve("u1", TASK_1, assignee_id="u1")
    assert resolved.task.assignee_id == "u2"


@pytest.mark.asyncio
async def test_caller_assignee_applies_to_lists(uow_factory) -> None:
    checker = HierarchyPermissionChecker(uow_factory)
    assert await checker.check("u1", A.EDIT_TASK, LIST_1, assignee_id="u2") is False
    assert await checker.check("u1", A.EDIT_TASK, LIST_1, assignee_id="u1") is True


@pytest.mark.asyncio
async def test_nearest_override_governs(fake_uow, uow_factory) -> None:
    await _put(fake_uow, ScopeType.SPACE, "space-1", "u1", OverrideLevel.FULL)
    await _put(fake_uow, ScopeType.FOLDER, "folder-1", "u1", OverrideLevel.FULL)
    await _put(fake_uow, ScopeType.LIST, "list-1", "u1", OverrideLevel.VIEW)
    checker = HierarchyPermissionChecker(uow_factory)

    # list-1 is governed by the list VIEW override.
    assert await checker.check("u1", A.CREATE_TASK, LIST_1) is False
    # list-2 has no folder and no list override: the space override governs.
    assert await checker.check("u1", A.CREATE_TASK, LIST_2) is True
    # The folder itself is governed by its folder override.
    folder = ResourceRef(ResourceKind.FOLDER, "folder-1")
    assert await checker.check("u1", A.CREATE_LIST, folder) is True


@pytest.mark.asyncio
async def test_removing_override_falls_back(fake_uow, uow_factory) -> None:
    await _put(fake_uow, ScopeType.FOLDER, "folder-1", "u1", OverrideLevel.FULL)
    await _put(fake_uow, ScopeType.SPACE, "space-1", "u1", OverrideLevel.VIEW)
    checker = HierarchyPermissionChecker(uow_factory)
    assert await checker.check("u1", A.CREATE_TASK, LIST_1) is True

    await fake_uow.overrides.delete(ScopeType.FOLDER, "folder-1", "u1")
    assert await checker.check("u1", A.CREATE_TASK, LIST_1) is False

    await fake_uow.overrides.delete(ScopeType.SPACE, "space-1", "u1")
    assert await checker.check("u1", A.VIEW_TASK, LIST_1) is True
    assert await checker.check("u1", A.CREATE_TASK, LIST_1) is False


@pytest.mark.asyncio
async def test_override_for_other_user_is_ignored(fake_uow, uow_factory) -> None:
    await _put(fake_uow, ScopeType.LIST, "list-1", "u2", OverrideLevel.FULL)
    checker = HierarchyPermissionChecker(uow_factory)
    assert await checker.check("u1", A.CREATE_TASK, LIST_1) is False
    assert await checker.check("u2", A.CREATE_TASK, LIST_1) is True


@pytest.mark.asyncio
async def test_invalid_stored_level_is_skipped(fake_uow, uow_factory, caplog) -> None:
    fake_uow.overrides.put_raw(_override(ScopeType.LIST, "list-1", "u1", "SUPER"))
    await _put(fake_uow, ScopeType.SPACE, "space-1", "u1", OverrideLevel.EDIT)
    checker = HierarchyPermissionChecker(uow_factory)

    resolved = await checker.resolve("u1", LIST_1)
    assert resolved.context.list is None
    assert resolved.context.space is OverrideLevel.EDIT
    assert await checker.check("u1", A.CREATE_TASK, LIST_1) is True
    assert "Invalid override level" in caplog.text


@pytest.mark.asyncio
async def test_non_member_is_denied(uow_factory) -> None:
    checker = HierarchyPermissionChecker(uow_factory)
    assert await checker.resolve("stranger", LIST_1) is None
    assert await checker.check("stranger", A.VIEW_TASK, TASK_1) is False


@pytest.mark.asyncio
async def test_unknown_role_is_denied_at_role_tier(fake_uow, uow_factory) -> None:
    fake_uow.hierarchy.add_member("ws-1", "weird", "SUPERUSER")
    checker = HierarchyPermissionChecker(uow_factory)
    assert await checker.check("weird", A.VIEW_TASK, TASK_1) is False

    await _put(fake_uow, ScopeType.LIST, "list-1", "weird", OverrideLevel.VIEW)
    assert await checker.check("weird", A.VIEW_TASK, TASK_1) is True


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "resource",
    [
        ResourceRef(ResourceKind.TASK, "missing"),
        ResourceRef(ResourceKind.LIST, "missing"),
        ResourceRef(ResourceKind.SPACE, "missing"),
    ],
)
async def test_unknown_resource_is_denied(uow_factory, resource) -> None:
    checker = HierarchyPermissionChecker(uow_factory)
    assert await checker.check("owner", A.VIEW_TASK, resource) is False


@pytest.mark.asyncio
async def test_resolve_returns_full_input(fake_uow, uow_factory) -> None:
    await _put(fake_uow, ScopeType.FOLDER, "folder-1", "u1", OverrideLevel.COMMENT)
    checker = HierarchyPermissionChecker(uow_factory)

    resolved = await checker.resolve("u1", TASK_1)

    assert resolved.principal.user_id == "u1"
    assert resolved.principal.workspace_role is WorkspaceRole.MEMBER
    assert resolved.context.folder is OverrideLevel.COMMENT
    assert resolved.context.list is None
    assert resolved.task.assignee_id == "u2"
    assert resolved.location.list_id == "list-1"
    assert resolved.location.workspace_id == "ws-1"


@pytest.mark.asyncio
async def test_workspace_resource_uses_role_only(fake_uow, uow_factory) -> None:
    await _put(fake_uow, ScopeType.SPACE, "space-1", "admin", OverrideLevel.VIEW)
    checker = HierarchyPermissionChecker(uow_factory)
    workspace = ResourceRef(ResourceKind.WORKSPACE, "ws-1")
    assert await checker.check("admin", A.INVITE_MEMBER, workspace) is True
    assert await checker.check("admin", A.DELETE_WORKSPACE, workspace) is False
