"""Permission resolver - decides whether a principal may perform an action.

Resolution order (first match wins):

1. Workspace OWNER → allowed, regardless of overrides.
2. List override → authoritative once present.
3. Folder override.
4. Space override.
5. Workspace role.

``EDIT_TASK`` and ``CHANGE_STATUS`` are narrowed to the task assignee when
an assignee is known. Override tiers narrow every principal; the role tier
narrows MEMBER only, ADMIN is exempt.

The resolver is pure: no I/O, no shared state, no exceptions. Anything it
does not recognize resolves to deny.
"""

from __future__ import annotations

from collections.abc import Mapping

from taskperm.domain.entities import Principal
from taskperm.domain.policy.capability_matrix import (
    ASSIGNEE_GATED_ACTIONS,
    FOLDER_OVERRIDE_ACTIONS,
    LIST_OVERRIDE_ACTIONS,
    ROLE_PERMISSIONS,
    SPACE_OVERRIDE_ACTIONS,
)
from taskperm.domain.value_objects import (
    OverrideContext,
    OverrideLevel,
    PermissionAction,
    ScopeType,
    TaskContext,
    WorkspaceRole,
)

# Highest priority first.
OVERRIDE_TIERS: tuple[tuple[ScopeType, str, Mapping[OverrideLevel, frozenset]], ...] = (
    (ScopeType.LIST, "list", LIST_OVERRIDE_ACTIONS),
    (ScopeType.FOLDER, "folder", FOLDER_OVERRIDE_ACTIONS),
    (ScopeType.SPACE, "space", SPACE_OVERRIDE_ACTIONS),
)

_EMPTY_CONTEXT = OverrideContext()


def authorize(
    action: PermissionAction | str,
    principal: Principal,
    ctx: OverrideContext | None = None,
    task_ctx: TaskContext | None = None,
) -> bool:
    """Return True if ``principal`` may perform ``action``.

    Args:
        action: Requested action. Unknown strings never match.
        principal: User id and workspace role.
        ctx: Nearest override at each tier for this principal and resource.
        task_ctx: Task assignee, for the assignee narrowing rule.

    Example::

        member = Principal(user_id="u1", workspace_role=WorkspaceRole.MEMBER)
        authorize(PermissionAction.CREATE_TASK, member, OverrideContext(folder=OverrideLevel.FULL))
        # True
        authorize(PermissionAction.CREATE_TASK, member, OverrideContext(
            list=OverrideLevel.VIEW, folder=OverrideLevel.FULL,
        ))
        # False - the list override is authoritative
    """
    if principal.workspace_role is WorkspaceRole.OWNER:
        return True

    requested = PermissionAction.coerce(action)
    if requested is None:
        return False

    ctx = ctx or _EMPTY_CONTEXT
    for _scope, tier, table in OVERRIDE_TIERS:
        level = getattr(ctx, tier)
        if level is None:
            continue
        if requested not in table.get(level, frozenset()):
            return False
        return _narrow_to_assignee(requested, principal, task_ctx)

    role = principal.workspace_role
    if role is None or requested not in ROLE_PERMISSIONS.get(role, frozenset()):
        return False
    if role is WorkspaceRole.MEMBER:
        return _narrow_to_assignee(requested, principal, task_ctx)
    return True


def governing_tier(ctx: OverrideContext | None) -> ScopeType | None:
    """Return the override tier that decides for ``ctx``, or None if the role decides."""
    ctx = ctx or _EMPTY_CONTEXT
    for scope, tier, _table in OVERRIDE_TIERS:
        if getattr(ctx, tier) is not None:
            return scope
    return None


def allowed_actions(
    principal: Principal,
    ctx: OverrideContext | None = None,
) -> frozenset[PermissionAction]:
    """Return the action set that governs ``principal`` before assignee narrowing.

    Used to enable or disable UI controls in one call instead of one
    :func:`authorize` call per action.
    """
    if principal.workspace_role is WorkspaceRole.OWNER:
        return frozenset(PermissionAction)

    ctx = ctx or _EMPTY_CONTEXT
    for _scope, tier, table in OVERRIDE_TIERS:
        level = getattr(ctx, tier)
        if level is not None:
            return table.get(level, frozenset())

    if principal.workspace_role is None:
        return frozenset()
    return ROLE_PERMISSIONS.get(principal.workspace_role, frozenset())


def _narrow_to_assignee(
    action: PermissionAction,
    principal: Principal,
    task_ctx: TaskContext | None,
) -> bool:
    if action not in ASSIGNEE_GATED_ACTIONS:
        return True
    if task_ctx is None or not task_ctx.assignee_id:
        return True
    return principal.user_id == task_ctx.assignee_id


__all__ = [
    "OVERRIDE_TIERS",
    "allowed_actions",
    "authorize",
    "governing_tier",
]
