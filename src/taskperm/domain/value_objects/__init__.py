"""Domain value objects."""

from taskperm.domain.value_objects.override_context import (
    OverrideContext,
    ResourceRef,
    TaskContext,
)
from taskperm.domain.value_objects.override_level import (
    OverrideLevel,
    ResourceKind,
    ScopeType,
)
from taskperm.domain.value_objects.permission_action import PermissionAction
from taskperm.domain.value_objects.plan_tier import PlanTier
from taskperm.domain.value_objects.workspace_role import WorkspaceRole

__all__ = [
    "OverrideContext",
    "OverrideLevel",
    "PermissionAction",
    "PlanTier",
    "ResourceKind",
    "ResourceRef",
    "ScopeType",
    "TaskContext",
    "WorkspaceRole",
]
