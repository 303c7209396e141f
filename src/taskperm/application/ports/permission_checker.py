"""Permission checker port - hierarchical authorization."""

from typing import Protocol

from taskperm.domain.value_objects import PermissionAction, ResourceRef


class PermissionChecker(Protocol):
    """Port for checking a user's permission on a node of the hierarchy."""

    async def check(
        self,
        user_id: str,
        action: PermissionAction,
        resource: ResourceRef,
        assignee_id: str | None = None,
    ) -> bool: ...
