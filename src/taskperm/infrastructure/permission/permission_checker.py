"""Permission checker implementation - walks the hierarchy, then calls the resolver."""

import logging

from taskperm.application.dto.authorization_dto import AuthorizationInput
from taskperm.domain.entities import Principal
from taskperm.domain.policy import authorize
from taskperm.domain.value_objects import (
    OverrideContext,
    OverrideLevel,
    PermissionAction,
    ResourceKind,
    ResourceRef,
    ScopeType,
    TaskContext,
    WorkspaceRole,
)

logger = logging.getLogger(__name__)


class HierarchyPermissionChecker:
    """Loads the user's role and nearest overrides for a resource and authorizes.

    Every tier that has an override is loaded; the resolver decides which
    one governs. Stored values that are not a known role or level are
    logged and treated as missing.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def check(
        self,
        user_id: str,
        action: PermissionAction,
        resource: ResourceRef,
        assignee_id: str | None = None,
    ) -> bool:
        """Check if user may perform action on resource."""
        resolved = await self.resolve(user_id, resource, assignee_id)
        if resolved is None:
            return False
        return authorize(action, resolved.principal, resolved.context, resolved.task)

    async def resolve(
        self,
        user_id: str,
        resource: ResourceRef,
        assignee_id: str | None = None,
    ) -> AuthorizationInput | None:
        """Build resolver input, or None if the resource or membership is unknown.

        For a task the stored assignee always applies and ``assignee_id`` is
        ignored. For other kinds it describes the task being acted on.
        """
        async with self._uow_factory() as uow:
            target = resource
            if resource.kind is ResourceKind.TASK:
                task = await uow.hierarchy.get_task(resource.id)
                if task is None:
                    logger.info("Task %s not found, denying %s", resource.id, user_id)
                    return None
                if assignee_id is not None and assignee_id != task.assignee_id:
                    logger.info(
                        "Ignoring assignee %r for task %s, stored assignee applies",
                        assignee_id,
                        resource.id,
                    )
                assignee_id = task.assignee_id
                target = ResourceRef(ResourceKind.LIST, task.list_id)

            location = await uow.hierarchy.locate(target.kind, target.id)
            if location is None:
                logger.info("%s %s not found, denying %s", target.kind, target.id, user_id)
                return None

            raw_role = await uow.hierarchy.get_workspace_role(location.workspace_id, user_id)
            if raw_role is None:
                logger.info(
                    "User %s is not a member of workspace %s", user_id, location.workspace_id
                )
                return None
            if WorkspaceRole.coerce(raw_role) is None:
                logger.warning(
                    "Unknown workspace role %r for user %s in workspace %s",
                    raw_role,
                    user_id,
                    location.workspace_id,
                )

            levels: dict[str, OverrideLevel] = {}
            for scope, scope_id in (
                (ScopeType.LIST, location.list_id),
                (ScopeType.FOLDER, location.folder_id),
                (ScopeType.SPACE, location.space_id),
            ):
                if scope_id is None:
                    continue
                override = await uow.overrides.get(scope, scope_id, user_id)
                if override is None:
                    continue
                level = OverrideLevel.coerce(override.level)
                if level is None:
                    logger.warning(
                        "Invalid override level %r at %s %s for user %s, ignoring",
                        override.level,
                        scope,
                        scope_id,
                        user_id,
                    )
                    continue
                levels[scope.value.lower()] = level

        return AuthorizationInput(
            principal=Principal(user_id=user_id, workspace_role=raw_role),
            context=OverrideContext(**levels),
            task=TaskContext(assignee_id=assignee_id),
            location=location,
        )
