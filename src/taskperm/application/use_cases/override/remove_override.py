"""Remove override use case."""

import logging

from taskperm.application.ports import PermissionChecker
from taskperm.domain.exceptions import PermissionDenied, ValidationError
from taskperm.domain.value_objects import (
    PermissionAction,
    ResourceKind,
    ResourceRef,
    ScopeType,
)

logger = logging.getLogger(__name__)


class RemoveOverrideUseCase:
    """Remove a user's override at a scope, so resolution falls through to the next tier."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(
        self,
        actor_id: str,
        scope_type: ScopeType | str,
        scope_id: str,
        user_id: str,
    ) -> bool:
        """Delete the keyed override. No entitlement check. Returns False if none existed."""
        scope = ScopeType.coerce(scope_type)
        if scope is None:
            raise ValidationError(f"Invalid scope type: {scope_type!r}")

        can_manage = await self._permission_checker.check(
            actor_id,
            PermissionAction.MANAGE_SPACE_PERMISSIONS,
            ResourceRef(ResourceKind(scope.value), scope_id),
        )
        if not can_manage:
            raise PermissionDenied("User cannot manage permissions at this scope")

        async with self._uow_factory() as uow:
            deleted = await uow.overrides.delete(scope, scope_id, user_id)
        if deleted:
            logger.info("Override at %s %s for %s removed by %s", scope, scope_id, user_id, actor_id)
        return deleted
