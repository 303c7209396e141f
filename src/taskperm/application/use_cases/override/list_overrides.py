"""List overrides use case."""

from taskperm.application.ports import PermissionChecker
from taskperm.domain.entities import Override
from taskperm.domain.exceptions import PermissionDenied, ValidationError
from taskperm.domain.value_objects import (
    PermissionAction,
    ResourceKind,
    ResourceRef,
    ScopeType,
)


class ListOverridesUseCase:
    """List the overrides assigned at one scope, for the management UI."""

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
    ) -> list[Override]:
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
            overrides = await uow.overrides.list_by_scope(scope, scope_id)
        return sorted(overrides, key=lambda o: o.user_id)
