"""Assign override use case."""

import asyncio
import logging
from datetime import UTC, datetime

from taskperm.application.ports import EntitlementService, PermissionChecker
from taskperm.domain.entities import Override
from taskperm.domain.exceptions import (
    EntitlementCheckFailure,
    EntitlementDenied,
    NotFound,
    PermissionDenied,
    ValidationError,
)
from taskperm.domain.value_objects import (
    OverrideLevel,
    PermissionAction,
    PlanTier,
    ResourceKind,
    ResourceRef,
    ScopeType,
)

logger = logging.getLogger(__name__)


class AssignOverrideUseCase:
    """Assign an override level to a user at a space, folder or list.

    The plan-tier entitlement gate runs before anything is written. A
    denial, a timeout or a failing entitlement service leaves the store
    untouched.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
        entitlement_service: EntitlementService,
        entitlement_timeout: float = 5.0,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker
        self._entitlements = entitlement_service
        self._timeout = entitlement_timeout

    async def execute(
        self,
        actor_id: str,
        scope_type: ScopeType | str,
        scope_id: str,
        user_id: str,
        level: OverrideLevel | str,
        plan_tier: PlanTier | str | None = None,
    ) -> Override:
        """Assign ``level`` to ``user_id`` at the scope. Actor must manage permissions there.

        ``plan_tier`` is the requesting workspace's tier. When omitted it is
        read from the workspace that owns the scope.
        """
        scope = ScopeType.coerce(scope_type)
        if scope is None:
            raise ValidationError(f"Invalid scope type: {scope_type!r}")
        requested = OverrideLevel.coerce(level)
        if requested is None:
            raise ValidationError(f"Invalid override level: {level!r}")

        can_manage = await self._permission_checker.check(
            actor_id,
            PermissionAction.MANAGE_SPACE_PERMISSIONS,
            ResourceRef(ResourceKind(scope.value), scope_id),
        )
        if not can_manage:
            raise PermissionDenied("User cannot manage permissions at this scope")

        if plan_tier is None:
            plan_tier = await self._plan_tier_for(scope, scope_id)

        try:
            async with asyncio.timeout(self._timeout):
                decision = await self._entitlements.check_assignable(plan_tier, requested)
        except TimeoutError as e:
            logger.warning(
                "Entitlement check timed out after %ss (tier=%s, level=%s)",
                self._timeout,
                plan_tier,
                requested,
            )
            raise EntitlementCheckFailure("Entitlement check timed out") from e
        except EntitlementCheckFailure:
            raise
        except Exception as e:
            logger.exception(
                "Entitlement check failed (tier=%s, level=%s)", plan_tier, requested
            )
            raise EntitlementCheckFailure("Entitlement check failed") from e

        if not decision.allowed:
            logger.info(
                "Override %s at %s %s for %s rejected: %s",
                requested,
                scope,
                scope_id,
                user_id,
                decision.reason,
            )
            raise EntitlementDenied(decision.reason or "Override level not available on this plan")

        now = datetime.now(UTC)
        async with self._uow_factory() as uow:
            override = await uow.overrides.upsert(
                Override(
                    scope_type=scope,
                    scope_id=scope_id,
                    user_id=user_id,
                    level=requested,
                    created_at=now,
                    updated_at=now,
                    assigned_by=actor_id,
                )
            )
        logger.info(
            "Override %s assigned at %s %s for %s by %s",
            requested,
            scope,
            scope_id,
            user_id,
            actor_id,
        )
        return override

    async def _plan_tier_for(self, scope: ScopeType, scope_id: str) -> PlanTier:
        async with self._uow_factory() as uow:
            location = await uow.hierarchy.locate(ResourceKind(scope.value), scope_id)
            if location is None:
                raise NotFound(scope.value.title(), scope_id)
            stored = await uow.hierarchy.get_plan_tier(location.workspace_id)

        tier = PlanTier.coerce(stored)
        if tier is None:
            if stored is not None:
                logger.warning(
                    "Workspace %s has unknown plan tier %r, using basic",
                    location.workspace_id,
                    stored,
                )
            return PlanTier.BASIC
        return tier
