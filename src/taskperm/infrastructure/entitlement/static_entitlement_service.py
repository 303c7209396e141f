"""In-process entitlement service backed by a static tier policy."""

from collections.abc import Mapping

from taskperm.domain.policy import DEFAULT_ASSIGNABLE_LEVELS, EntitlementDecision, check_assignable
from taskperm.domain.value_objects import OverrideLevel, PlanTier


class StaticEntitlementService:
    """Entitlement checks against a tier → levels mapping held in memory."""

    def __init__(
        self,
        policy: Mapping[PlanTier, frozenset[OverrideLevel]] = DEFAULT_ASSIGNABLE_LEVELS,
    ) -> None:
        self._policy = policy

    async def check_assignable(
        self, plan_tier: PlanTier | str, level: OverrideLevel
    ) -> EntitlementDecision:
        """Check if plan_tier may assign level."""
        return check_assignable(plan_tier, level, self._policy)
