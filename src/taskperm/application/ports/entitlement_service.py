"""Entitlement service port - plan-tier gate for override assignment."""

from typing import Protocol

from taskperm.domain.policy import EntitlementDecision
from taskperm.domain.value_objects import OverrideLevel, PlanTier


class EntitlementService(Protocol):
    """Port for checking whether a plan tier may assign an override level."""

    async def check_assignable(
        self, plan_tier: PlanTier | str, level: OverrideLevel
    ) -> EntitlementDecision: ...
