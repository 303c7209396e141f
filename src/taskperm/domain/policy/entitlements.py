"""Plan-tier entitlement policy for assigning override levels.

Only consulted when an override is assigned. The resolver never re-checks
entitlement, so an override stored under a higher tier stays in effect
after a downgrade.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from taskperm.domain.value_objects import OverrideLevel, PlanTier

# Lowest tier first.
TIER_ORDER: tuple[PlanTier, ...] = (PlanTier.BASIC, PlanTier.PRO, PlanTier.ADVANCED)

DEFAULT_ASSIGNABLE_LEVELS: Mapping[PlanTier, frozenset[OverrideLevel]] = MappingProxyType({
    PlanTier.BASIC: frozenset({OverrideLevel.FULL}),
    PlanTier.PRO: frozenset({OverrideLevel.FULL, OverrideLevel.EDIT}),
    PlanTier.ADVANCED: frozenset({
        OverrideLevel.FULL,
        OverrideLevel.EDIT,
        OverrideLevel.COMMENT,
        OverrideLevel.VIEW,
    }),
})


@dataclass(frozen=True)
class EntitlementDecision:
    """Outcome of an entitlement check. ``reason`` is set when not allowed."""

    allowed: bool
    reason: str | None = None

    def to_dict(self) -> dict:
        data: dict = {"allowed": self.allowed}
        if self.reason is not None:
            data["reason"] = self.reason
        return data


def check_assignable(
    plan_tier: PlanTier | str,
    level: OverrideLevel | str,
    policy: Mapping[PlanTier, frozenset[OverrideLevel]] = DEFAULT_ASSIGNABLE_LEVELS,
) -> EntitlementDecision:
    """Decide whether ``level`` may be assigned under ``plan_tier``.

    Example::

        check_assignable("basic", "EDIT")
        # EntitlementDecision(allowed=False, reason='requires Pro tier or higher')
        check_assignable("advanced", "VIEW")
        # EntitlementDecision(allowed=True, reason=None)
    """
    tier = PlanTier.coerce(plan_tier)
    if tier is None:
        return EntitlementDecision(False, f"unknown plan tier {plan_tier!r}")
    requested = OverrideLevel.coerce(level)
    if requested is None:
        return EntitlementDecision(False, f"unknown override level {level!r}")

    if requested in policy.get(tier, frozenset()):
        return EntitlementDecision(True)

    required = minimum_tier_for(requested, policy)
    if required is None:
        return EntitlementDecision(False, f"{requested} overrides are not available on any plan")
    return EntitlementDecision(False, f"requires {required.display_name} tier or higher")


def minimum_tier_for(
    level: OverrideLevel,
    policy: Mapping[PlanTier, frozenset[OverrideLevel]] = DEFAULT_ASSIGNABLE_LEVELS,
) -> PlanTier | None:
    """Return the lowest tier that may assign ``level``, or None if none may."""
    for tier in TIER_ORDER:
        if level in policy.get(tier, frozenset()):
            return tier
    return None


__all__ = [
    "DEFAULT_ASSIGNABLE_LEVELS",
    "TIER_ORDER",
    "EntitlementDecision",
    "check_assignable",
    "minimum_tier_for",
]
