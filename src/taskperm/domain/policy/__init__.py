"""Authorization policy: capability matrices, resolver and entitlement rules.

Provides:
- ``ROLE_PERMISSIONS`` and the ``*_OVERRIDE_ACTIONS`` tables.
- ``authorize()`` - the decision function shared by every caller.
- ``check_assignable()`` - plan-tier gate for assigning override levels.
"""

from taskperm.domain.policy.capability_matrix import (
    ASSIGNEE_GATED_ACTIONS,
    FOLDER_OVERRIDE_ACTIONS,
    LIST_OVERRIDE_ACTIONS,
    ROLE_PERMISSIONS,
    SPACE_OVERRIDE_ACTIONS,
)
from taskperm.domain.policy.entitlements import (
    DEFAULT_ASSIGNABLE_LEVELS,
    EntitlementDecision,
    check_assignable,
    minimum_tier_for,
)
from taskperm.domain.policy.resolver import allowed_actions, authorize, governing_tier

__all__ = [
    "ASSIGNEE_GATED_ACTIONS",
    "DEFAULT_ASSIGNABLE_LEVELS",
    "FOLDER_OVERRIDE_ACTIONS",
    "LIST_OVERRIDE_ACTIONS",
    "ROLE_PERMISSIONS",
    "SPACE_OVERRIDE_ACTIONS",
    "EntitlementDecision",
    "allowed_actions",
    "authorize",
    "check_assignable",
    "governing_tier",
    "minimum_tier_for",
]
