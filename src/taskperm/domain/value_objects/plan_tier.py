"""Plan tiers gating which override levels may be assigned."""

from enum import StrEnum


class PlanTier(StrEnum):
    """Access-control tier of the workspace owner's plan."""

    BASIC = "basic"
    PRO = "pro"
    ADVANCED = "advanced"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @classmethod
    def coerce(cls, value: object) -> "PlanTier | None":
        """Return the matching tier (case-insensitive), or None if unknown."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None
