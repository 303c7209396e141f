"""Workspace roles."""

from enum import StrEnum


class WorkspaceRole(StrEnum):
    """Role a user holds in a workspace. Exactly one per (user, workspace)."""

    OWNER = "OWNER"
    ADMIN = "ADMIN"
    MEMBER = "MEMBER"
    GUEST = "GUEST"

    @classmethod
    def coerce(cls, value: object) -> "WorkspaceRole | None":
        """Return the matching role (case-insensitive), or None if unknown."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().upper())
        except ValueError:
            return None
