"""Override levels and the scopes they can be assigned at."""

from enum import StrEnum


class OverrideLevel(StrEnum):
    """Per-scope permission level that supersedes the workspace role."""

    FULL = "FULL"
    EDIT = "EDIT"
    COMMENT = "COMMENT"
    VIEW = "VIEW"

    @classmethod
    def coerce(cls, value: object) -> "OverrideLevel | None":
        """Return the matching level (case-insensitive), or None if unknown."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().upper())
        except ValueError:
            return None


class ScopeType(StrEnum):
    """Hierarchy tier at which an override may be assigned."""

    SPACE = "SPACE"
    FOLDER = "FOLDER"
    LIST = "LIST"

    @classmethod
    def coerce(cls, value: object) -> "ScopeType | None":
        """Return the matching scope type (case-insensitive), or None if unknown."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().upper())
        except ValueError:
            return None


class ResourceKind(StrEnum):
    """Any node of the Workspace > Space > Folder > List > Task hierarchy."""

    WORKSPACE = "WORKSPACE"
    SPACE = "SPACE"
    FOLDER = "FOLDER"
    LIST = "LIST"
    TASK = "TASK"
