"""Override entity - per-user permission level at a space, folder or list."""

from dataclasses import dataclass
from datetime import datetime

from taskperm.domain.value_objects import OverrideLevel, ScopeType


@dataclass
class Override:
    """Level assigned to a user at one scope. At most one per (scope_type, scope_id, user_id).

    ``level`` is the stored value. Rows written by other systems may hold a
    value outside :class:`OverrideLevel`; readers coerce it before use.
    """

    scope_type: ScopeType
    scope_id: str
    user_id: str
    level: OverrideLevel | str
    created_at: datetime
    updated_at: datetime
    assigned_by: str | None = None

    @property
    def key(self) -> tuple[ScopeType, str, str]:
        return (self.scope_type, self.scope_id, self.user_id)
