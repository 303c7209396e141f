"""Override DTOs."""

from dataclasses import dataclass
from datetime import datetime

from taskperm.domain.entities import Override


@dataclass
class OverrideOutput:
    """Output DTO for an override."""

    scope_type: str
    scope_id: str
    user_id: str
    level: str
    created_at: datetime
    updated_at: datetime
    assigned_by: str | None

    @classmethod
    def from_entity(cls, override: Override) -> "OverrideOutput":
        return cls(
            scope_type=str(override.scope_type),
            scope_id=override.scope_id,
            user_id=override.user_id,
            level=str(override.level),
            created_at=override.created_at,
            updated_at=override.updated_at,
            assigned_by=override.assigned_by,
        )

    def to_dict(self) -> dict:
        return {
            "scope_type": self.scope_type,
            "scope_id": self.scope_id,
            "user_id": self.user_id,
            "level": self.level,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "assigned_by": self.assigned_by,
        }
