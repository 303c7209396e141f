"""Inputs of an authorization decision besides the principal."""

from dataclasses import dataclass

from taskperm.domain.value_objects.override_level import OverrideLevel, ResourceKind


@dataclass(frozen=True)
class OverrideContext:
    """Nearest override at each tier for one principal and one resource.

    Levels are coerced into :class:`OverrideLevel`; an unrecognized value
    is dropped so that tier falls through to the next one.
    """

    space: OverrideLevel | None = None
    folder: OverrideLevel | None = None
    list: OverrideLevel | None = None

    def __post_init__(self) -> None:
        for tier in ("space", "folder", "list"):
            object.__setattr__(self, tier, OverrideLevel.coerce(getattr(self, tier)))


@dataclass(frozen=True)
class TaskContext:
    """Task facts used by the assignee narrowing rule."""

    assignee_id: str | None = None


@dataclass(frozen=True)
class ResourceRef:
    """Reference to any node of the hierarchy."""

    kind: ResourceKind
    id: str
