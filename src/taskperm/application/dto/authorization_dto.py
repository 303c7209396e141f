"""Authorization DTOs."""

from dataclasses import dataclass, field

from taskperm.domain.entities import Location, Principal
from taskperm.domain.value_objects import OverrideContext, TaskContext


@dataclass(frozen=True)
class AuthorizationInput:
    """Everything the resolver needs for one user and one resource."""

    principal: Principal
    context: OverrideContext = field(default_factory=OverrideContext)
    task: TaskContext = field(default_factory=TaskContext)
    location: Location | None = None
