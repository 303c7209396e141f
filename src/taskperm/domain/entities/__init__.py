"""Domain entities."""

from taskperm.domain.entities.location import Location
from taskperm.domain.entities.override import Override
from taskperm.domain.entities.principal import Principal
from taskperm.domain.entities.task import Task

__all__ = [
    "Location",
    "Override",
    "Principal",
    "Task",
]
