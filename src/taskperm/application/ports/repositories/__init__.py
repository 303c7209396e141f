"""Repository ports."""

from taskperm.application.ports.repositories.hierarchy_repository import (
    HierarchyRepository,
)
from taskperm.application.ports.repositories.override_repository import (
    OverrideRepository,
)

__all__ = [
    "HierarchyRepository",
    "OverrideRepository",
]
