"""Application ports - interfaces for external adapters."""

from taskperm.application.ports.entitlement_service import EntitlementService
from taskperm.application.ports.permission_checker import PermissionChecker
from taskperm.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "EntitlementService",
    "PermissionChecker",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
