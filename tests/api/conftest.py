"""Fixtures for API tests."""

import pytest

from taskperm.application.use_cases.override.assign_override import AssignOverrideUseCase
from taskperm.application.use_cases.override.list_overrides import ListOverridesUseCase
from taskperm.application.use_cases.override.remove_override import RemoveOverrideUseCase
from taskperm.infrastructure.entitlement.static_entitlement_service import (
    StaticEntitlementService,
)
from taskperm.infrastructure.permission.permission_checker import HierarchyPermissionChecker
from taskperm.interfaces.api.app import create_app
from taskperm.interfaces.api.middleware.auth import AuthMiddleware
from taskperm.interfaces.api.resources.health import HealthResource


@pytest.fixture
def entitlement_service():
    return StaticEntitlementService()


@pytest.fixture
def app(uow_factory, entitlement_service):
    """Falcon ASGI app over the seeded in-memory workspace.

    Authentication trusts the ``X-User-Id`` header, as in development.
    """
    checker = HierarchyPermissionChecker(uow_factory)
    return create_app(
        permission_checker=checker,
        assign_override=AssignOverrideUseCase(
            unit_of_work_factory=uow_factory,
            permission_checker=checker,
            entitlement_service=entitlement_service,
            entitlement_timeout=1.0,
        ),
        remove_override=RemoveOverrideUseCase(uow_factory, checker),
        list_overrides=ListOverridesUseCase(uow_factory, checker),
        entitlement_service=entitlement_service,
        health_resource=HealthResource(),
        middleware=[AuthMiddleware(trust_user_header=True)],
    )


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    from falcon.testing import TestClient
    return TestClient(app)
