"""Falcon ASGI application."""

import logging

import falcon
import falcon.asgi
from falcon.asgi import App

from taskperm.application.use_cases.override.assign_override import AssignOverrideUseCase
from taskperm.application.use_cases.override.list_overrides import ListOverridesUseCase
from taskperm.application.use_cases.override.remove_override import RemoveOverrideUseCase
from taskperm.application.ports import EntitlementService
from taskperm.domain.value_objects import ResourceKind, ScopeType
from taskperm.infrastructure.permission.permission_checker import HierarchyPermissionChecker
from taskperm.interfaces.api.resources.decisions import DecisionsResource
from taskperm.interfaces.api.resources.entitlements import EntitlementCheckResource
from taskperm.interfaces.api.resources.health import HealthResource
from taskperm.interfaces.api.resources.overrides import OverrideResource, OverridesResource
from taskperm.interfaces.api.resources.resource_permissions import ResourcePermissionsResource

logger = logging.getLogger(__name__)


async def handle_unexpected_error(req, resp, ex, params):
    """Log unhandled exceptions and answer 500 without leaking details."""
    logger.exception("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(
    permission_checker: HierarchyPermissionChecker,
    assign_override: AssignOverrideUseCase,
    remove_override: RemoveOverrideUseCase,
    list_overrides: ListOverridesUseCase,
    entitlement_service: EntitlementService,
    health_resource: HealthResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, handle_unexpected_error)

    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/decisions", DecisionsResource())
    app.add_route("/v1/entitlements/check", EntitlementCheckResource(entitlement_service))

    for kind in ResourceKind:
        prefix = f"/v1/{kind.value.lower()}s/{{resource_id}}/permissions"
        resource = ResourcePermissionsResource(kind, permission_checker)
        app.add_route(prefix, resource)
        app.add_route(prefix + "/{action}", resource, suffix="action")

    for scope in ScopeType:
        prefix = f"/v1/{scope.value.lower()}s/{{resource_id}}/overrides"
        app.add_route(prefix, OverridesResource(scope, list_overrides))
        app.add_route(
            prefix + "/{user_id}",
            OverrideResource(scope, assign_override, remove_override),
        )
    return app
