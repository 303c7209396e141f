"""Application entry point and composition root."""

import logging

import falcon

from taskperm import __version__
from taskperm.application.use_cases.override.assign_override import AssignOverrideUseCase
from taskperm.application.use_cases.override.list_overrides import ListOverridesUseCase
from taskperm.application.use_cases.override.remove_override import RemoveOverrideUseCase
from taskperm.config import Settings, get_settings
from taskperm.infrastructure.auth.keycloak_provider import KeycloakProvider
from taskperm.infrastructure.entitlement.http_entitlement_service import HttpEntitlementService
from taskperm.infrastructure.entitlement.static_entitlement_service import (
    StaticEntitlementService,
)
from taskperm.infrastructure.permission.permission_checker import HierarchyPermissionChecker
from taskperm.infrastructure.persistence.postgres.connection import create_pool
from taskperm.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from taskperm.interfaces.api.app import create_app
from taskperm.interfaces.api.middleware.auth import AuthMiddleware
from taskperm.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from taskperm.interfaces.api.resources.health import HealthResource

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging once from settings."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_entitlement_service(settings: Settings):
    """Remote entitlement service if configured, else the built-in tier policy."""
    if settings.entitlement_service_url:
        return HttpEntitlementService(
            base_url=settings.entitlement_service_url,
            timeout=settings.entitlement_timeout_seconds,
            api_key=settings.entitlement_api_key,
        )
    return StaticEntitlementService()


def create_taskperm_app():
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    configure_logging(settings)

    pool = create_pool(
        settings.database_url,
        min_size=settings.database_pool_min_size,
        max_size=settings.database_pool_max_size,
    )
    uow_factory = create_uow_factory(pool)

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
        if settings.keycloak_client_secret
        else None
    )
    if keycloak is None:
        logger.warning("Keycloak is not configured; trusting X-User-Id only in development")

    permission_checker = HierarchyPermissionChecker(uow_factory)
    entitlement_service = create_entitlement_service(settings)

    assign_override = AssignOverrideUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
        entitlement_service=entitlement_service,
        entitlement_timeout=settings.entitlement_timeout_seconds,
    )
    remove_override = RemoveOverrideUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    list_overrides = ListOverridesUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )

    cors_origins = [
        o.strip() for o in settings.cors_origins.split(",") if o.strip()
    ]
    closeables = (entitlement_service,) if isinstance(entitlement_service, HttpEntitlementService) else ()
    middleware = [
        falcon.CORSMiddleware(allow_origins=cors_origins or "*"),
        PoolLifespanMiddleware(pool, closeables=closeables),
        AuthMiddleware(
            keycloak,
            trust_user_header=settings.environment == "development",
        ),
    ]

    logger.info("TaskPerm v%s starting (%s)", __version__, settings.environment)
    return create_app(
        permission_checker=permission_checker,
        assign_override=assign_override,
        remove_override=remove_override,
        list_overrides=list_overrides,
        entitlement_service=entitlement_service,
        health_resource=HealthResource(pool),
        middleware=middleware,
    )


def main() -> None:
    """CLI entry point - run the API under uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "taskperm.main:create_taskperm_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
