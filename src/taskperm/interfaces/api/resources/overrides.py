"""Override management API resources."""

import falcon.asgi

from taskperm.application.dto.override_dto import OverrideOutput
from taskperm.application.use_cases.override.assign_override import AssignOverrideUseCase
from taskperm.application.use_cases.override.list_overrides import ListOverridesUseCase
from taskperm.application.use_cases.override.remove_override import RemoveOverrideUseCase
from taskperm.domain.exceptions import (
    EntitlementCheckFailure,
    EntitlementDenied,
    NotFound,
    PermissionDenied,
    ValidationError,
)
from taskperm.domain.value_objects import ScopeType

RETRY_AFTER_SECONDS = 5


class OverridesResource:
    """GET /v1/{scope}s/{resource_id}/overrides - list overrides at a scope."""

    def __init__(self, scope_type: ScopeType, list_overrides: ListOverridesUseCase) -> None:
        self._scope_type = scope_type
        self._list = list_overrides

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        resource_id: str,
    ) -> None:
        """List overrides for scope."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            overrides = await self._list.execute(user.user_id, self._scope_type, resource_id)
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return

        resp.media = {"items": [OverrideOutput.from_entity(o).to_dict() for o in overrides]}
        resp.status = falcon.HTTP_200


class OverrideResource:
    """PUT/DELETE /v1/{scope}s/{resource_id}/overrides/{user_id} - assign or remove one override."""

    def __init__(
        self,
        scope_type: ScopeType,
        assign_override: AssignOverrideUseCase,
        remove_override: RemoveOverrideUseCase,
    ) -> None:
        self._scope_type = scope_type
        self._assign = assign_override
        self._remove = remove_override

    async def on_put(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        resource_id: str,
        user_id: str,
    ) -> None:
        """Assign override level to user at scope.

        The plan tier comes from the workspace owning the scope, never from
        the request body.
        """
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            body = await req.get_media()
            level = body["level"]
        except (KeyError, TypeError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return

        try:
            override = await self._assign.execute(
                user.user_id, self._scope_type, resource_id, user_id, level
            )
            resp.media = OverrideOutput.from_entity(override).to_dict()
            resp.status = falcon.HTTP_200
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": f"{self._scope_type.title()} not found"}
        except EntitlementDenied as e:
            resp.status = falcon.HTTP_402
            resp.media = {"error": "Upgrade required", "reason": e.reason}
        except EntitlementCheckFailure:
            resp.status = falcon.HTTP_503
            resp.set_header("Retry-After", str(RETRY_AFTER_SECONDS))
            resp.media = {"error": "Entitlement check unavailable", "retryable": True}

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        resource_id: str,
        user_id: str,
    ) -> None:
        """Remove override for user at scope."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            await self._remove.execute(user.user_id, self._scope_type, resource_id, user_id)
            resp.status = falcon.HTTP_204
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
