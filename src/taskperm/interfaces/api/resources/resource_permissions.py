"""Permission API resources for the calling user on one node of the hierarchy."""

import falcon.asgi

from taskperm.domain.policy import allowed_actions, authorize, governing_tier
from taskperm.domain.value_objects import PermissionAction, ResourceKind, ResourceRef
from taskperm.infrastructure.permission.permission_checker import HierarchyPermissionChecker


class ResourcePermissionsResource:
    """GET /v1/{kind}s/{resource_id}/permissions[/{action}] - what the caller may do.

    The collection route returns the governing action set (for enabling
    UI controls), the item route returns one decision.
    """

    def __init__(self, kind: ResourceKind, permission_checker: HierarchyPermissionChecker) -> None:
        self._kind = kind
        self._permission_checker = permission_checker

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        resource_id: str,
    ) -> None:
        """Summarize the caller's permissions on the resource."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        resolved = await self._permission_checker.resolve(
            user.user_id, ResourceRef(self._kind, resource_id)
        )
        if resolved is None:
            resp.status = falcon.HTTP_404
            resp.media = {"error": f"{self._kind.title()} not found"}
            return

        principal = resolved.principal
        tier = governing_tier(resolved.context)
        role = principal.workspace_role
        resp.media = {
            "workspace_role": role.value if role else None,
            "is_owner": principal.is_owner,
            "is_admin": principal.is_admin,
            "is_member": principal.is_member,
            "is_guest": principal.is_guest,
            "overrides": {
                tier_name: level.value if level else None
                for tier_name, level in (
                    ("space", resolved.context.space),
                    ("folder", resolved.context.folder),
                    ("list", resolved.context.list),
                )
            },
            "decided_by": "OWNER" if principal.is_owner else (tier.value if tier else "ROLE"),
            "actions": sorted(a.value for a in allowed_actions(principal, resolved.context)),
        }
        resp.status = falcon.HTTP_200

    async def on_get_action(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        resource_id: str,
        action: str,
    ) -> None:
        """Decide one action. ``assignee_id`` query applies to non-task kinds only."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        requested = PermissionAction.coerce(action)
        if requested is None:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Unknown action: {action}"}
            return

        resolved = await self._permission_checker.resolve(
            user.user_id,
            ResourceRef(self._kind, resource_id),
            assignee_id=req.get_param("assignee_id"),
        )
        allowed = resolved is not None and authorize(
            requested, resolved.principal, resolved.context, resolved.task
        )
        resp.media = {"action": requested.value, "allowed": allowed}
        resp.status = falcon.HTTP_200
