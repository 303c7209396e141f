"""Decision API resource - stateless evaluation of the resolver."""

import logging

import falcon.asgi

from taskperm.domain.entities import Principal
from taskperm.domain.policy import authorize, governing_tier
from taskperm.domain.value_objects import (
    OverrideContext,
    OverrideLevel,
    PermissionAction,
    TaskContext,
    WorkspaceRole,
)

logger = logging.getLogger(__name__)


class DecisionsResource:
    """POST /v1/decisions - evaluate authorize() on explicit inputs.

    Clients that embed their own copy of the capability matrices use this
    to confirm they decide exactly as the server does. Unknown roles,
    levels and actions are accepted and resolve fail-closed.
    """

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Evaluate one decision."""
        body = await req.get_media()
        if not isinstance(body, dict):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Expected a JSON object"}
            return

        try:
            action = body["action"]
            principal_body = body["principal"]
            user_id = principal_body["user_id"]
        except (KeyError, TypeError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return

        raw_role = principal_body.get("workspace_role")
        context_body = body.get("context") or {}
        task_body = body.get("task") or {}
        if not isinstance(context_body, dict) or not isinstance(task_body, dict):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "'context' and 'task' must be objects"}
            return

        if PermissionAction.coerce(action) is None:
            logger.warning("Decision requested for unknown action %r", action)
        if raw_role is not None and WorkspaceRole.coerce(raw_role) is None:
            logger.warning("Decision requested with unknown role %r", raw_role)
        for tier in ("space", "folder", "list"):
            raw_level = context_body.get(tier)
            if raw_level is not None and OverrideLevel.coerce(raw_level) is None:
                logger.warning("Ignoring invalid %s override level %r", tier, raw_level)

        principal = Principal(user_id=str(user_id), workspace_role=raw_role)
        ctx = OverrideContext(
            space=context_body.get("space"),
            folder=context_body.get("folder"),
            list=context_body.get("list"),
        )
        assignee_id = task_body.get("assignee_id")
        task_ctx = TaskContext(assignee_id=str(assignee_id) if assignee_id else None)

        if principal.is_owner:
            decided_by = "OWNER"
        else:
            tier = governing_tier(ctx)
            decided_by = tier.value if tier else "ROLE"
        resp.media = {
            "allowed": authorize(action, principal, ctx, task_ctx),
            "decided_by": decided_by,
        }
        resp.status = falcon.HTTP_200
