"""Entitlement check API resource."""

import falcon.asgi

from taskperm.application.ports import EntitlementService
from taskperm.domain.exceptions import EntitlementCheckFailure
from taskperm.domain.value_objects import OverrideLevel


class EntitlementCheckResource:
    """GET /v1/entitlements/check?plan_tier=..&level=.. - may this tier assign this level.

    For rendering allowed levels in the management UI. The assignment
    endpoint enforces the same gate server-side.
    """

    def __init__(self, entitlement_service: EntitlementService) -> None:
        self._entitlements = entitlement_service

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Check one tier/level pair."""
        plan_tier = req.get_param("plan_tier", required=True)
        raw_level = req.get_param("level", required=True)
        level = OverrideLevel.coerce(raw_level)
        if level is None:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Unknown override level: {raw_level}"}
            return

        try:
            decision = await self._entitlements.check_assignable(plan_tier, level)
        except EntitlementCheckFailure:
            resp.status = falcon.HTTP_503
            resp.media = {"allowed": False, "reason": "Entitlement check unavailable"}
            return

        resp.media = decision.to_dict()
        resp.status = falcon.HTTP_200
