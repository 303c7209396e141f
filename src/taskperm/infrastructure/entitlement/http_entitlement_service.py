"""Remote entitlement service client."""

import logging

import httpx

from taskperm.domain.exceptions import EntitlementCheckFailure
from taskperm.domain.policy import EntitlementDecision
from taskperm.domain.value_objects import OverrideLevel, PlanTier

logger = logging.getLogger(__name__)


class HttpEntitlementService:
    """Asks a remote entitlement service whether a tier may assign a level.

    Calls ``GET {base_url}/entitlements/check?action=assignOverride&planTier=..&level=..``
    and expects ``{"allowed": bool, "reason"?: str}``. Transport errors,
    non-2xx responses and malformed bodies raise
    :class:`EntitlementCheckFailure` so callers fail closed.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        api_key: str = "",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        headers = {"Authorization": f"Bearer {api_key}"} if api_key else {}
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            headers=headers,
            transport=transport,
        )

    async def check_assignable(
        self, plan_tier: PlanTier | str, level: OverrideLevel
    ) -> EntitlementDecision:
        """Check if plan_tier may assign level."""
        try:
            r = await self._client.get(
                "/entitlements/check",
                params={
                    "action": "assignOverride",
                    "planTier": str(plan_tier),
                    "level": str(level),
                },
            )
            r.raise_for_status()
            body = r.json()
        except httpx.HTTPError as e:
            logger.warning("Entitlement service request failed: %s", e)
            raise EntitlementCheckFailure("Entitlement service unavailable") from e
        except ValueError as e:
            logger.warning("Entitlement service returned invalid JSON")
            raise EntitlementCheckFailure("Invalid entitlement service response") from e

        if not isinstance(body, dict) or not isinstance(body.get("allowed"), bool):
            logger.warning("Entitlement service response missing 'allowed': %r", body)
            raise EntitlementCheckFailure("Invalid entitlement service response")
        return EntitlementDecision(allowed=body["allowed"], reason=body.get("reason"))

    async def aclose(self) -> None:
        await self._client.aclose()
