"""Auth middleware - resolves the calling user from a bearer token."""

from dataclasses import dataclass

import falcon.asgi


@dataclass
class RequestUser:
    """User from request context."""

    user_id: str
    email: str | None = None
    username: str | None = None


class AuthMiddleware:
    """Middleware that introspects the bearer token and sets req.context.user.

    Without a Keycloak provider (local development) the ``X-User-Id`` header
    is trusted instead when ``trust_user_header`` is enabled. Otherwise the
    user is None and resources answer 401.
    """

    def __init__(self, keycloak_provider=None, trust_user_header: bool = False) -> None:
        self._keycloak = keycloak_provider
        self._trust_user_header = trust_user_header

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Extract user from Authorization header."""
        req.context.user = None
        if self._keycloak is None:
            user_id = req.get_header("X-User-Id")
            if self._trust_user_header and user_id:
                req.context.user = RequestUser(user_id=user_id)
            return

        auth = req.get_header("Authorization")
        if auth and auth.startswith("Bearer "):
            user = await self._keycloak.authenticate(auth[7:])
            if user:
                req.context.user = RequestUser(
                    user_id=user.user_id,
                    email=user.email,
                    username=user.username,
                )
