"""Auth middleware - attaches the bearer token identity to the request."""

from dataclasses import dataclass

import falcon.asgi

from evently.infrastructure.auth.keycloak_provider import KeycloakProvider


@dataclass
class RequestUser:
    """User from request context."""

    user_id: str
    email: str | None = None
    username: str | None = None


class AuthMiddleware:
    """Validates the bearer token and sets req.context.user.

    Requests without a valid token get `req.context.user = None`; rejecting
    them is left to the permission hooks, so public routes keep working.
    """

    def __init__(self, keycloak_provider: KeycloakProvider | None = None) -> None:
        self._keycloak = keycloak_provider

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        req.context.user = None
        auth = req.get_header("Authorization")
        if not auth or not auth.startswith("Bearer ") or not self._keycloak:
            return

        identity = await self._keycloak.authenticate(auth[7:])
        if identity:
            req.context.user = RequestUser(
                user_id=identity.user_id,
                email=identity.email,
                username=identity.username,
            )
