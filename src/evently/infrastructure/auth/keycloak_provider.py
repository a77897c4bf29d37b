"""Keycloak OIDC provider - bearer token introspection."""

import logging
from dataclasses import dataclass

from keycloak import KeycloakOpenID
from keycloak.exceptions import KeycloakError

logger = logging.getLogger(__name__)


@dataclass
class AuthenticatedIdentity:
    """Identity carried by an active access token."""

    user_id: str
    email: str | None
    username: str | None


class KeycloakProvider:
    """Validates bearer tokens against Keycloak.

    Authentication only: realm roles in the token are ignored, permissions
    come from the RBAC tables.
    """

    def __init__(
        self,
        server_url: str,
        realm: str,
        client_id: str,
        client_secret: str = "",
    ) -> None:
        self._keycloak = KeycloakOpenID(
            server_url=server_url,
            realm_name=realm,
            client_id=client_id,
            client_secret_key=client_secret,
        )

    async def authenticate(self, token: str) -> AuthenticatedIdentity | None:
        """Introspect the token; None if inactive or unverifiable."""
        try:
            token_info = await self._keycloak.a_introspect(token)
        except KeycloakError as e:
            logger.warning("Token introspection failed: %s", e.error_message)
            return None
        if not token_info.get("active") or not token_info.get("sub"):
            return None
        return AuthenticatedIdentity(
            user_id=token_info["sub"],
            email=token_info.get("email"),
            username=token_info.get("preferred_username"),
        )
