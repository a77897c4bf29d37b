"""Falcon hooks enforcing authentication and permissions before responders."""

from typing import Any

import falcon.asgi

from evently.application.use_cases.authorization.authorize import (
    Requirement,
    normalize_requirement,
)
from evently.domain.exceptions import AuthenticationRequired


def current_user_id(req: falcon.asgi.Request) -> str | None:
    user = getattr(req.context, "user", None)
    return user.user_id if user else None


def require_permission(requirement: Requirement, *, require_all: bool = False):
    """Build a `falcon.before` hook running the authorization gate.

    The resource must expose the gate as `authorize` (an AuthorizeUseCase).
    `requirement` is one code or a sequence of codes; any one suffices unless
    `require_all` is set.
    """
    if not normalize_requirement(requirement):
        raise ValueError("require_permission needs at least one permission code")

    async def hook(
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        resource: Any,
        params: dict[str, Any],
    ) -> None:
        decision = await resource.authorize.execute(
            current_user_id(req), requirement, require_all=require_all
        )
        decision.raise_for_denial()

    return hook


async def require_authentication(
    req: falcon.asgi.Request,
    resp: falcon.asgi.Response,
    resource: Any,
    params: dict[str, Any],
) -> None:
    """Only an identity is needed, no particular permission."""
    if not current_user_id(req):
        raise AuthenticationRequired("Authentication required")
