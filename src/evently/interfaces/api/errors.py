"""Error handlers translating exceptions into HTTP responses."""

import logging
from typing import Any

import falcon
import falcon.asgi

from evently.domain.exceptions import (
    AuthenticationRequired,
    Conflict,
    EventlyError,
    Forbidden,
    InsufficientPermissions,
    NotFound,
    ValidationError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: tuple[tuple[type[EventlyError], str], ...] = (
    (AuthenticationRequired, falcon.HTTP_401),
    (InsufficientPermissions, falcon.HTTP_403),
    (Forbidden, falcon.HTTP_403),
    (NotFound, falcon.HTTP_404),
    (Conflict, falcon.HTTP_409),
    (ValidationError, falcon.HTTP_400),
)


def status_for(ex: EventlyError) -> str:
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(ex, error_type):
            return status
    return falcon.HTTP_400


async def handle_evently_error(
    req: falcon.asgi.Request,
    resp: falcon.asgi.Response,
    ex: EventlyError,
    params: dict[str, Any],
) -> None:
    """Render a domain error as `{"error": message}`.

    Authorization denials always carry the fixed message of their kind, never
    the permission that was missing.
    """
    user = getattr(req.context, "user", None)
    logger.info(
        "Request rejected: %s %s user=%s error=%s",
        req.method,
        req.path,
        user.user_id if user else None,
        type(ex).__name__,
    )
    resp.status = status_for(ex)
    if isinstance(ex, AuthenticationRequired):
        resp.set_header("WWW-Authenticate", "Bearer")
        resp.media = {"error": "Authentication required"}
    elif isinstance(ex, InsufficientPermissions):
        resp.media = {"error": "Insufficient permissions"}
    else:
        resp.media = {"error": str(ex)}


async def handle_unexpected_error(
    req: falcon.asgi.Request,
    resp: falcon.asgi.Response,
    ex: Exception,
    params: dict[str, Any],
) -> None:
    logger.exception("Unhandled error on %s %s", req.method, req.path)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def register_error_handlers(app: falcon.asgi.App) -> None:
    """Falcon picks the most specific handler; its own HTTPError handling is kept."""
    app.add_error_handler(Exception, handle_unexpected_error)
    app.add_error_handler(EventlyError, handle_evently_error)
