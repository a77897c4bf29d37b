"""Request logging middleware - one line per request with a correlation id."""

import logging
import time
from uuid import uuid4

import falcon
import falcon.asgi

logger = logging.getLogger(__name__)

_QUIET_PREFIXES = ("/v1/health",)


class RequestLoggingMiddleware:
    """Logs method, path, status and duration; propagates X-Request-Id."""

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        req.context.request_id = (
            req.get_header("X-Request-Id")
            or req.get_header("X-Correlation-Id")
            or uuid4().hex
        )
        req.context.started_at = time.perf_counter()

    async def process_response(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, resource, req_succeeded
    ) -> None:
        request_id = getattr(req.context, "request_id", None)
        if request_id:
            resp.set_header("X-Request-Id", request_id)
        if req.path.startswith(_QUIET_PREFIXES):
            return

        started = getattr(req.context, "started_at", None)
        elapsed_ms = (time.perf_counter() - started) * 1000 if started else 0.0
        status_code = falcon.http_status_to_code(resp.status)
        level = logging.INFO
        if status_code >= 500:
            level = logging.ERROR
        elif status_code >= 400:
            level = logging.WARNING
        logger.log(
            level,
            "%s %s %d %.1fms request_id=%s",
            req.method,
            req.path,
            status_code,
            elapsed_ms,
            request_id,
        )
