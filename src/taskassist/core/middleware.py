"""Application middleware implementations."""

from __future__ import annotations

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from .context import REQUEST_ID_HEADER, bind_request_id, new_request_id, reset_request_id

logger = logging.getLogger("taskassist.access")


def _route_template(request: Request) -> str:
    route = request.scope.get("route")
    return getattr(route, "path", None) or request.url.path


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Tag each request with an id, echo it back and log the outcome.

    A client supplied ``X-Request-ID`` is reused so ids can be followed across
    services; otherwise a fresh one is generated.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or new_request_id()
        request.state.request_id = request_id
        token = bind_request_id(request_id)
        started = time.perf_counter()
        try:
            response = await call_next(request)
            logger.info(
                "Request handled",
                extra={
                    "method": request.method,
                    "route": _route_template(request),
                    "status_code": response.status_code,
                    "user_id": getattr(request.state, "user_id", None),
                    "duration_ms": round((time.perf_counter() - started) * 1000, 2),
                },
            )
        finally:
            reset_request_id(token)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response


__all__ = ["RequestContextMiddleware"]
