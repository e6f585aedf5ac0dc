"""Middleware that binds request metadata to log records and times requests."""
from __future__ import annotations

from collections.abc import Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from budget_planner.core.log import get_logger, log_context, timeit

LOGGER = get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log one line per request with its status and duration."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        token = log_context.bind(method=request.method, path=request.url.path)
        try:
            with timeit(f"{request.method} {request.url.path}", logger=LOGGER) as timer:
                response = await call_next(request)
                timer.set_outcome(response.status_code)
            return response
        finally:
            log_context.reset(token)


__all__ = ["RequestLoggingMiddleware"]
