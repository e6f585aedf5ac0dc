"""Middleware stamping permissive CORS headers onto every response."""
from __future__ import annotations

from starlette.datastructures import MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "*",
    "Access-Control-Allow-Methods": "*",
}


class PermissiveCORSMiddleware:
    """ASGI middleware that allows any origin, header and method.

    Unlike Starlette's ``CORSMiddleware`` this does not answer preflight
    requests itself; the routers expose explicit ``OPTIONS`` handlers and
    the headers are added to whatever response the app produces, errors
    included.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_with_cors(message: Message) -> None:
            if message["type"] == "http.response.start":
                headers = MutableHeaders(scope=message)
                for name, value in CORS_HEADERS.items():
                    headers[name] = value
            await send(message)

        await self.app(scope, receive, send_with_cors)


__all__ = ["CORS_HEADERS", "PermissiveCORSMiddleware"]
