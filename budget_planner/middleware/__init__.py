"""ASGI middleware used by the budget planner application."""

from .cors import CORS_HEADERS, PermissiveCORSMiddleware
from .request_logging import RequestLoggingMiddleware

__all__ = ["CORS_HEADERS", "PermissiveCORSMiddleware", "RequestLoggingMiddleware"]
