"""FastAPI application instance and error handlers."""
from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from budget_planner.core import get_logger, get_settings
from budget_planner.core.config import Settings
from budget_planner.core.errors import PlanError
from budget_planner.core.log import init_logging
from budget_planner.middleware import PermissiveCORSMiddleware, RequestLoggingMiddleware
from budget_planner.routers import income_router, item_router, plan_router
from budget_planner.services import PlanStore

LOGGER = get_logger(__name__)

METHOD_NOT_SUPPORTED = "Method not supported"


async def handle_plan_error(request: Request, exc: PlanError) -> PlainTextResponse:
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def handle_http_error(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    detail = exc.detail
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        LOGGER.warning("Rejected %s on %s", request.method, request.url.path)
        detail = METHOD_NOT_SUPPORTED
    return PlainTextResponse(str(detail), status_code=exc.status_code, headers=exc.headers)


def create_app(store: PlanStore | None = None, settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    A seeded :class:`PlanStore` is created when none is supplied; the store
    lives on ``app.state`` for as long as the application does.
    """

    settings = settings or get_settings()
    init_logging(level=settings.log_level, log_dir=settings.log_dir)

    app = FastAPI(title="Budget Planner", version="0.1.0", redirect_slashes=False)
    app.state.plan_store = store if store is not None else PlanStore.seeded()

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(PermissiveCORSMiddleware)

    app.add_exception_handler(PlanError, handle_plan_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)

    app.include_router(plan_router)
    app.include_router(item_router)
    app.include_router(income_router)

    LOGGER.info("FastAPI application initialised")
    return app


app = create_app()
