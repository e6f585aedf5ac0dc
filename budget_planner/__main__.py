"""Serve the budget planner with uvicorn.

Usage:
    python -m budget_planner

Host and port come from ``PLANNER_HOST`` and ``PLANNER_PORT`` (see
:mod:`budget_planner.core.config`); the defaults listen on ``0.0.0.0:4321``.
"""
from __future__ import annotations

import uvicorn

from budget_planner.core import get_logger, get_settings
from budget_planner.main import create_app

LOGGER = get_logger(__name__)


def main() -> None:
    settings = get_settings()
    app = create_app(settings=settings)

    LOGGER.info("Server starting on port %s...", settings.server.port)
    # uvicorn logs bind failures itself and exits with status 1.
    uvicorn.run(
        app,
        host=settings.server.host,
        port=settings.server.port,
        log_config=None,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
