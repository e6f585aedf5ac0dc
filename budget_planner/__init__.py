"""Application package for the budget planner API."""

from .core import get_logger, get_settings
from .main import create_app

__all__ = ["create_app", "get_logger", "get_settings"]
