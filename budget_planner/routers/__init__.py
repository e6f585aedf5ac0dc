"""FastAPI routers for the budget planner."""

from .income import router as income_router
from .item import router as item_router
from .plan import router as plan_router

__all__ = [
    "income_router",
    "item_router",
    "plan_router",
]
