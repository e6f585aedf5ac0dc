"""Service layer entrypoints for domain logic."""

from .plan_store import INCOME_TITLE, PlanStore, seed_sections

__all__ = [
    "INCOME_TITLE",
    "PlanStore",
    "seed_sections",
]
