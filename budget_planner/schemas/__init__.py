"""Pydantic schemas for request and response payloads."""

from .plan import BudgetItem, BudgetSection, dump_sections

__all__ = [
    "BudgetItem",
    "BudgetSection",
    "dump_sections",
]
