"""Domain errors raised by the plan store and request handlers.

Each error knows the HTTP status it maps to, so the exception handler
registered in :mod:`budget_planner.main` can render all of them the same way.
"""
from __future__ import annotations


class PlanError(Exception):
    """Base class for client-facing budget plan errors."""

    status_code: int = 400
    default_message: str = "Bad request"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class SectionIdRequiredError(PlanError):
    """Raised when a path that needs a section id does not carry one."""

    status_code = 400
    default_message = "Section ID is required"


class SectionNotFoundError(PlanError):
    """Raised when no section matches the requested id."""

    status_code = 404
    default_message = "Section ID not found"

    def __init__(self, section_id: int | None = None, message: str | None = None) -> None:
        self.section_id = section_id
        super().__init__(message)


class ProtectedSectionError(PlanError):
    """Raised when deleting the section currently titled Income."""

    status_code = 400
    default_message = "Cannot delete Income section"


class IncomeSectionMissingError(PlanError):
    """Raised when no section is currently titled Income."""

    status_code = 404
    default_message = "Income section not found"


class MalformedPayloadError(PlanError):
    """Raised when a request body cannot be decoded into the expected shape."""

    status_code = 400
    default_message = "Malformed request body"


__all__ = [
    "IncomeSectionMissingError",
    "MalformedPayloadError",
    "PlanError",
    "ProtectedSectionError",
    "SectionIdRequiredError",
    "SectionNotFoundError",
]
