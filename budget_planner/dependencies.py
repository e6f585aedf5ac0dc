"""Shared FastAPI dependency definitions and request decoding helpers."""
from __future__ import annotations

import re
from typing import TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from budget_planner.core.errors import (
    MalformedPayloadError,
    SectionIdRequiredError,
    SectionNotFoundError,
)
from budget_planner.services.plan_store import PlanStore

ModelT = TypeVar("ModelT", bound=BaseModel)

SECTION_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def get_plan_store(request: Request) -> PlanStore:
    """Return the store owned by the running application."""

    return request.app.state.plan_store


async def get_raw_body(request: Request) -> bytes:
    """Read the request body so synchronous handlers can decode it later."""

    return await request.body()


def parse_section_id(value: str | None) -> int:
    """Turn the id path segment into an integer.

    An empty segment means the caller forgot the id; anything that is not an
    integer can never match a section.
    """

    if not value:
        raise SectionIdRequiredError()
    if SECTION_ID_PATTERN.fullmatch(value) is None:
        raise SectionNotFoundError()
    return int(value)


def _format_validation_error(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors(include_url=False):
        location = ".".join(str(part) for part in error.get("loc", ()))
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or str(exc)


def decode_body(model: type[ModelT], body: bytes) -> ModelT:
    """Decode a JSON request body into ``model`` or raise a 400 error."""

    try:
        return model.model_validate_json(body)
    except ValidationError as exc:
        raise MalformedPayloadError(_format_validation_error(exc)) from exc


__all__ = ["decode_body", "get_plan_store", "get_raw_body", "parse_section_id"]
