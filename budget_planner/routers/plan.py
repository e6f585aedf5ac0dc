"""Routes managing the sections of the budget plan."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse

from budget_planner.core.errors import SectionIdRequiredError
from budget_planner.dependencies import (
    decode_body,
    get_plan_store,
    get_raw_body,
    parse_section_id,
)
from budget_planner.schemas.plan import BudgetSection, dump_sections
from budget_planner.services.plan_store import PlanStore

router = APIRouter(prefix="/plan", tags=["plan"])


def _plan_response(store: PlanStore, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    return JSONResponse(content=dump_sections(store.list_sections()), status_code=status_code)


@router.get("")
@router.get("/")
@router.get("/{section_id:path}")
def list_sections(store: PlanStore = Depends(get_plan_store)) -> JSONResponse:
    """Return every section; an id suffix is accepted and ignored."""

    return _plan_response(store)


@router.post("")
@router.post("/")
@router.post("/{section_id:path}")
def create_section(
    body: bytes = Depends(get_raw_body),
    store: PlanStore = Depends(get_plan_store),
) -> JSONResponse:
    """Append a new section under a fresh id and return the whole plan."""

    section = decode_body(BudgetSection, body)
    store.create_section(section)
    return _plan_response(store, status.HTTP_201_CREATED)


@router.put("")
@router.put("/")
@router.delete("")
@router.delete("/")
def require_section_id() -> None:
    raise SectionIdRequiredError()


@router.put("/{section_id:path}")
def replace_section(
    section_id: str,
    body: bytes = Depends(get_raw_body),
    store: PlanStore = Depends(get_plan_store),
) -> JSONResponse:
    """Replace the whole section record; omitted fields fall back to zero values."""

    target_id = parse_section_id(section_id)
    # Unknown ids are reported before the body is looked at.
    store.require_index(target_id)
    replacement = decode_body(BudgetSection, body)
    store.replace_section(target_id, replacement)
    return _plan_response(store)


@router.delete("/{section_id:path}")
def delete_section(section_id: str, store: PlanStore = Depends(get_plan_store)) -> JSONResponse:
    store.delete_section(parse_section_id(section_id))
    return _plan_response(store)


@router.options("")
@router.options("/")
@router.options("/{section_id:path}")
def plan_preflight() -> Response:
    return Response(status_code=status.HTTP_200_OK, media_type="application/json")
