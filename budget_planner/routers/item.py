"""Routes adding budget items to an existing section."""
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
from budget_planner.schemas.plan import BudgetItem, dump_sections
from budget_planner.services.plan_store import PlanStore

router = APIRouter(prefix="/item", tags=["item"])


@router.post("/")
def require_section_id() -> None:
    raise SectionIdRequiredError()


@router.post("/{section_id:path}")
def create_item(
    section_id: str,
    body: bytes = Depends(get_raw_body),
    store: PlanStore = Depends(get_plan_store),
) -> JSONResponse:
    """Append an item to section ``section_id`` and return the whole plan."""

    target_id = parse_section_id(section_id)
    store.require_index(target_id)
    item = decode_body(BudgetItem, body)
    store.create_item(target_id, item)
    return JSONResponse(
        content=dump_sections(store.list_sections()),
        status_code=status.HTTP_201_CREATED,
    )


@router.options("/")
@router.options("/{section_id:path}")
def item_preflight() -> Response:
    return Response(status_code=status.HTTP_200_OK, media_type="application/json")
