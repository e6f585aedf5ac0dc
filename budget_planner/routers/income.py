"""Route exposing the Income section on its own."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse

from budget_planner.dependencies import get_plan_store
from budget_planner.services.plan_store import PlanStore

router = APIRouter(tags=["income"])


@router.get("/income")
def get_income(store: PlanStore = Depends(get_plan_store)) -> JSONResponse:
    """Return the section currently titled Income, read live from the store."""

    income = store.get_income()
    return JSONResponse(content=income.model_dump(mode="json", by_alias=True))


@router.options("/income")
def income_preflight() -> Response:
    return Response(status_code=status.HTTP_200_OK, media_type="application/json")
