from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, status

from esantiye.core.db import Database, get_database
from esantiye.schemas.responses import CountOut, ErrorResponse, StatsResponse
from esantiye.services.stats_service import compute_stats

router = APIRouter(
    prefix="/stats",
    tags=["stats"],
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}},
)

DatabaseDep = Annotated[Database, Depends(get_database)]


@router.get("", response_model=StatsResponse)
def get_stats(db: DatabaseDep) -> StatsResponse:
    stats = compute_stats(db)
    return StatsResponse(
        data={key: CountOut(total=value["total"]) for key, value in stats.items()}
    )
