from typing import Any, Literal

from pydantic import BaseModel


class ListResponse(BaseModel):
    data: list[dict[str, Any]]


class CreatedResponse(BaseModel):
    id: int
    message: str | None = None


class CountOut(BaseModel):
    total: int


class StatsResponse(BaseModel):
    data: dict[str, CountOut]


class HealthResponse(BaseModel):
    status: Literal["ok"] = "ok"


class ErrorResponse(BaseModel):
    error: str
