from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class SearchResult(BaseModel):
    """A matched item projected to the fields callers display.

    The key is exposed twice, as ``id`` and ``_id``, for clients written
    against either name.
    """

    id: str
    key: str = Field(alias="_id")
    name: str
    location: str
    room: str | None = None
    category: str | None = None
    description: str | None = None

    model_config = ConfigDict(populate_by_name=True)


class SearchResponse(BaseModel):
    status: Literal["success"] = "success"
    query: str
    count: int
    results: list[SearchResult]


class SearchErrorResponse(BaseModel):
    status: Literal["error"] = "error"
    message: str


class ServiceStatus(BaseModel):
    status: Literal["ok"] = "ok"
    service: str


class HealthStatus(ServiceStatus):
    uptime: float
    timestamp: int
