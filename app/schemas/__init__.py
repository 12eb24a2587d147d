from app.schemas.search import (
    HealthStatus,
    SearchErrorResponse,
    SearchResponse,
    SearchResult,
    ServiceStatus,
)

__all__ = [
    "HealthStatus",
    "SearchErrorResponse",
    "SearchResponse",
    "SearchResult",
    "ServiceStatus",
]
