import logging

from fastapi import APIRouter, Depends, Header, Query, status
from fastapi.responses import JSONResponse

from app.api.deps import get_item_search
from app.schemas.search import SearchErrorResponse, SearchResponse
from app.services.item_search import ItemSearchService, normalize_query

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/search", tags=["search"])

INTERNAL_SEARCH_ERROR = "Internal search error"


@router.get(
    "",
    response_model=SearchResponse,
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": SearchErrorResponse}},
)
def search_items(
    query: str | None = Query(default=None),
    user_id: str | None = Query(default=None, alias="userId"),
    x_user_id: str | None = Header(default=None),
    search: ItemSearchService = Depends(get_item_search),
) -> SearchResponse | JSONResponse:
    """Search the caller's items by name, location, room, category or description."""

    normalized = normalize_query(query)
    if not normalized:
        return SearchResponse(query="", count=0, results=[])

    owner_id = user_id or x_user_id or None
    try:
        results = search.search(normalized, owner_id)
    except Exception:
        logger.exception("Search failed for query %r", normalized)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=SearchErrorResponse(message=INTERNAL_SEARCH_ERROR).model_dump(),
        )

    return SearchResponse(query=normalized, count=len(results), results=results)
