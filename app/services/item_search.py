"""Case-insensitive substring search over the shared item store."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any, Final

from sqlalchemy import ColumnElement, and_, or_, select
from sqlalchemy.orm import Session

from app import models
from app.schemas.search import SearchResult

logger = logging.getLogger(__name__)

SEARCH_RESULT_LIMIT: Final[int] = 10
LIKE_ESCAPE: Final[str] = "\\"

SEARCHABLE_COLUMNS: Final = (
    models.Item.name,
    models.Item.location,
    models.Item.room,
    models.Item.category,
    models.Item.description,
)

RESULT_COLUMNS: Final = (
    models.Item.id,
    models.Item.name,
    models.Item.location,
    models.Item.room,
    models.Item.category,
    models.Item.description,
)


def normalize_query(raw: str | None) -> str:
    """Trim and lowercase a raw query; missing input becomes an empty string."""

    return (raw or "").strip().lower()


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so the value matches literally."""

    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )


def build_search_filter(query: str, owner_id: str | None = None) -> ColumnElement[bool]:
    """Build the predicate for a normalized, non-empty query.

    An item matches when any searchable column contains ``query`` anywhere,
    ignoring case. When ``owner_id`` is given only that owner's items match;
    otherwise items of every owner are eligible.
    """

    pattern = f"%{escape_like(query)}%"
    text_match = or_(*(column.ilike(pattern, escape=LIKE_ESCAPE) for column in SEARCHABLE_COLUMNS))
    if owner_id:
        return and_(models.Item.user_id == owner_id, text_match)
    return text_match


def shape_results(rows: Iterable[Any]) -> list[SearchResult]:
    """Project matched rows into result objects, passing optional fields through."""

    results = []
    for row in rows:
        key = str(row.id)
        results.append(
            SearchResult(
                id=key,
                key=key,
                name=row.name,
                location=row.location,
                room=row.room,
                category=row.category,
                description=row.description,
            )
        )
    return results


class ItemSearchService:
    """Read-only lookups against the item table using a request-scoped session."""

    def __init__(self, db: Session, limit: int = SEARCH_RESULT_LIMIT) -> None:
        self._db = db
        self._limit = limit

    def search(self, query: str, owner_id: str | None = None) -> list[SearchResult]:
        """Return at most ``limit`` items matching an already-normalized query.

        Rows come back in the store's natural order; no sort is applied.
        """

        if not query:
            return []

        if not owner_id:
            logger.info("Running unscoped search across all owners for query %r", query)

        statement = select(*RESULT_COLUMNS).where(build_search_filter(query, owner_id)).limit(self._limit)
        rows: Sequence[Any] = self._db.execute(statement).all()
        results = shape_results(rows)

        logger.debug(
            "Search for %r (owner scoped: %s) returned %d item(s)",
            query,
            bool(owner_id),
            len(results),
        )
        return results
