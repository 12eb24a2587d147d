from fastapi import Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.services.item_search import ItemSearchService


def get_item_search(db: Session = Depends(get_db)) -> ItemSearchService:
    """Return the item search service bound to the request's session."""

    return ItemSearchService(db)
