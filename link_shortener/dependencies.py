"""
FastAPI dependencies for dependency injection.

The engine and its connection pool are process-wide singletons living in
``link_shortener.database.connection``; each request only gets a fresh
Session bound to them.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from link_shortener.database.connection import get_db
from link_shortener.services.link_service import LinkService


def get_link_service(db: Session = Depends(get_db)) -> LinkService:
    """Get LinkService bound to the request's database session."""
    return LinkService(db=db)
