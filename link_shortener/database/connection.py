"""
Database engine and session handling.

The engine owns a bounded connection pool and is created once per process.
Every request borrows a connection through its own Session and hands it back
when the session closes.
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from link_shortener.config import settings


class Base(DeclarativeBase):
    pass


def create_db_engine(database_url: str) -> Engine:
    """Create an engine whose pool never grows past ``db_pool_size``."""
    connect_args = {}
    if database_url.startswith("sqlite"):
        # Sessions are used from FastAPI's worker threads
        connect_args["check_same_thread"] = False

    return create_engine(
        database_url,
        pool_size=settings.db_pool_size,
        max_overflow=0,
        pool_timeout=settings.db_pool_timeout,
        pool_pre_ping=True,
        connect_args=connect_args,
    )


engine = create_db_engine(settings.database_url)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
