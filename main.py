import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI
from sqlalchemy import text
from sqlalchemy.orm import Session

from link_shortener.config import settings
from link_shortener.database.connection import Base, engine, get_db
from link_shortener.api.v1 import links, redirect
from link_shortener.errors import register_exception_handlers

# Import models to ensure they're registered with Base
from link_shortener.models import Link

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("link-shortener")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Any connectivity problem surfaces here and aborts startup
    if settings.create_tables:
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables ready")
    yield
    engine.dispose()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="A link shortener service built with FastAPI",
    debug=settings.debug,
    lifespan=lifespan,
)

register_exception_handlers(app)


@app.get("/health")
def health_check(db: Session = Depends(get_db)):
    """Health check endpoint, round-trips to the database"""
    db.execute(text("SELECT 1"))
    return {"status": "healthy", "environment": settings.environment}


######## Include routers
# /links must be registered before the catch-all /{link_id}
app.include_router(links.router)
app.include_router(redirect.router)


def run():
    """Serve the app on the configured address; a failed bind exits the process."""
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
