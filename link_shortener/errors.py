"""
Exception handlers registered on the application.

Failures stay scoped to the request that raised them: the client gets a
JSON error body and the server keeps serving.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from link_shortener.services.link_service import LinkNotFoundError

logger = logging.getLogger(__name__)


async def link_not_found_handler(request: Request, exc: LinkNotFoundError):
    logger.warning(f"Link {exc.link_id} not found at {request.url}")
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": "Link not found"},
    )


async def internal_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error at {request.url}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(LinkNotFoundError, link_not_found_handler)
    app.add_exception_handler(Exception, internal_exception_handler)
