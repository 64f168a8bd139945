"""Exception-to-response mapping for the Ratings API.

Protean's own handlers cover ``ValidationError`` (400) and
``ObjectNotFoundError`` (404); storage outcomes are mapped here.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from ratings.exceptions import ConflictError, StorageUnavailable
from ratings.utils.logging import get_logger

logger = get_logger(__name__)

RETRY_AFTER_SECONDS = 1


async def _conflict(request: Request, exc: ConflictError) -> JSONResponse:
    logger.warning("Write conflict", path=request.url.path, error=str(exc))
    return JSONResponse(status_code=409, content={"error": str(exc)})


async def _storage_unavailable(request: Request, exc: StorageUnavailable) -> JSONResponse:
    logger.error("Storage unavailable", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=503,
        content={"error": "Storage temporarily unavailable"},
        headers={"Retry-After": str(RETRY_AFTER_SECONDS)},
    )


def register_error_handlers(app: FastAPI) -> None:
    register_exception_handlers(app)
    app.add_exception_handler(ConflictError, _conflict)
    app.add_exception_handler(StorageUnavailable, _storage_unavailable)
