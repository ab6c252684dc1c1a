"""Global exception handlers giving every failure a ``{"detail": ...}`` body."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import DisconnectionError, InterfaceError, OperationalError

from libs.common.exceptions import AppError, StorageUnavailable
from libs.common.logging import get_logger, get_request_id

logger = get_logger(__name__)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def storage_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Storage failure on %s %s (request %s): %s",
        request.method,
        request.url.path,
        get_request_id(),
        exc,
    )
    error = StorageUnavailable()
    return JSONResponse(
        status_code=error.status_code, content={"detail": error.message}
    )


def add_exception_handlers(app: FastAPI) -> None:
    """Register handlers for application and storage errors."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(OperationalError, storage_error_handler)
    app.add_exception_handler(InterfaceError, storage_error_handler)
    app.add_exception_handler(DisconnectionError, storage_error_handler)
