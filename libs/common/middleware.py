"""Request tracing middleware for the storefront API.

Every request gets an ``X-Request-ID`` (propagated from the caller when
present), and its start and completion are logged with the caller's user id
and the elapsed time.

Usage:
    from libs.common.middleware import add_observability_middleware

    app = FastAPI()
    add_observability_middleware(app)
"""
import time
from typing import Callable

from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from libs.common.logging import (
    clear_request_context,
    configure_logging,
    get_logger,
    set_request_context,
)

logger = get_logger(__name__)

QUIET_PATHS = {"/health"}


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Bind request context, log the request lifecycle, echo the request id."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = set_request_context(
            request_id=request.headers.get("X-Request-ID"),
            path=request.url.path,
            method=request.method,
        )
        quiet = request.url.path in QUIET_PATHS
        caller = request.headers.get("X-User-Id")
        start_time = time.perf_counter()

        if not quiet:
            logger.info(
                "Request started",
                extra={"extra_fields": {"user_id": caller}},
            )

        try:
            response = await call_next(request)

            duration_ms = (time.perf_counter() - start_time) * 1000
            if not quiet:
                log = logger.warning if response.status_code >= 400 else logger.info
                log(
                    "Request completed %s %s -> %d",
                    request.method,
                    request.url.path,
                    response.status_code,
                    extra={
                        "extra_fields": {
                            "status_code": response.status_code,
                            "duration_ms": round(duration_ms, 2),
                        }
                    },
                )

            response.headers["X-Request-ID"] = request_id
            return response

        except Exception as e:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.exception(
                "Request failed with unhandled exception",
                extra={
                    "extra_fields": {
                        "error": str(e),
                        "duration_ms": round(duration_ms, 2),
                    }
                },
            )
            raise

        finally:
            clear_request_context()


def add_observability_middleware(app: FastAPI) -> None:
    """
    Configure logging and install the request context middleware.

    Call this after creating the app but before adding routes.
    """
    configure_logging()
    app.add_middleware(RequestContextMiddleware)
    logger.info("Observability middleware initialized")
