import contextvars
import json
import logging
import sys
import uuid
from typing import Optional

from libs.common.config import get_settings

_request_id: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "request_id", default=None
)
_request_path: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "request_path", default=None
)
_request_method: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "request_method", default=None
)


def set_request_context(
    request_id: Optional[str] = None,
    path: Optional[str] = None,
    method: Optional[str] = None,
) -> str:
    """Bind request metadata to the current context. Returns the request id."""
    request_id = request_id or uuid.uuid4().hex
    _request_id.set(request_id)
    _request_path.set(path)
    _request_method.set(method)
    return request_id


def get_request_id() -> Optional[str]:
    return _request_id.get()


def clear_request_context() -> None:
    _request_id.set(None)
    _request_path.set(None)
    _request_method.set(None)


class RequestContextFilter(logging.Filter):
    """Stamp the current request context onto every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = _request_id.get() or "-"
        record.request_path = _request_path.get()
        record.request_method = _request_method.get()
        return True


class JsonFormatter(logging.Formatter):
    """
    JSON formatter for structured logging in deployed environments.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_record = {
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
            "timestamp": self.formatTime(record, self.datefmt),
            "request_id": getattr(record, "request_id", None),
        }
        if getattr(record, "request_path", None):
            log_record["path"] = record.request_path
            log_record["method"] = record.request_method

        extra_fields = getattr(record, "extra_fields", None)
        if extra_fields:
            log_record.update(extra_fields)

        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_record, default=str)


def configure_logging() -> None:
    """
    Configure global logging settings.
    """
    settings = get_settings()

    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.addFilter(RequestContextFilter())

    if settings.ENVIRONMENT == "local":
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s"
        )
    else:
        formatter = JsonFormatter()

    handler.setFormatter(formatter)

    # Remove existing handlers to avoid duplication
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    root_logger.addHandler(handler)

    # Set third-party loggers to warning to reduce noise
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get a configured logger for a specific module.
    """
    return logging.getLogger(name)
