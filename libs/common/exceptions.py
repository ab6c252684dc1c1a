"""Base exception for application errors that map onto an HTTP response."""

from fastapi import status


class AppError(Exception):
    """An expected failure with a short, user-facing message."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    default_message: str = "Request failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class StorageUnavailable(AppError):
    """The database could not be reached."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_message = "Storage unavailable, please try again later"
