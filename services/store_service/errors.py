"""Store failures. Each carries the HTTP status it is reported with."""

from fastapi import status
from libs.common.exceptions import AppError, StorageUnavailable


class StoreError(AppError):
    """Base class for store operation failures."""


class EmptyCart(StoreError):
    default_message = "Cart empty"


class ValidationError(StoreError):
    default_message = "Invalid request data"


class InvalidStateTransition(StoreError):
    default_message = "Operation not allowed for the current order status"


class NotFound(StoreError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class InvalidOtp(StoreError):
    default_message = "Invalid OTP"


class Forbidden(StoreError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"


class Conflict(StoreError):
    default_message = "Already exists"


__all__ = [
    "Conflict",
    "EmptyCart",
    "Forbidden",
    "InvalidOtp",
    "InvalidStateTransition",
    "NotFound",
    "StorageUnavailable",
    "StoreError",
    "ValidationError",
]
