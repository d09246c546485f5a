from .base import (
    AppError,
    NotFoundError,
    UnauthenticatedError,
    ValidationError,
)
from .http import GENERIC_ERROR_MESSAGE, handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "GENERIC_ERROR_MESSAGE",
    "NotFoundError",
    "UnauthenticatedError",
    "ValidationError",
    "handle_app_error",
    "register_error_handler",
]
