from .exceptions import AppError, ValidationError, NotFoundError, InternalError
from .handlers import register_error_handlers

__all__ = [
    "AppError",
    "ValidationError",
    "NotFoundError",
    "InternalError",
    "register_error_handlers"
]
