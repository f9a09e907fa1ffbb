"""
Utilities module: Exceptions, transfer objects.
"""

from shared.utils.exceptions import (
    AppException,
    NotFoundError,
    ValidationError,
    IdMismatchError,
    ExternalServiceError,
)

__all__ = [
    # exceptions
    "AppException",
    "NotFoundError",
    "ValidationError",
    "IdMismatchError",
    "ExternalServiceError",
]
