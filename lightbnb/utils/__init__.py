"""
Utility modules for the LightBnB API.
"""

from .exceptions import (
    APIException,
    ValidationError,
    NotFoundError,
    ConflictError,
    ServiceUnavailableError,
    UserNotFoundError,
    DuplicateResourceError
)

__all__ = [
    "APIException",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "ServiceUnavailableError",
    "UserNotFoundError",
    "DuplicateResourceError",
]
