"""
Core infrastructure: database, security, errors, logging and dependency providers.
"""

from .exceptions import (
    ErrorCode,
    KidMapException,
    NetworkError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
)

__all__ = [
    "ErrorCode",
    "KidMapException",
    "NetworkError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
]
