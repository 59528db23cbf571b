"""
App package - Application configuration and core utilities.
Contains settings, exceptions, and security helpers.
"""

from app.config import settings
from app.exceptions import (
    SmartBiteError,
    ServiceValidationError,
    NotFoundError,
    ConflictError,
    UnauthorizedError,
    UpstreamServiceError,
)

__all__ = [
    "settings",
    "SmartBiteError",
    "ServiceValidationError",
    "NotFoundError",
    "ConflictError",
    "UnauthorizedError",
    "UpstreamServiceError",
]
