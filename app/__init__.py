"""
App package - Application configuration and error types.
"""

from app.config import settings
from app.exceptions import (
    CookbookError,
    ServiceValidationError,
    InvalidIdentifierError,
    NotFoundError,
    StoreError,
    ConfigurationError,
)

__all__ = [
    "settings",
    "CookbookError",
    "ServiceValidationError",
    "InvalidIdentifierError",
    "NotFoundError",
    "StoreError",
    "ConfigurationError",
]
