"""
Shared infrastructure for the logistics console.

This package contains cross-cutting concerns used by every module:
- config: Centralized settings management
- exceptions: Base exception classes
- envelope: Parsers for the backend's response shapes
- http: The authenticated async transport
- storage: Durable key/value storage

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .exceptions import (
    LogisticsError,
    NetworkError,
    AuthenticationError,
    UnauthorizedError,
    AuthorizationError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
    ServerError,
    MalformedResponseError,
)
from .http import ApiClient
from .storage import Storage, MemoryStorage, FileStorage

__all__ = [
    "Settings",
    "get_settings",
    "LogisticsError",
    "NetworkError",
    "AuthenticationError",
    "UnauthorizedError",
    "AuthorizationError",
    "ForbiddenError",
    "NotFoundError",
    "ValidationError",
    "ServerError",
    "MalformedResponseError",
    "ApiClient",
    "Storage",
    "MemoryStorage",
    "FileStorage",
]
