"""
Authentication module.

Handles the token lifecycle: persistence, claim decoding, profile
fetching and the session state machine.

Public API:
- ISessionManager: Interface for session operations
- SessionManager: The implementation wired to an ApiClient
- TokenStore: Persistence of the token and cached profile
- Session, User, RoleEntity, Role: Models
- Auth exceptions: RoleMismatchError, ExpiredTokenError, etc.
"""

from .interfaces import ISessionManager, SessionListener
from .models import (
    Role,
    RoleEntity,
    EmployeeProfile,
    User,
    TokenClaims,
    Session,
    SessionState,
    parse_role,
)
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    RoleMismatchError,
)
from .token_store import TokenStore
from .tokens import decode_claims
from .session import SessionManager

__all__ = [
    # Interface
    "ISessionManager",
    "SessionListener",
    # Implementation
    "SessionManager",
    "TokenStore",
    "decode_claims",
    # Models
    "Role",
    "RoleEntity",
    "EmployeeProfile",
    "User",
    "TokenClaims",
    "Session",
    "SessionState",
    "parse_role",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "RoleMismatchError",
]
