"""
Authentication module exceptions.

These exceptions are raised by the session manager and caught by the
console to show the login error.
"""

from typing import Optional

from logistics_console.shared.exceptions import AuthenticationError


class InvalidTokenError(AuthenticationError):
    """Raised when a JWT token cannot be decoded."""

    def __init__(self, message: str = "Token invalide"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthenticationError):
    """Raised when a JWT token has expired."""

    def __init__(self, message: str = "Token expiré"):
        super().__init__(message, code="TOKEN_EXPIRED")


class MissingTokenError(AuthenticationError):
    """Raised when no token is available (none stored, or none in a login response)."""

    def __init__(self, message: str = "Non authentifié"):
        super().__init__(message, code="MISSING_TOKEN")


class RoleMismatchError(AuthenticationError):
    """Raised when the fetched profile's role disagrees with the token's role claim."""

    def __init__(self, token_role: Optional[str], profile_role: Optional[str]):
        super().__init__(
            "Incohérence de rôle détectée",
            code="ROLE_MISMATCH",
            details={"token_role": token_role, "profile_role": profile_role},
        )
