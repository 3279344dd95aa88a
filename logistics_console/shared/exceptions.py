"""
Base exception classes for the logistics console.

Every error raised by a service derives from LogisticsError, so screens
can catch one type at the point of user action. Module-specific errors
live in each module's exceptions.py and inherit from these bases.
"""

from typing import Optional, Any


# User-facing default messages, kept in the backend's language
NETWORK_ERROR_MESSAGE = "Erreur de connexion au serveur"
UNAUTHORIZED_MESSAGE = "Session expirée, veuillez vous reconnecter"
FORBIDDEN_MESSAGE = "Accès refusé"
NOT_FOUND_MESSAGE = "Ressource non trouvée"
SERVER_ERROR_MESSAGE = "Erreur serveur"
VALIDATION_ERROR_MESSAGE = "Données invalides"


class LogisticsError(Exception):
    """
    Base exception for all logistics console errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for notifications and logs."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NetworkError(LogisticsError):
    """No response reached the client (connection refused, timeout, DNS)."""

    def __init__(self, message: str = NETWORK_ERROR_MESSAGE, **kwargs: Any):
        super().__init__(message, code=kwargs.pop("code", "NETWORK_ERROR"), **kwargs)


class AuthenticationError(LogisticsError):
    """Authentication failed (invalid, expired or missing credentials)."""

    pass


class UnauthorizedError(AuthenticationError):
    """The backend answered 401: the session is no longer valid."""

    def __init__(self, message: str = UNAUTHORIZED_MESSAGE, **kwargs: Any):
        super().__init__(message, code=kwargs.pop("code", "UNAUTHORIZED"), **kwargs)


class AuthorizationError(LogisticsError):
    """Authorization failed (valid session, insufficient role)."""

    pass


class ForbiddenError(AuthorizationError):
    """The backend answered 403."""

    def __init__(self, message: str = FORBIDDEN_MESSAGE, **kwargs: Any):
        super().__init__(message, code=kwargs.pop("code", "FORBIDDEN"), **kwargs)


class NotFoundError(LogisticsError):
    """Resource not found."""

    def __init__(self, message: str = NOT_FOUND_MESSAGE, **kwargs: Any):
        super().__init__(message, code=kwargs.pop("code", "NOT_FOUND"), **kwargs)


class ValidationError(LogisticsError):
    """The payload was rejected; the server message is kept verbatim."""

    pass


class ServerError(LogisticsError):
    """The backend failed (5xx or an unclassified status)."""

    def __init__(self, message: str = SERVER_ERROR_MESSAGE, **kwargs: Any):
        super().__init__(message, code=kwargs.pop("code", "SERVER_ERROR"), **kwargs)


class MalformedResponseError(LogisticsError):
    """A response body did not match any shape the endpoint is known to return."""

    def __init__(self, endpoint: str, reason: str):
        super().__init__(
            f"Unexpected response from {endpoint}: {reason}",
            code="MALFORMED_RESPONSE",
            details={"endpoint": endpoint, "reason": reason},
        )
