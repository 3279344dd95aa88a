"""
Authentication module interface.

Screens and access control depend on ISessionManager, not the concrete
implementation, so tests can drive them with a stub session.
"""

from typing import Callable, Protocol, Optional, runtime_checkable

from .models import Session, SessionState, User


SessionListener = Callable[[SessionState], None]


@runtime_checkable
class ISessionManager(Protocol):
    """
    Interface for session operations.

    All mutation of the authentication state goes through bootstrap,
    login, logout and handle_unauthorized.
    """

    @property
    def state(self) -> SessionState:
        """Current state of the session state machine."""
        ...

    @property
    def session(self) -> Optional[Session]:
        """The live session, or None when unauthenticated."""
        ...

    @property
    def is_authenticated(self) -> bool:
        """True iff both a token and a user are held in memory."""
        ...

    async def bootstrap(self) -> SessionState:
        """
        Recover a persisted session at application start.

        Returns:
            The resulting state (AUTHENTICATED or UNAUTHENTICATED)
        """
        ...

    async def login(self, email: str, password: str) -> User:
        """
        Authenticate with the backend and open a session.

        Args:
            email: User email
            password: User password

        Returns:
            The authenticated user's profile

        Raises:
            AuthenticationError: If credentials are rejected or the
                response carries no usable token
            RoleMismatchError: If the profile's role disagrees with the token
        """
        ...

    async def logout(self) -> None:
        """Close the session. Never raises, safe to call repeatedly."""
        ...

    def handle_unauthorized(self) -> None:
        """Tear the session down after the backend answered 401."""
        ...

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """
        Register a state listener.

        Returns:
            A callable that unregisters the listener
        """
        ...
