"""
Session manager implementation.

State machine over UNAUTHENTICATED -> AUTHENTICATING -> AUTHENTICATED.
A session is only ever established with both the token and the profile
in hand, and every failure path tears both down together.
"""

import logging
import time
from typing import Awaitable, Callable, Optional
from urllib.parse import quote

from logistics_console.shared.config import get_settings
from logistics_console.shared.exceptions import LogisticsError
from logistics_console.shared.http import ApiClient

from .exceptions import ExpiredTokenError, MissingTokenError, RoleMismatchError
from .interfaces import ISessionManager, SessionListener
from .models import Session, SessionState, TokenClaims, User
from .profile import parse_user_profile
from .token_store import TokenStore
from .tokens import decode_claims

logger = logging.getLogger(__name__)

LOGIN_ENDPOINT = "/utilisateur/login"
USER_ENDPOINT = "/utilisateur"

RemoteLogout = Callable[[], Awaitable[None]]


def _extract_token(payload: object) -> str:
    """Read the token from {token} or {success, data: {token}}."""
    if isinstance(payload, dict):
        token = payload.get("token")
        if not token and isinstance(payload.get("data"), dict):
            token = payload["data"].get("token")
        if token and isinstance(token, str):
            return token
    raise MissingTokenError("Token non reçu du serveur")


class SessionManager(ISessionManager):
    """
    Owns the session and the token store.

    Registers itself with the ApiClient as the token provider and as the
    401 handler, so every entity service call shares this session.
    """

    def __init__(
        self,
        api: ApiClient,
        token_store: TokenStore,
        clock: Callable[[], float] = time.time,
        remote_logout: Optional[RemoteLogout] = None,
    ):
        self._api = api
        self._token_store = token_store
        self._clock = clock
        self._remote_logout = remote_logout
        self._settings = get_settings()

        self._state = SessionState.UNAUTHENTICATED
        self._session: Optional[Session] = None
        self._listeners: list[SessionListener] = []
        self._pending_redirect: Optional[str] = None

        api.set_token_provider(self._token_store.read)
        api.on_unauthorized(self.handle_unauthorized)

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def session(self) -> Optional[Session]:
        return self._session

    @property
    def is_authenticated(self) -> bool:
        return self._session is not None

    @property
    def token(self) -> Optional[str]:
        return self._session.raw_token if self._session else None

    @property
    def user(self) -> Optional[User]:
        return self._session.profile if self._session else None

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def consume_redirect(self) -> Optional[str]:
        """Return and clear the redirect requested by a forced logout."""
        target, self._pending_redirect = self._pending_redirect, None
        return target

    async def bootstrap(self) -> SessionState:
        """Recover the persisted session, if any, at application start."""
        token = self._token_store.read()
        if not token:
            logger.debug("No stored token, starting unauthenticated")
            self._teardown()
            return self._state

        try:
            claims = decode_claims(token)
        except LogisticsError:
            logger.warning("Stored token is unreadable, clearing it")
            self._teardown()
            return self._state

        if claims.is_expired(self._clock()):
            logger.info("Stored token has expired, clearing it")
            self._teardown()
            return self._state

        self._set_state(SessionState.AUTHENTICATING)
        try:
            profile = await self._fetch_profile(claims, token)
        except LogisticsError as e:
            logger.warning(f"Could not restore session: {e.code}")
            self._teardown()
            return self._state

        self._token_store.save_user(profile)
        self._establish(Session(raw_token=token, claims=claims, profile=profile))
        return self._state

    async def login(self, email: str, password: str) -> User:
        """Authenticate and open a session; rolls back entirely on failure."""
        self._set_state(SessionState.AUTHENTICATING)
        try:
            payload = await self._api.post(
                LOGIN_ENDPOINT,
                json={"email": email, "mot_passe": password},
                authenticated=False,
            )
            token = _extract_token(payload)
            claims = decode_claims(token)
            if claims.is_expired(self._clock()):
                raise ExpiredTokenError()

            profile = await self._fetch_profile(claims, token)
            if claims.role is not None and profile.role.name != claims.role:
                logger.error(
                    f"Role mismatch at login: token={claims.role} profile={profile.role.name}"
                )
                raise RoleMismatchError(claims.role, profile.role.name)

            self._token_store.save(token)
            self._token_store.save_user(profile)
        except BaseException:
            # Cancellation included: never leave a token without its profile
            self._teardown()
            raise

        self._establish(Session(raw_token=token, claims=claims, profile=profile))
        logger.info(f"Logged in as {profile.role.name}")
        return profile

    async def logout(self) -> None:
        """Close the session. Local clearing happens even if the remote call fails."""
        self._set_state(SessionState.AUTHENTICATING)
        try:
            if self._remote_logout is not None and self._session is not None:
                await self._remote_logout()
        except Exception as e:
            logger.warning(f"Remote logout failed, clearing local session anyway: {e!r}")
        finally:
            self._teardown()
        logger.info("Logged out")

    def handle_unauthorized(self) -> None:
        """Forced logout after a 401 from any service call."""
        if self._session is not None:
            logger.warning("Backend rejected the session, logging out")
        self._pending_redirect = self._settings.login_path
        self._teardown()

    async def refresh_profile(self) -> User:
        """
        Refetch the current user's profile.

        Raises:
            MissingTokenError: If there is no session
            RoleMismatchError: If the refreshed role disagrees with the token
        """
        if self._session is None:
            raise MissingTokenError()
        current = self._session
        profile = await self._fetch_profile(current.claims, current.raw_token)
        if current.claims.role is not None and profile.role.name != current.claims.role:
            self._teardown()
            raise RoleMismatchError(current.claims.role, profile.role.name)
        self._token_store.save_user(profile)
        self._establish(current.model_copy(update={"profile": profile}))
        return profile

    async def _fetch_profile(self, claims: TokenClaims, token: str) -> User:
        endpoint = f"{USER_ENDPOINT}/{quote(claims.subject_email, safe='@')}"
        payload = await self._api.get(endpoint, token=token)
        return parse_user_profile(payload, endpoint)

    def _establish(self, session: Session) -> None:
        self._session = session
        self._set_state(SessionState.AUTHENTICATED)

    def _teardown(self) -> None:
        self._session = None
        self._token_store.clear()
        self._set_state(SessionState.UNAUTHENTICATED)

    def _set_state(self, state: SessionState) -> None:
        self._state = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("Session listener failed")
