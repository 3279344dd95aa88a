"""
HTTP transport for the logistics backend.

Wraps a single httpx.AsyncClient. Every request except the public ones
carries the bearer token read from the token provider at send time, and
every failure is normalized into the shared exception taxonomy:

- no response        -> NetworkError
- 401                -> UnauthorizedError (and the unauthorized hooks fire)
- 403                -> ForbiddenError
- 404                -> NotFoundError
- other 4xx          -> ValidationError with the server message verbatim
- 5xx / unclassified -> ServerError
"""

import logging
from typing import Any, Callable, Optional

import httpx

from .config import get_settings
from .exceptions import (
    AuthenticationError,
    ForbiddenError,
    NetworkError,
    NotFoundError,
    ServerError,
    UnauthorizedError,
    ValidationError,
    FORBIDDEN_MESSAGE,
    VALIDATION_ERROR_MESSAGE,
)

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Email ou mot de passe incorrect"

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}

TokenProvider = Callable[[], Optional[str]]
UnauthorizedHook = Callable[[], None]


def extract_error_message(response: httpx.Response) -> Optional[str]:
    """Pull the server's error message out of a JSON or plain-text body."""
    try:
        body = response.json()
    except ValueError:
        text = response.text.strip()
        return text or None
    if isinstance(body, dict):
        message = body.get("message") or body.get("error")
        return str(message) if message else None
    if isinstance(body, str):
        return body or None
    return None


class ApiClient:
    """
    Async JSON client for the logistics REST API.

    Services depend on this class rather than on httpx directly. Pass a
    custom httpx transport (e.g. httpx.MockTransport) to run against a
    fake backend.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        token_provider: Optional[TokenProvider] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = get_settings()
        self._token_provider = token_provider or (lambda: None)
        self._unauthorized_hooks: list[UnauthorizedHook] = []
        self._client = httpx.AsyncClient(
            base_url=base_url or settings.api_base_url,
            headers=DEFAULT_HEADERS,
            timeout=timeout if timeout is not None else settings.request_timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._client.aclose()

    def set_token_provider(self, token_provider: TokenProvider) -> None:
        """Replace the callable that supplies the bearer token."""
        self._token_provider = token_provider

    def on_unauthorized(self, hook: UnauthorizedHook) -> None:
        """Register a callback fired whenever an authenticated request gets a 401."""
        self._unauthorized_hooks.append(hook)

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[dict[str, Any]] = None,
        json: Any = None,
        authenticated: bool = True,
        token: Optional[str] = None,
    ) -> Any:
        """
        Send a request and return the decoded body.

        Args:
            method: HTTP method
            path: Path relative to the API base URL
            params: Query string parameters
            json: JSON body
            authenticated: Attach the bearer token (False for login)
            token: Explicit token overriding the token provider

        Returns:
            Decoded JSON, the raw text for non-JSON bodies, or None when empty

        Raises:
            LogisticsError: One of the transport error kinds
        """
        response = await self._send(
            method,
            path,
            params=params,
            json=json,
            authenticated=authenticated,
            token=token,
        )
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    async def get(self, path: str, **kwargs: Any) -> Any:
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs: Any) -> Any:
        return await self.request("POST", path, **kwargs)

    async def put(self, path: str, **kwargs: Any) -> Any:
        return await self.request("PUT", path, **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> Any:
        return await self.request("DELETE", path, **kwargs)

    async def get_bytes(self, path: str, accept: str = "application/pdf") -> bytes:
        """Download a binary document (labels, invoices)."""
        response = await self._send(
            "GET",
            path,
            headers={"Accept": accept},
            authenticated=True,
        )
        return response.content

    async def _send(
        self,
        method: str,
        path: str,
        *,
        params: Optional[dict[str, Any]] = None,
        json: Any = None,
        headers: Optional[dict[str, str]] = None,
        authenticated: bool = True,
        token: Optional[str] = None,
    ) -> httpx.Response:
        request_headers = dict(headers or {})
        if authenticated:
            bearer = token or self._token_provider()
            if bearer:
                request_headers["Authorization"] = f"Bearer {bearer}"

        try:
            response = await self._client.request(
                method,
                path,
                params=params,
                json=json,
                headers=request_headers,
            )
        except httpx.TransportError as e:
            logger.warning(f"{method} {path} failed without a response: {e!r}")
            raise NetworkError(details={"path": path}) from e

        logger.debug(f"{method} {path} -> {response.status_code}")
        if response.status_code >= 400:
            self._raise_for_status(response, path, authenticated)
        return response

    def _raise_for_status(
        self,
        response: httpx.Response,
        path: str,
        authenticated: bool,
    ) -> None:
        status = response.status_code
        message = extract_error_message(response)
        details = {"path": path, "status": status}

        if status == 401:
            if not authenticated:
                # Public endpoints (login) answer 401 for bad credentials
                raise AuthenticationError(
                    message or INVALID_CREDENTIALS_MESSAGE,
                    code="INVALID_CREDENTIALS",
                    details=details,
                )
            for hook in self._unauthorized_hooks:
                hook()
            raise UnauthorizedError(details=details)
        if status == 403:
            raise ForbiddenError(message or FORBIDDEN_MESSAGE, details=details)
        if status == 404:
            raise NotFoundError(details=details)
        if 400 <= status < 500:
            raise ValidationError(
                message or VALIDATION_ERROR_MESSAGE,
                code="VALIDATION_ERROR",
                details=details,
            )
        raise ServerError(details=details)
