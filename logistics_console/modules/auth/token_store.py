"""
Persistence of the bearer token and the cached user profile.

A plain key/value boundary over Storage: no validation happens here
beyond parsing the stored profile back into a User.
"""

import json
import logging
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from logistics_console.shared.config import get_settings
from logistics_console.shared.storage import Storage

from .models import User

logger = logging.getLogger(__name__)


class TokenStore:
    """Reads and writes the two session entries of a Storage."""

    def __init__(
        self,
        storage: Storage,
        token_key: Optional[str] = None,
        user_key: Optional[str] = None,
    ):
        settings = get_settings()
        self._storage = storage
        self._token_key = token_key or settings.token_key
        self._user_key = user_key or settings.user_key

    def save(self, token: str) -> None:
        self._storage.set_item(self._token_key, token)

    def read(self) -> Optional[str]:
        return self._storage.get_item(self._token_key) or None

    def save_user(self, profile: User) -> None:
        self._storage.set_item(self._user_key, profile.model_dump_json(by_alias=True))

    def read_user(self) -> Optional[User]:
        """Return the cached profile; a malformed entry reads as absent."""
        raw = self._storage.get_item(self._user_key)
        if not raw:
            return None
        try:
            return User.model_validate(json.loads(raw))
        except (json.JSONDecodeError, PydanticValidationError) as e:
            logger.warning(f"Ignoring malformed stored user profile: {type(e).__name__}")
            return None

    def clear(self) -> None:
        self._storage.remove_item(self._token_key)
        self._storage.remove_item(self._user_key)
