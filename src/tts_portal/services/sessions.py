"""Client-side session state: bearer token and cached user profile."""

import json
import logging
from dataclasses import dataclass
from typing import Protocol

from tts_portal.domain.models import UserProfile

TOKEN_KEY = "tts_token"
USER_KEY = "tts_user"

_logger = logging.getLogger(__name__)


class SessionStorage(Protocol):
    """Durable key-value storage for session values."""

    def get(self, key: str) -> str | None:
        """Return the stored value for a key, if present."""

    def set(self, key: str, value: str) -> None:
        """Store a value under a key."""

    def delete(self, *keys: str) -> None:
        """Remove the given keys together."""


@dataclass
class SessionStore:
    """Holds who is signed in, if anyone.

    The token is opaque: it is never decoded or checked for expiry here.
    The API reports invalid tokens on the requests that use them.
    """

    storage: SessionStorage

    def set_token(self, token: str) -> None:
        self.storage.set(TOKEN_KEY, token)

    def get_token(self) -> str | None:
        return self.storage.get(TOKEN_KEY) or None

    def set_user(self, user: UserProfile) -> None:
        self.storage.set(USER_KEY, user.to_json())

    def get_user(self) -> UserProfile | None:
        """Return the cached profile, only while a token is present."""
        if not self.is_authenticated():
            return None
        raw = self.storage.get(USER_KEY)
        if not raw:
            return None
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError:
            _logger.warning("Discarding unreadable cached user profile")
            return None
        if not isinstance(payload, dict):
            return None
        return UserProfile.from_payload(payload)

    def clear(self) -> None:
        """Remove the token and user together."""
        self.storage.delete(TOKEN_KEY, USER_KEY)

    def is_authenticated(self) -> bool:
        return self.get_token() is not None
