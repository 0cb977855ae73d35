"""Sign-in, registration and sign-out."""

import logging
from dataclasses import dataclass

from tts_portal.adapters.tts_api_client import ApiClientError, TtsApiClient
from tts_portal.domain.models import UserProfile
from tts_portal.services.sessions import SessionStore

MIN_PASSWORD_LENGTH = 8
NETWORK_ERROR_MESSAGE = "Network error. Please try again."

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthResult:
    """Outcome of a login or registration form submission."""

    success: bool
    user: UserProfile | None = None
    error: str | None = None


@dataclass
class AuthService:
    """Form handling for the login and registration pages."""

    api_client: TtsApiClient
    session_store: SessionStore

    async def login(self, email: str, password: str) -> AuthResult:
        """Sign in and persist the session on success."""
        if not email.strip() or not password:
            return AuthResult(success=False, error="Email and password are required")
        try:
            payload = await self.api_client.login(email.strip(), password)
        except ApiClientError:
            return AuthResult(success=False, error=NETWORK_ERROR_MESSAGE)
        return self._handle_auth_payload(payload, fallback_error="Login failed")

    async def register(
        self,
        email: str,
        password: str,
        name: str,
        confirm_password: str | None = None,
    ) -> AuthResult:
        """Create an account and persist the session on success."""
        if not email.strip() or not password or not name.strip():
            return AuthResult(
                success=False, error="Name, email and password are required"
            )
        if confirm_password is not None and password != confirm_password:
            return AuthResult(success=False, error="Passwords do not match")
        if len(password) < MIN_PASSWORD_LENGTH:
            return AuthResult(
                success=False,
                error=f"Password must be at least {MIN_PASSWORD_LENGTH} characters",
            )
        try:
            payload = await self.api_client.register(
                email.strip(), password, name.strip()
            )
        except ApiClientError:
            return AuthResult(success=False, error=NETWORK_ERROR_MESSAGE)
        return self._handle_auth_payload(payload, fallback_error="Registration failed")

    def logout(self) -> None:
        self.session_store.clear()
        _logger.info("Signed out")

    def _handle_auth_payload(
        self, payload: dict[str, object], *, fallback_error: str
    ) -> AuthResult:
        token = payload.get("token")
        if not payload.get("success") or not isinstance(token, str) or not token:
            error = payload.get("error")
            return AuthResult(
                success=False, error=str(error) if error else fallback_error
            )
        self.session_store.clear()
        self.session_store.set_token(token)
        raw_user = payload.get("user")
        user = UserProfile.from_payload(raw_user) if isinstance(raw_user, dict) else None
        if user is not None:
            self.session_store.set_user(user)
        _logger.info("Signed in user_id=%s", user.id if user else "n/a")
        return AuthResult(success=True, user=user)
