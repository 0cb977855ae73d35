"""HTTP client for the TTS service API."""

import logging
from dataclasses import dataclass
from typing import Protocol

import httpx

_logger = logging.getLogger(__name__)


class ApiClientError(Exception):
    """Base class for failures below the JSON body level."""


class ApiTransportError(ApiClientError):
    """The request never produced a response."""

    def __init__(self, message: str = "Request failed") -> None:
        super().__init__(message)


class ApiResponseFormatError(ApiClientError):
    """The response body was not a JSON object."""


class TtsApiClient(Protocol):
    """Interface for TTS API interactions."""

    async def register(
        self, email: str, password: str, name: str
    ) -> dict[str, object]:
        """Create an account and return the raw API body."""

    async def login(self, email: str, password: str) -> dict[str, object]:
        """Sign in and return the raw API body."""

    async def list_plans(self) -> dict[str, object]:
        """Return the subscription tiers."""

    async def get_subscription(self, token: str) -> dict[str, object]:
        """Return the plan and usage snapshot for a bearer token."""

    async def list_voices(self, language: str | None = None) -> dict[str, object]:
        """Return voices, optionally filtered by language."""

    async def get_voice_sample_url(self, voice_id: str) -> dict[str, object]:
        """Return a time-limited sample URL for a voice."""

    async def submit_generation(  # noqa: PLR0913
        self,
        text: str,
        voice_id: str,
        language: str,
        token: str,
        exaggeration: float | None = None,
        cfg_weight: float | None = None,
    ) -> dict[str, object]:
        """Submit a generation job."""

    async def get_job(self, job_id: str) -> dict[str, object]:
        """Return the current state of a generation job."""


@dataclass
class HttpxTtsApiClient(TtsApiClient):
    """HTTPX-backed TTS API client."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout: float | None = None

    @classmethod
    def create(cls, base_url: str, timeout: float | None = None) -> "HttpxTtsApiClient":
        """Create a client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            http_client=httpx.AsyncClient(),
            timeout=timeout,
        )

    async def register(
        self, email: str, password: str, name: str
    ) -> dict[str, object]:
        """Create an account."""
        return await self._request(
            "POST",
            "/auth/register",
            json={"email": email, "password": password, "name": name},
        )

    async def login(self, email: str, password: str) -> dict[str, object]:
        """Sign in with email and password."""
        return await self._request(
            "POST", "/auth/login", json={"email": email, "password": password}
        )

    async def list_plans(self) -> dict[str, object]:
        """Fetch the plan list."""
        return await self._request("GET", "/plans")

    async def get_subscription(self, token: str) -> dict[str, object]:
        """Fetch subscription and usage for the token owner."""
        return await self._request("GET", "/subscription", token=token)

    async def list_voices(self, language: str | None = None) -> dict[str, object]:
        """Fetch voices."""
        params = {"language": language} if language else None
        return await self._request("GET", "/voices", params=params)

    async def get_voice_sample_url(self, voice_id: str) -> dict[str, object]:
        """Fetch a presigned sample URL."""
        return await self._request("GET", f"/voices/{voice_id}/audio")

    async def submit_generation(  # noqa: PLR0913
        self,
        text: str,
        voice_id: str,
        language: str,
        token: str,
        exaggeration: float | None = None,
        cfg_weight: float | None = None,
    ) -> dict[str, object]:
        """Submit a generation job."""
        payload: dict[str, object] = {
            "text": text,
            "voice_id": voice_id,
            "language": language,
        }
        if exaggeration is not None:
            payload["exaggeration"] = exaggeration
        if cfg_weight is not None:
            payload["cfg_weight"] = cfg_weight
        return await self._request("POST", "/generate", json=payload, token=token)

    async def get_job(self, job_id: str) -> dict[str, object]:
        """Fetch a job by id."""
        return await self._request("GET", f"/jobs/{job_id}")

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, object] | None = None,
        params: dict[str, str] | None = None,
        token: str | None = None,
    ) -> dict[str, object]:
        headers = {"Authorization": f"Bearer {token}"} if token is not None else None
        extra: dict[str, object] = {}
        if self.timeout is not None:
            extra["timeout"] = self.timeout
        try:
            response = await self.http_client.request(
                method,
                f"{self.base_url}{path}",
                json=json,
                params=params,
                headers=headers,
                **extra,
            )
        except httpx.HTTPError as exc:
            _logger.warning("TTS API %s %s failed: %s", method, path, exc)
            raise ApiTransportError() from exc

        try:
            body = response.json()
        except ValueError as exc:
            _logger.warning(
                "TTS API %s %s returned a non-JSON body (status=%s)",
                method,
                path,
                response.status_code,
            )
            raise ApiResponseFormatError(
                f"Malformed response from {path} (status {response.status_code})"
            ) from exc
        if not isinstance(body, dict):
            raise ApiResponseFormatError(f"Unexpected response shape from {path}")
        return body
