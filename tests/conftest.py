"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from tts_portal.adapters.tts_api_client import TtsApiClient
from tts_portal.config import Settings
from tts_portal.containers import AppContainer
from tts_portal.domain.generation import GenerationState
from tts_portal.services.auth import AuthService
from tts_portal.services.catalog import VoiceCatalogService
from tts_portal.services.generation import GenerationWorkflow
from tts_portal.services.pricing import PricingService
from tts_portal.services.sessions import SessionStorage, SessionStore
from tts_portal.services.usage import UsageService


@dataclass
class InMemorySessionStorage(SessionStorage):
    """In-memory session storage for tests."""

    values: dict[str, str] = field(default_factory=dict)

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value

    def delete(self, *keys: str) -> None:
        for key in keys:
            self.values.pop(key, None)


def job_payload(status: str, **extra: object) -> dict[str, object]:
    """Build a /jobs/{id} response body."""
    return {"success": True, "job": {"job_id": "abc123", "status": status, **extra}}


@dataclass
class FakeTtsApiClient(TtsApiClient):
    """Fake TTS API client with scripted responses that records calls."""

    login_payload: dict[str, object] = field(
        default_factory=lambda: {
            "success": True,
            "token": "T",
            "user": {"id": "u-1", "name": "Harry", "email": "harry@example.com"},
        }
    )
    register_payload: dict[str, object] = field(
        default_factory=lambda: {
            "success": True,
            "token": "T-new",
            "user": {"id": "u-2", "name": "Sally", "email": "sally@example.com"},
        }
    )
    plans_payload: dict[str, object] = field(
        default_factory=lambda: {
            "success": True,
            "plans": [
                {"key": "free", "name": "Free", "price": 0},
                {"key": "pro", "name": "Pro", "price": 29900, "highlight": True},
            ],
        }
    )
    subscription_payload: dict[str, object] = field(
        default_factory=lambda: {
            "success": True,
            "subscription": {"plan": "starter"},
            "usage": {
                "characters_used": 80000,
                "characters_limit": 100000,
                "generations_used": 12,
                "generations_limit": -1,
            },
        }
    )
    voices_payload: dict[str, object] = field(
        default_factory=lambda: {
            "success": True,
            "total": 2,
            "voices": [
                {
                    "voice_id": "ko_harry_ko",
                    "name": "Harry KO",
                    "language": "ko",
                    "gender": "male",
                },
                {
                    "voice_id": "ko_sally_ko",
                    "name": "Sally KO",
                    "language": "ko",
                    "gender": "female",
                },
            ],
        }
    )
    sample_payload: dict[str, object] = field(
        default_factory=lambda: {
            "success": True,
            "voice_id": "ko_harry_ko",
            "audio_url": "https://samples.test/ko_harry_ko.mp3",
            "expires_in": 3600,
        }
    )
    submit_payload: dict[str, object] = field(
        default_factory=lambda: {"success": True, "job_id": "abc123", "status": "pending"}
    )
    job_payloads: list[dict[str, object]] = field(default_factory=list)
    errors: dict[str, Exception] = field(default_factory=dict)
    calls: list[tuple[str, tuple[object, ...]]] = field(default_factory=list)

    def _record(self, name: str, *args: object) -> None:
        self.calls.append((name, args))
        error = self.errors.get(name)
        if error is not None:
            raise error

    def calls_to(self, name: str) -> list[tuple[object, ...]]:
        return [args for call, args in self.calls if call == name]

    async def register(
        self, email: str, password: str, name: str
    ) -> dict[str, object]:
        self._record("register", email, password, name)
        return self.register_payload

    async def login(self, email: str, password: str) -> dict[str, object]:
        self._record("login", email, password)
        return self.login_payload

    async def list_plans(self) -> dict[str, object]:
        self._record("list_plans")
        return self.plans_payload

    async def get_subscription(self, token: str) -> dict[str, object]:
        self._record("get_subscription", token)
        return self.subscription_payload

    async def list_voices(self, language: str | None = None) -> dict[str, object]:
        self._record("list_voices", language)
        return self.voices_payload

    async def get_voice_sample_url(self, voice_id: str) -> dict[str, object]:
        self._record("get_voice_sample_url", voice_id)
        return self.sample_payload

    async def submit_generation(  # noqa: PLR0913
        self,
        text: str,
        voice_id: str,
        language: str,
        token: str,
        exaggeration: float | None = None,
        cfg_weight: float | None = None,
    ) -> dict[str, object]:
        self._record(
            "submit_generation", text, voice_id, language, token, exaggeration, cfg_weight
        )
        return self.submit_payload

    async def get_job(self, job_id: str) -> dict[str, object]:
        self._record("get_job", job_id)
        if not self.job_payloads:
            return job_payload("processing")
        if len(self.job_payloads) == 1:
            return self.job_payloads[0]
        return self.job_payloads.pop(0)


@dataclass
class RecordingSleep:
    """Sleep replacement that records requested delays and returns at once."""

    delays: list[float] = field(default_factory=list)

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        tts_api_base_url="https://api.test/v1/tts",
        session_file=str(tmp_path / "session.json"),
        poll_interval_seconds=0,
    )


@pytest.fixture
def api_client() -> FakeTtsApiClient:
    return FakeTtsApiClient()


@pytest.fixture
def session_store() -> SessionStore:
    return SessionStore(InMemorySessionStorage())


@pytest.fixture
def signed_in_store(session_store: SessionStore) -> SessionStore:
    session_store.set_token("T")
    return session_store


@pytest.fixture
def transitions() -> list[GenerationState]:
    return []


@pytest.fixture
def workflow(
    api_client: FakeTtsApiClient,
    session_store: SessionStore,
    transitions: list[GenerationState],
) -> GenerationWorkflow:
    return GenerationWorkflow(
        api_client=api_client,
        session_store=session_store,
        sleep=RecordingSleep(),
        on_state_change=transitions.append,
    )


@pytest.fixture
def container(
    settings: Settings,
    api_client: FakeTtsApiClient,
    session_store: SessionStore,
) -> AppContainer:
    generation_workflow = GenerationWorkflow(
        api_client=api_client,
        session_store=session_store,
        poll_interval_seconds=settings.poll_interval_seconds,
        max_poll_attempts=settings.poll_max_attempts,
        sleep=RecordingSleep(),
    )

    async def close_resources() -> None:
        await generation_workflow.aclose()

    return AppContainer(
        settings=settings,
        api_client=api_client,
        session_store=session_store,
        auth_service=AuthService(api_client, session_store),
        catalog_service=VoiceCatalogService(api_client),
        pricing_service=PricingService(api_client),
        usage_service=UsageService(api_client, session_store),
        generation_workflow=generation_workflow,
        close_resources=close_resources,
    )
