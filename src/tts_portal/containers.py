"""Dependency container wiring for the portal."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from tts_portal.adapters.json_file_session_storage import JsonFileSessionStorage
from tts_portal.adapters.tts_api_client import HttpxTtsApiClient, TtsApiClient
from tts_portal.config import Settings
from tts_portal.services.auth import AuthService
from tts_portal.services.catalog import VoiceCatalogService
from tts_portal.services.generation import GenerationWorkflow
from tts_portal.services.pricing import PricingService
from tts_portal.services.sessions import SessionStore
from tts_portal.services.usage import UsageService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    api_client: TtsApiClient
    session_store: SessionStore
    auth_service: AuthService
    catalog_service: VoiceCatalogService
    pricing_service: PricingService
    usage_service: UsageService
    generation_workflow: GenerationWorkflow
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    api_client = HttpxTtsApiClient.create(
        base_url=resolved_settings.tts_api_base_url,
        timeout=resolved_settings.request_timeout_seconds,
    )
    session_store = SessionStore(
        JsonFileSessionStorage.create(resolved_settings.session_file)
    )
    generation_workflow = GenerationWorkflow(
        api_client=api_client,
        session_store=session_store,
        poll_interval_seconds=resolved_settings.poll_interval_seconds,
        max_poll_attempts=resolved_settings.poll_max_attempts,
    )

    async def close_resources() -> None:
        await generation_workflow.aclose()
        await api_client.close()

    return AppContainer(
        settings=resolved_settings,
        api_client=api_client,
        session_store=session_store,
        auth_service=AuthService(api_client, session_store),
        catalog_service=VoiceCatalogService(api_client),
        pricing_service=PricingService(api_client),
        usage_service=UsageService(api_client, session_store),
        generation_workflow=generation_workflow,
        close_resources=close_resources,
    )
