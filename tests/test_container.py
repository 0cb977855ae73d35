"""Tests for container wiring."""

import asyncio

from tts_portal.adapters.json_file_session_storage import JsonFileSessionStorage
from tts_portal.config import Settings
from tts_portal.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.generation_workflow.max_poll_attempts == 30
    assert container.generation_workflow.poll_interval_seconds == 0
    assert container.generation_workflow.session_store is container.session_store
    assert isinstance(container.session_store.storage, JsonFileSessionStorage)
    asyncio.run(container.close_resources())


def test_settings_defaults(monkeypatch) -> None:
    monkeypatch.delenv("POLL_INTERVAL_SECONDS", raising=False)
    settings = Settings()

    assert settings.poll_interval_seconds == 2.0
    assert settings.poll_max_attempts == 30
    assert settings.request_timeout_seconds is None
