"""Tests for voice catalog and pricing services."""

import asyncio
from datetime import timedelta

import pytest

from tts_portal.adapters.tts_api_client import ApiTransportError
from tts_portal.domain.billing import DEFAULT_PLANS
from tts_portal.domain.errors import ApiError
from tts_portal.services.catalog import VoiceCatalogService
from tts_portal.services.pricing import PricingService


def test_list_voices_parses_voices(api_client) -> None:
    service = VoiceCatalogService(api_client)

    voice_list = asyncio.run(service.list_voices("ko"))

    assert voice_list.total == 2
    assert [voice.voice_id for voice in voice_list.voices] == [
        "ko_harry_ko",
        "ko_sally_ko",
    ]
    assert voice_list.voices[0].gender == "male"
    assert api_client.calls_to("list_voices") == [("ko",)]


def test_list_voices_skips_entries_without_id(api_client) -> None:
    api_client.voices_payload = {
        "success": True,
        "voices": [{"name": "Broken"}, {"voice_id": "en_amy", "name": "Amy"}],
    }
    service = VoiceCatalogService(api_client)

    voice_list = asyncio.run(service.list_voices())

    assert voice_list.total == 1
    assert voice_list.voices[0].voice_id == "en_amy"


def test_list_voices_failure_raises_api_error(api_client) -> None:
    api_client.voices_payload = {"success": False, "error": "Unsupported language"}
    service = VoiceCatalogService(api_client)

    with pytest.raises(ApiError, match="Unsupported language"):
        asyncio.run(service.list_voices("xx"))


def test_voice_sample_expiry(api_client) -> None:
    service = VoiceCatalogService(api_client)

    sample = asyncio.run(service.get_voice_sample("ko_harry_ko"))

    assert sample.audio_url == "https://samples.test/ko_harry_ko.mp3"
    assert sample.is_expired(sample.fetched_at + timedelta(seconds=3599)) is False
    assert sample.is_expired(sample.fetched_at + timedelta(seconds=3600)) is True


def test_voice_sample_without_url_raises(api_client) -> None:
    api_client.sample_payload = {"success": True}
    service = VoiceCatalogService(api_client)

    with pytest.raises(ApiError):
        asyncio.run(service.get_voice_sample("ko_harry_ko"))


def test_list_plans_from_api(api_client) -> None:
    service = PricingService(api_client)

    plans = asyncio.run(service.list_plans())

    assert [plan.key for plan in plans] == ["free", "pro"]
    assert plans[1].highlight is True
    assert plans[1].to_dict()["price_label"] == "29,900 KRW/mo"


def test_list_plans_falls_back_on_network_error(api_client) -> None:
    api_client.errors["list_plans"] = ApiTransportError()
    service = PricingService(api_client)

    plans = asyncio.run(service.list_plans())

    assert plans == list(DEFAULT_PLANS)


def test_list_plans_falls_back_on_failure_body(api_client) -> None:
    api_client.plans_payload = {"success": False, "error": "maintenance"}
    service = PricingService(api_client)

    plans = asyncio.run(service.list_plans())

    assert [plan.key for plan in plans] == ["free", "starter", "pro", "enterprise"]


def test_list_plans_skips_entries_without_key(api_client) -> None:
    api_client.plans_payload = {
        "success": True,
        "plans": [{"name": "Mystery", "price": 100}, {"plan": "starter", "price": 9900}],
    }
    service = PricingService(api_client)

    plans = asyncio.run(service.list_plans())

    assert [plan.key for plan in plans] == ["starter"]
    assert plans[0].name == "Starter"


def test_list_plans_all_keyless_falls_back(api_client) -> None:
    api_client.plans_payload = {"success": True, "plans": [{"name": "Mystery"}]}
    service = PricingService(api_client)

    assert asyncio.run(service.list_plans()) == list(DEFAULT_PLANS)
