"""Tests for the dashboard usage snapshot."""

import asyncio

import pytest

from tts_portal.domain.billing import UsageMeter
from tts_portal.domain.errors import ApiError, NotAuthenticatedError
from tts_portal.services.usage import UsageService


def test_dashboard_requires_session(api_client, session_store) -> None:
    service = UsageService(api_client, session_store)

    with pytest.raises(NotAuthenticatedError):
        asyncio.run(service.get_dashboard())

    assert api_client.calls == []


def test_dashboard_builds_meters(api_client, signed_in_store) -> None:
    service = UsageService(api_client, signed_in_store)

    snapshot = asyncio.run(service.get_dashboard())

    assert api_client.calls_to("get_subscription") == [("T",)]
    assert snapshot.plan == "starter"
    assert snapshot.can_upgrade is False
    assert snapshot.characters.percent == 80.0
    assert snapshot.characters.level == "warning"
    assert snapshot.characters.display == "80,000 / 100,000"
    assert snapshot.generations.unlimited is True
    assert snapshot.generations.percent == 0.0
    assert snapshot.generations.display == "12 / Unlimited"


def test_dashboard_auth_error_is_surfaced_verbatim(api_client, signed_in_store) -> None:
    api_client.subscription_payload = {"success": False, "error": "Token expired"}
    service = UsageService(api_client, signed_in_store)

    with pytest.raises(ApiError) as excinfo:
        asyncio.run(service.get_dashboard())

    assert excinfo.value.message == "Token expired"


def test_dashboard_defaults_to_free_tier(api_client, signed_in_store) -> None:
    api_client.subscription_payload = {"success": True}
    service = UsageService(api_client, signed_in_store)

    snapshot = asyncio.run(service.get_dashboard())

    assert snapshot.plan == "free"
    assert snapshot.can_upgrade is True
    assert snapshot.characters == UsageMeter(used=0, limit=10000)
    assert snapshot.generations == UsageMeter(used=0, limit=50)


def test_usage_meter_levels() -> None:
    assert UsageMeter(used=95, limit=100).level == "critical"
    assert UsageMeter(used=71, limit=100).level == "warning"
    assert UsageMeter(used=70, limit=100).level == "normal"
    assert UsageMeter(used=150, limit=100).percent == 100.0
