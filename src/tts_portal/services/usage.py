"""Dashboard usage snapshot."""

from dataclasses import dataclass

from tts_portal.adapters.tts_api_client import TtsApiClient
from tts_portal.domain.billing import DashboardSnapshot, UsageMeter
from tts_portal.domain.errors import NotAuthenticatedError
from tts_portal.services.responses import raise_for_failure
from tts_portal.services.sessions import SessionStore

_FREE_TIER_USAGE = {
    "characters_used": 0,
    "characters_limit": 10000,
    "generations_used": 0,
    "generations_limit": 50,
}


@dataclass
class UsageService:
    """Builds the dashboard view from the subscription endpoint."""

    api_client: TtsApiClient
    session_store: SessionStore

    async def get_dashboard(self) -> DashboardSnapshot:
        """Fetch a fresh plan and usage snapshot for the signed-in user."""
        token = self.session_store.get_token()
        if token is None:
            raise NotAuthenticatedError("Sign in to view usage.")
        payload = await self.api_client.get_subscription(token)
        raise_for_failure(payload, "Failed to load subscription")

        raw_usage = payload.get("usage")
        usage: dict[str, object] = dict(_FREE_TIER_USAGE)
        if isinstance(raw_usage, dict):
            usage.update(raw_usage)
        subscription = payload.get("subscription")
        plan = "free"
        if isinstance(subscription, dict) and subscription.get("plan"):
            plan = str(subscription["plan"])
        return DashboardSnapshot(
            user=self.session_store.get_user(),
            plan=plan,
            characters=UsageMeter(
                used=_as_int(usage["characters_used"]),
                limit=_as_int(usage["characters_limit"]),
            ),
            generations=UsageMeter(
                used=_as_int(usage["generations_used"]),
                limit=_as_int(usage["generations_limit"]),
            ),
        )


def _as_int(value: object) -> int:
    if isinstance(value, int | float):
        return int(value)
    return 0
