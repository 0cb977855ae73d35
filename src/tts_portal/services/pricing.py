"""Subscription plan listing."""

import logging
from dataclasses import dataclass

from tts_portal.adapters.tts_api_client import ApiClientError, TtsApiClient
from tts_portal.domain.billing import DEFAULT_PLANS, Plan

_logger = logging.getLogger(__name__)


@dataclass
class PricingService:
    """Service for the pricing page."""

    api_client: TtsApiClient

    async def list_plans(self) -> list[Plan]:
        """Return plans from the API, or the built-in catalog if unavailable."""
        try:
            payload = await self.api_client.list_plans()
        except ApiClientError as exc:
            _logger.warning("Falling back to built-in plans: %s", exc)
            return list(DEFAULT_PLANS)
        raw_plans = payload.get("plans")
        if not payload.get("success") or not isinstance(raw_plans, list):
            _logger.warning("Falling back to built-in plans: %s", payload.get("error"))
            return list(DEFAULT_PLANS)
        plans = [
            plan
            for plan in (
                Plan.from_payload(item) for item in raw_plans if isinstance(item, dict)
            )
            if plan is not None
        ]
        return plans or list(DEFAULT_PLANS)
