"""Voice catalog lookups."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime

from tts_portal.adapters.tts_api_client import TtsApiClient
from tts_portal.domain.errors import ApiError
from tts_portal.domain.models import Voice, VoiceList, VoiceSample
from tts_portal.services.responses import raise_for_failure

_logger = logging.getLogger(__name__)


@dataclass
class VoiceCatalogService:
    """Reads voices and voice samples from the API."""

    api_client: TtsApiClient

    async def list_voices(self, language: str | None = None) -> VoiceList:
        """Return voices for a language, or all voices when none is given."""
        payload = await self.api_client.list_voices(language)
        raise_for_failure(payload, "Failed to load voices")
        raw_voices = payload.get("voices") or []
        voices: list[Voice] = []
        for item in raw_voices if isinstance(raw_voices, list) else []:
            if not isinstance(item, dict) or not item.get("voice_id"):
                _logger.warning("Skipping voice entry without voice_id: %s", item)
                continue
            voices.append(Voice.from_payload(item))
        total = payload.get("total")
        return VoiceList(
            total=total if isinstance(total, int) else len(voices), voices=voices
        )

    async def get_voice_sample(self, voice_id: str) -> VoiceSample:
        """Return a fresh sample URL. Callers must not keep it past expiry."""
        payload = await self.api_client.get_voice_sample_url(voice_id)
        raise_for_failure(payload, "Failed to load voice sample")
        audio_url = payload.get("audio_url")
        if not isinstance(audio_url, str) or not audio_url:
            raise ApiError("Voice sample is not available")
        expires_in = payload.get("expires_in")
        return VoiceSample(
            voice_id=voice_id,
            audio_url=audio_url,
            expires_in=expires_in if isinstance(expires_in, int) else None,
            fetched_at=datetime.now(tz=UTC),
        )
