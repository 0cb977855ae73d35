"""Domain models for the TTS portal."""

import json
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

LANGUAGES: dict[str, str] = {
    "ko": "한국어",
    "en": "English",
    "ja": "日本語",
    "es": "Español",
    "pt": "Português",
}


@dataclass(frozen=True)
class UserProfile:
    """Represents the signed-in user as returned by the API."""

    id: str
    name: str | None
    email: str | None
    extra: dict[str, object] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: dict[str, object]) -> "UserProfile":
        """Build a profile from an API user object."""
        extra = {
            key: value
            for key, value in payload.items()
            if key not in {"id", "name", "email"}
        }
        raw_id = payload.get("id")
        return cls(
            id="" if raw_id is None else str(raw_id),
            name=_optional_str(payload.get("name")),
            email=_optional_str(payload.get("email")),
            extra=extra,
        )

    def to_payload(self) -> dict[str, object]:
        """Return the profile as an API-shaped dict."""
        return {**self.extra, "id": self.id, "name": self.name, "email": self.email}

    def to_json(self) -> str:
        return json.dumps(self.to_payload(), ensure_ascii=False)

    @property
    def display_name(self) -> str:
        return self.name or self.email or ""


@dataclass(frozen=True)
class Voice:
    """A voice available for synthesis."""

    voice_id: str
    name: str
    language: str
    gender: str | None

    @classmethod
    def from_payload(cls, payload: dict[str, object]) -> "Voice":
        return cls(
            voice_id=str(payload["voice_id"]),
            name=str(payload.get("name") or payload["voice_id"]),
            language=str(payload.get("language") or ""),
            gender=_optional_str(payload.get("gender")),
        )


@dataclass(frozen=True)
class VoiceList:
    """Voices returned by a catalog lookup."""

    total: int
    voices: list[Voice]


@dataclass(frozen=True)
class VoiceSample:
    """A time-limited pointer to a voice preview clip."""

    voice_id: str
    audio_url: str
    expires_in: int | None
    fetched_at: datetime

    def is_expired(self, now: datetime | None = None) -> bool:
        """Return True once the sample URL should no longer be used."""
        if self.expires_in is None:
            return False
        current = now or datetime.now(tz=UTC)
        return current >= self.fetched_at + timedelta(seconds=self.expires_in)


def _optional_str(value: object) -> str | None:
    if value is None:
        return None
    return str(value)
