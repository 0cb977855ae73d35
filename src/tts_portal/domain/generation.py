"""Domain models for voice generation jobs."""

from dataclasses import dataclass
from enum import StrEnum

from tts_portal.domain.errors import InvalidGenerationRequest
from tts_portal.domain.styles import STYLE_PRESETS

IN_PROGRESS_JOB_STATUSES = frozenset({"pending", "queued", "processing"})
COMPLETED_JOB_STATUS = "completed"
FAILED_JOB_STATUS = "failed"


class GenerationState(StrEnum):
    """States of a single generation run."""

    IDLE = "idle"
    SUBMITTING = "submitting"
    POLLING = "polling"
    COMPLETED = "completed"
    FAILED = "failed"
    TIMED_OUT = "timed_out"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in _TERMINAL_STATES


_TERMINAL_STATES = frozenset(
    {
        GenerationState.COMPLETED,
        GenerationState.FAILED,
        GenerationState.TIMED_OUT,
        GenerationState.CANCELLED,
    }
)


@dataclass(frozen=True)
class GenerationRequest:
    """Text and voice settings for one generation submission."""

    text: str
    voice_id: str
    language: str
    exaggeration: float | None = None
    cfg_weight: float | None = None

    def __post_init__(self) -> None:
        if not self.text.strip():
            raise InvalidGenerationRequest("Text must not be empty.")
        if not self.voice_id:
            raise InvalidGenerationRequest("A voice must be selected.")
        if self.exaggeration is not None and self.exaggeration < 0:
            raise InvalidGenerationRequest("exaggeration must be >= 0.")
        if self.cfg_weight is not None and not 0 <= self.cfg_weight <= 1:
            raise InvalidGenerationRequest("cfg_weight must be between 0 and 1.")

    @classmethod
    def with_style(
        cls,
        text: str,
        voice_id: str,
        language: str,
        style: str,
        exaggeration: float | None = None,
        cfg_weight: float | None = None,
    ) -> "GenerationRequest":
        """Build a request from a style preset.

        Explicit ``exaggeration`` or ``cfg_weight`` values override the preset.
        """
        preset = STYLE_PRESETS.get(style)
        if preset is None:
            raise InvalidGenerationRequest(f"Unknown style preset: {style}")
        return cls(
            text=text,
            voice_id=voice_id,
            language=language,
            exaggeration=(
                preset.exaggeration if exaggeration is None else exaggeration
            ),
            cfg_weight=preset.cfg_weight if cfg_weight is None else cfg_weight,
        )


@dataclass(frozen=True)
class Job:
    """Client-side snapshot of a server job."""

    job_id: str
    status: str
    result_url: str | None = None
    error: str | None = None

    @classmethod
    def from_payload(cls, payload: dict[str, object], job_id: str) -> "Job":
        raw_status = payload.get("status")
        result_url = payload.get("result_url")
        error = payload.get("error")
        return cls(
            job_id=str(payload.get("job_id") or job_id),
            status=str(raw_status).lower() if raw_status is not None else "",
            result_url=str(result_url) if result_url else None,
            error=str(error) if error else None,
        )

    @property
    def in_progress(self) -> bool:
        return self.status in IN_PROGRESS_JOB_STATUSES


@dataclass(frozen=True)
class GenerationOutcome:
    """Terminal result of a generation run."""

    state: GenerationState
    job_id: str | None = None
    result_url: str | None = None
    error: str | None = None
    polls: int = 0

    def to_dict(self) -> dict[str, object]:
        return {
            "state": self.state.value,
            "job_id": self.job_id,
            "result_url": self.result_url,
            "error": self.error,
            "polls": self.polls,
        }
