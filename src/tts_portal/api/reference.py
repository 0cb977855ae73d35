"""Static content for the API reference page."""

from dataclasses import asdict

from tts_portal.domain.models import LANGUAGES
from tts_portal.domain.styles import (
    DEFAULT_CFG_WEIGHT,
    DEFAULT_EXAGGERATION,
    EMOTION_TAGS,
    STYLE_PRESETS,
)

ENDPOINTS: tuple[dict[str, object], ...] = (
    {
        "method": "GET",
        "path": "/voices",
        "auth": False,
        "description": "Get list of available voices",
        "params": f"language (optional): {', '.join(LANGUAGES)}",
    },
    {
        "method": "GET",
        "path": "/voices/{voice_id}/audio",
        "auth": False,
        "description": "Get presigned URL for voice sample",
    },
    {
        "method": "POST",
        "path": "/generate",
        "auth": True,
        "description": "Generate voice from text with emotion control",
        "body": ["text", "voice_id", "language", "exaggeration?", "cfg_weight?"],
    },
    {
        "method": "GET",
        "path": "/jobs/{job_id}",
        "auth": False,
        "description": "Get job status and result",
    },
)

PARAMETERS: tuple[dict[str, object], ...] = (
    {
        "name": "exaggeration",
        "range": "0.0 ~ 1.0+",
        "default": DEFAULT_EXAGGERATION,
        "description": "Emotion intensity. Higher = more emotional, faster speech",
    },
    {
        "name": "cfg_weight",
        "range": "0.0 ~ 1.0",
        "default": DEFAULT_CFG_WEIGHT,
        "description": "Speed/rhythm control. Lower = slower, more deliberate",
    },
)

TIPS: tuple[str, ...] = (
    "Higher exaggeration speeds up speech - lower cfg_weight to compensate",
    "For fast-speaking reference audio, use cfg_weight around 0.3",
    "Extreme values may cause instability - stay within 0.2 ~ 0.9",
)


def build_reference(base_url: str) -> dict[str, object]:
    """Return the API reference page content."""
    return {
        "base_url": base_url,
        "endpoints": [
            {**endpoint, "example": _curl_example(base_url, endpoint)}
            for endpoint in ENDPOINTS
        ],
        "parameters": list(PARAMETERS),
        "presets": [asdict(preset) for preset in STYLE_PRESETS.values()],
        "emotion_tags": [asdict(tag) for tag in EMOTION_TAGS],
        "tips": list(TIPS),
    }


def _curl_example(base_url: str, endpoint: dict[str, object]) -> str:
    path = str(endpoint["path"])
    path = path.replace("{voice_id}", "ko_harry_ko").replace("{job_id}", "abc123")
    if endpoint["method"] == "POST":
        return (
            f'curl -X POST "{base_url}{path}" -H "Content-Type: application/json" '
            '-H "Authorization: Bearer <token>" '
            '-d \'{"text": "Hello", "voice_id": "ko_harry_ko", "language": "ko"}\''
        )
    if path == "/voices":
        return f'curl "{base_url}{path}?language=ko"'
    return f'curl "{base_url}{path}"'
