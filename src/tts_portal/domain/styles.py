"""Reference data for emotion and style control."""

from dataclasses import dataclass

DEFAULT_EXAGGERATION = 0.5
DEFAULT_CFG_WEIGHT = 0.5


@dataclass(frozen=True)
class StylePreset:
    """Recommended exaggeration/cfg_weight pair for a speaking style."""

    key: str
    label: str
    exaggeration: float
    cfg_weight: float
    use_case: str


@dataclass(frozen=True)
class EmotionTag:
    """Bracketed tag the server parses from the start of the text."""

    tag: str
    korean_alias: str | None
    exaggeration: float
    cfg_weight: float


STYLE_PRESETS: dict[str, StylePreset] = {
    preset.key: preset
    for preset in (
        StylePreset("calm", "Calm / News", 0.3, 0.5, "Neutral, professional tone"),
        StylePreset("normal", "Normal", 0.5, 0.5, "Natural conversation"),
        StylePreset("friendly", "Friendly / Lively", 0.7, 0.3, "Expressive, engaging"),
        StylePreset("dramatic", "Dramatic", 0.8, 0.3, "Strong emotion, storytelling"),
        StylePreset(
            "slow_narration", "Slow Narration", 0.4, 0.2, "Audiobook, meditation"
        ),
    )
}

EMOTION_TAGS: tuple[EmotionTag, ...] = (
    EmotionTag("deadpan", "무표정", 0.2, 0.6),
    EmotionTag("flatly", "단조롭게", 0.25, 0.6),
    EmotionTag("seriously", "진지하게", 0.35, 0.55),
    EmotionTag("confused", "혼란", 0.55, 0.45),
    EmotionTag("surprised", "놀람", 0.85, 0.3),
    EmotionTag("whining", "칭얼", 0.7, 0.35),
    EmotionTag("thoughtfully", "생각하며", 0.4, 0.35),
    EmotionTag("hesitantly", "망설이며", 0.45, 0.3),
    EmotionTag("whispers", "속삭임", 0.3, 0.2),
    EmotionTag("gasps", "헐떡", 0.9, 0.25),
    EmotionTag("excited", "신남", 0.85, 0.25),
    EmotionTag("worried", "걱정", 0.6, 0.4),
    EmotionTag("nervous", "긴장", 0.65, 0.4),
    EmotionTag("sadly", "슬픔", 0.55, 0.35),
    EmotionTag("sorrowful", "비통", 0.5, 0.3),
    EmotionTag("calm", "차분", 0.3, 0.5),
    EmotionTag("hopefully", "희망", 0.6, 0.4),
    EmotionTag("mysteriously", "신비", 0.5, 0.35),
    EmotionTag("pause", None, 0.4, 0.3),
    EmotionTag("happy", "기쁨", 0.8, 0.3),
    EmotionTag("sad", None, 0.6, 0.4),
    EmotionTag("angry", "화남", 0.9, 0.3),
    EmotionTag("fear", None, 0.7, 0.4),
    EmotionTag("surprise", None, 0.85, 0.3),
    EmotionTag("disgust", None, 0.7, 0.5),
    EmotionTag("neutral", None, 0.5, 0.5),
    EmotionTag("serious", None, 0.4, 0.6),
    EmotionTag("cheerful", None, 0.75, 0.3),
    EmotionTag("gentle", None, 0.4, 0.4),
    EmotionTag("warm", "따뜻", 0.55, 0.4),
    EmotionTag("whisper", None, 0.3, 0.2),
    EmotionTag("shout", "외침", 0.95, 0.3),
)


def find_emotion_tag(text: str) -> EmotionTag | None:
    """Return the emotion tag that prefixes the text, if any."""
    stripped = text.lstrip()
    if not stripped.startswith("["):
        return None
    end = stripped.find("]")
    if end == -1:
        return None
    name = stripped[1:end].strip().lower()
    for tag in EMOTION_TAGS:
        if name in {tag.tag, tag.korean_alias}:
            return tag
    return None
