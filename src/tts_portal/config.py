"""Application configuration."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

DEFAULT_API_BASE_URL = (
    "https://0gqxz2ps31.execute-api.ap-northeast-2.amazonaws.com/prod/v1/gendao/tts"
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    tts_api_base_url: str = DEFAULT_API_BASE_URL
    session_file: str = ".tts_portal/session.json"
    poll_interval_seconds: float = Field(default=2.0, ge=0)
    poll_max_attempts: int = Field(default=30, ge=1)
    request_timeout_seconds: float | None = Field(default=None, gt=0)
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
