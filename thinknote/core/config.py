"""Application settings loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from thinknote.core.constants import CHAT_MODEL_DEFAULT, SUMMARY_MODEL_DEFAULT, TRANSCRIPTION_MODEL_DEFAULT


class Settings(BaseSettings):
    """
    Configuration loaded from environment variables.

    Only secrets and deployment-specific values belong here.
    Application constants live in their respective modules.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ---------------------------------------------------------------------------
    # Providers (secrets are checked at call time, not at startup)
    # ---------------------------------------------------------------------------
    openai_api_key: str = Field(default="", validation_alias="OPENAI_API_KEY")
    openai_base_url: str | None = Field(default=None, validation_alias="OPENAI_BASE_URL")
    summary_model: str = Field(default=SUMMARY_MODEL_DEFAULT, validation_alias="SUMMARY_MODEL")
    chat_model: str = Field(default=CHAT_MODEL_DEFAULT, validation_alias="CHAT_MODEL")
    groq_api_key: str = Field(default="", validation_alias="GROQ_API_KEY")
    transcription_model: str = Field(default=TRANSCRIPTION_MODEL_DEFAULT, validation_alias="TRANSCRIPTION_MODEL")

    # ---------------------------------------------------------------------------
    # Environment config (optional)
    # ---------------------------------------------------------------------------
    app_env: str = Field(default="local", validation_alias="APP_ENV")

    # ---------------------------------------------------------------------------
    # Deployment config (optional)
    # ---------------------------------------------------------------------------
    cors_allow_origins: Annotated[list[str], NoDecode] = Field(default_factory=list, validation_alias="CORS_ALLOW_ORIGINS")
    rate_limit: int = Field(default=0, validation_alias="RATE_LIMIT")  # requests/min, 0 = disabled
    max_request_bytes: int = Field(default=26_214_400, validation_alias="MAX_REQUEST_BYTES")  # 25 MB
    max_audio_bytes: int = Field(default=25_000_000, validation_alias="MAX_AUDIO_BYTES")

    @field_validator(
        "openai_api_key",
        "openai_base_url",
        "summary_model",
        "chat_model",
        "groq_api_key",
        "transcription_model",
        "app_env",
        mode="before",
    )
    @classmethod
    def _strip_strings(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("openai_base_url", mode="after")
    @classmethod
    def _empty_as_none(cls, value: str | None) -> str | None:
        return value or None

    @field_validator("cors_allow_origins", mode="before")
    @classmethod
    def _parse_list(cls, value: object) -> object:
        if value is None:
            return []
        if isinstance(value, str):
            items = [item.strip() for item in value.split(",")]
            return [item for item in items if item]
        return value

    @field_validator("rate_limit", mode="after")
    @classmethod
    def _clamp_rate_limit(cls, value: int) -> int:
        return max(0, value)

    @field_validator("max_request_bytes", "max_audio_bytes", mode="after")
    @classmethod
    def _clamp_byte_limits(cls, value: int) -> int:
        return max(1024, value)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
