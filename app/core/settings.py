from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_DEFAULT_STATIC_DIR = Path(__file__).resolve().parents[2] / "public"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=(".env", ".env-model"),
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    app_name: str = Field(default="CHEESA Chatbot", alias="APP_NAME")
    environment: Literal["local", "dev", "staging", "prod"] = Field(
        default="local", alias="ENVIRONMENT"
    )
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3001, alias="PORT")

    google_ai_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "GOOGLE_AI_KEY", "GEMINI_API_KEY", "GOOGLE_API_KEY"
        ),
    )
    gemini_model: str = Field(default="gemini-2.5-flash", alias="GEMINI_MODEL")
    temperature: float = Field(default=0.7, alias="GEMINI_TEMPERATURE")
    top_p: float = Field(default=0.95, alias="GEMINI_TOP_P")
    top_k: int = Field(default=40, alias="GEMINI_TOP_K")
    max_output_tokens: int = Field(default=1024, alias="GEMINI_MAX_OUTPUT_TOKENS")
    request_timeout_ms: int | None = Field(default=None, alias="GEMINI_TIMEOUT_MS")

    # Set by Vercel deployments; pins the CORS allow-origin.
    vercel_url: str | None = Field(default=None, alias="VERCEL_URL")
    static_dir: Path = Field(default=_DEFAULT_STATIC_DIR, alias="STATIC_DIR")
    expose_error_details: bool = Field(default=True, alias="EXPOSE_ERROR_DETAILS")

    assistant_name: str = Field(default="CHEEStron", alias="ASSISTANT_NAME")
    association_name: str = Field(
        default="Chemical Engineering Student Association",
        alias="ASSOCIATION_NAME",
    )
    association_short_name: str = Field(
        default="CHEESA", alias="ASSOCIATION_SHORT_NAME"
    )
    university: str = Field(default="KNUST", alias="UNIVERSITY")

    @property
    def cors_origin(self) -> str | None:
        if not self.vercel_url:
            return None
        host = self.vercel_url.strip().rstrip("/")
        if host.startswith(("http://", "https://")):
            return host
        return f"https://{host}"


@lru_cache
def get_settings() -> Settings:
    return Settings()
