from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

from app.core.settings import Settings


class PromptTurn(BaseModel):
    """One provider-facing turn. Gemini only knows "user" and "model"."""

    model_config = ConfigDict(frozen=True)

    role: Literal["user", "model"]
    text: str


class GenerationParams(BaseModel):
    model_config = ConfigDict(frozen=True)

    temperature: float = 0.7
    top_p: float = 0.95
    top_k: int = 40
    max_output_tokens: int = 1024

    @classmethod
    def from_settings(cls, settings: Settings) -> GenerationParams:
        return cls(
            temperature=settings.temperature,
            top_p=settings.top_p,
            top_k=settings.top_k,
            max_output_tokens=settings.max_output_tokens,
        )
