from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator


class ChatTurn(BaseModel):
    """A prior conversation turn as held by the browser."""

    role: str = ""  # "user" or "assistant"
    content: str = ""

    @field_validator("role", "content", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)


class ChatRequest(BaseModel):
    message: str = ""
    history: list[ChatTurn] = Field(
        default_factory=list, alias="conversationHistory"
    )

    @field_validator("message", mode="before")
    @classmethod
    def _message_must_be_text(cls, value: Any) -> str:
        # Anything but a string counts as no message at all.
        return value if isinstance(value, str) else ""

    @field_validator("history", mode="before")
    @classmethod
    def _history_must_be_list(cls, value: Any) -> list[Any]:
        if not isinstance(value, list):
            return []
        return [turn if isinstance(turn, (dict, ChatTurn)) else {} for turn in value]


class ChatResponse(BaseModel):
    response: str


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None
