from __future__ import annotations

from functools import lru_cache

from app.core.settings import get_settings
from app.models.prompt import GenerationParams
from app.services.gemini_service import GeminiService
from app.services.prompts import build_persona
from app.services.relay_service import ConversationRelay


@lru_cache
def get_gemini_service() -> GeminiService:
    return GeminiService(settings=get_settings())


@lru_cache
def get_conversation_relay() -> ConversationRelay:
    settings = get_settings()
    return ConversationRelay(
        provider=get_gemini_service(),
        persona=build_persona(settings),
        params=GenerationParams.from_settings(settings),
    )
