from __future__ import annotations

import asyncio
import logging
from typing import Protocol

from google import genai
from google.genai import types

from app.core.errors import StartupConfigurationError, UpstreamFailure
from app.core.settings import Settings, get_settings
from app.models.prompt import GenerationParams, PromptTurn

logger = logging.getLogger(__name__)


class ChatProvider(Protocol):
    """Anything that turns an ordered list of turns into reply text.

    Implementations raise ``UpstreamFailure`` when no usable text comes back.
    """

    async def generate(
        self, turns: list[PromptTurn], params: GenerationParams
    ) -> str: ...


class GeminiService:
    def __init__(
        self,
        settings: Settings | None = None,
        client: genai.Client | None = None,
    ):
        self._settings = settings or get_settings()

        if client is None:
            if not self._settings.google_ai_key:
                raise StartupConfigurationError(
                    "Missing required environment variable: GOOGLE_AI_KEY"
                )
            http_options = None
            if self._settings.request_timeout_ms:
                http_options = types.HttpOptions(
                    timeout=self._settings.request_timeout_ms
                )
            client = genai.Client(
                api_key=self._settings.google_ai_key, http_options=http_options
            )

        self._client = client

    @property
    def model(self) -> str:
        return self._settings.gemini_model

    async def generate(
        self, turns: list[PromptTurn], params: GenerationParams
    ) -> str:
        contents = [
            types.Content(role=turn.role, parts=[types.Part.from_text(text=turn.text)])
            for turn in turns
        ]
        config = types.GenerateContentConfig(
            temperature=params.temperature,
            top_p=params.top_p,
            top_k=params.top_k,
            max_output_tokens=params.max_output_tokens,
        )

        def _send() -> str:
            response = self._client.models.generate_content(
                model=self.model,
                contents=contents,
                config=config,
            )

            # `.text` joins the text parts of the first candidate; None when blocked.
            text = getattr(response, "text", None)
            if isinstance(text, str) and text.strip():
                return text
            raise UpstreamFailure("Gemini returned no text in its response")

        try:
            return await asyncio.to_thread(_send)
        except UpstreamFailure:
            logger.error("Gemini response for model %s had no usable text", self.model)
            raise
        except Exception as e:
            logger.exception("Gemini request failed")
            raise UpstreamFailure(str(e) or e.__class__.__name__) from e
