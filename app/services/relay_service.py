from __future__ import annotations

import logging

from app.core.errors import InvalidInput, UpstreamFailure
from app.models.chat import ChatTurn
from app.models.prompt import GenerationParams, PromptTurn
from app.services.gemini_service import ChatProvider
from app.services.prompts import Persona

logger = logging.getLogger(__name__)


def normalize_role(role: str) -> str:
    # Only an exact "user" stays user; "assistant", "system", "" all speak as the model.
    return "user" if role == "user" else "model"


class ConversationRelay:
    """Builds the provider prompt for one chat request and returns the reply.

    Holds no per-request state: one instance serves every request.
    """

    def __init__(
        self,
        provider: ChatProvider,
        persona: Persona,
        params: GenerationParams | None = None,
    ) -> None:
        self._provider = provider
        self._persona = persona
        self._params = params or GenerationParams()

    @property
    def params(self) -> GenerationParams:
        return self._params

    def assemble(self, message: str, history: list[ChatTurn]) -> list[PromptTurn]:
        turns = [
            PromptTurn(role="user", text=self._persona.system_prompt),
            PromptTurn(role="model", text=self._persona.greeting),
        ]
        turns.extend(
            PromptTurn(role=normalize_role(turn.role), text=turn.content)
            for turn in history
        )
        turns.append(PromptTurn(role="user", text=message))
        return turns

    async def reply(self, message: str, history: list[ChatTurn]) -> str:
        if not message.strip():
            raise InvalidInput("Message is required")

        turns = self.assemble(message, history)
        logger.debug("Relaying message with %d history turns", len(history))

        try:
            return await self._provider.generate(turns, self._params)
        except UpstreamFailure:
            raise
        except Exception as e:
            raise UpstreamFailure(str(e) or e.__class__.__name__) from e
