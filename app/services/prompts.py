from __future__ import annotations

from dataclasses import dataclass

from langchain_core.prompts import PromptTemplate

from app.core.settings import Settings

_SYSTEM_PROMPT = PromptTemplate.from_template(
    """You are {assistant_name}, a helpful AI assistant for the {association_name} ({association_short_name}) at {university}.
Your role is to provide information about:
- Chemical Engineering as a career path
- The Chemical Engineering program at {university}
- {association_short_name} activities and events
- General chemical engineering concepts
- University life at {university}

Be friendly, professional, and encouraging. If you don't know an answer, say so and suggest reaching out to {association_short_name} executives for more specific information."""
)

_GREETING = PromptTemplate.from_template(
    "I'm {assistant_name}, your friendly Chemical Engineering assistant. "
    "How can I help you today?"
)


@dataclass(frozen=True)
class Persona:
    system_prompt: str
    greeting: str


def build_persona(settings: Settings) -> Persona:
    variables = {
        "assistant_name": settings.assistant_name,
        "association_name": settings.association_name,
        "association_short_name": settings.association_short_name,
        "university": settings.university,
    }
    return Persona(
        system_prompt=_SYSTEM_PROMPT.format(**variables),
        greeting=_GREETING.format(assistant_name=settings.assistant_name),
    )
