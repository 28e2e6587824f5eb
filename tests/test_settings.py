from __future__ import annotations

import pytest

from app.core.settings import Settings
from app.models.prompt import GenerationParams
from app.services.prompts import build_persona

_ENV = (
    "PORT",
    "VERCEL_URL",
    "GOOGLE_AI_KEY",
    "GEMINI_API_KEY",
    "GOOGLE_API_KEY",
    "GEMINI_TEMPERATURE",
    "ASSISTANT_NAME",
    "UNIVERSITY",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in _ENV:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.port == 3001
    assert settings.google_ai_key is None
    assert settings.gemini_model == "gemini-2.5-flash"
    assert settings.cors_origin is None
    assert settings.static_dir.name == "public"
    assert settings.expose_error_details is True


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("GEMINI_API_KEY", "from-gemini-var")
    monkeypatch.setenv("GEMINI_TEMPERATURE", "0.2")

    settings = Settings(_env_file=None)

    assert settings.port == 8080
    assert settings.google_ai_key == "from-gemini-var"
    assert GenerationParams.from_settings(settings).temperature == 0.2


@pytest.mark.parametrize(
    "vercel_url, expected",
    [
        ("cheesa-chatbot.vercel.app", "https://cheesa-chatbot.vercel.app"),
        ("https://cheesa-chatbot.vercel.app/", "https://cheesa-chatbot.vercel.app"),
    ],
)
def test_cors_origin_from_vercel_url(monkeypatch, vercel_url, expected):
    monkeypatch.setenv("VERCEL_URL", vercel_url)

    assert Settings(_env_file=None).cors_origin == expected


def test_persona_defaults():
    persona = build_persona(Settings(_env_file=None))

    assert persona.system_prompt.startswith("You are CHEEStron, a helpful AI assistant")
    assert "Chemical Engineering Student Association (CHEESA) at KNUST" in persona.system_prompt
    assert persona.greeting == (
        "I'm CHEEStron, your friendly Chemical Engineering assistant. "
        "How can I help you today?"
    )


def test_persona_follows_settings(monkeypatch):
    monkeypatch.setenv("ASSISTANT_NAME", "ChemBot")
    monkeypatch.setenv("UNIVERSITY", "UG")

    persona = build_persona(Settings(_env_file=None))

    assert "You are ChemBot" in persona.system_prompt
    assert "University life at UG" in persona.system_prompt
    assert persona.greeting.startswith("I'm ChemBot")
