from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

import app.server as server
from app.core.errors import StartupConfigurationError
from app.core.settings import Settings
from app.dependencies import get_conversation_relay
from app.services.prompts import Persona
from app.services.relay_service import ConversationRelay


class _FakeSupervisor:
    installed = False

    def install(self, loop=None):
        _FakeSupervisor.installed = True


def test_main_refuses_to_start_without_api_key(monkeypatch):
    def _missing_key():
        raise StartupConfigurationError("Missing required environment variable: GOOGLE_AI_KEY")

    def _should_not_run(*args, **kwargs):
        raise AssertionError("uvicorn must not start")

    monkeypatch.setattr(server, "get_settings", lambda: Settings(_env_file=None))
    monkeypatch.setattr(server, "get_conversation_relay", _missing_key)
    monkeypatch.setattr(server.uvicorn, "run", _should_not_run)

    with pytest.raises(SystemExit) as excinfo:
        server.main()

    assert excinfo.value.code == 1


def test_main_runs_uvicorn_on_configured_port(monkeypatch):
    calls = []

    monkeypatch.setattr(
        server, "get_settings", lambda: Settings(_env_file=None, port=4321, host="127.0.0.1")
    )
    monkeypatch.setattr(server, "get_conversation_relay", lambda: object())
    monkeypatch.setattr(server, "ProcessSupervisor", _FakeSupervisor)
    monkeypatch.setattr(server.uvicorn, "run", lambda app, **kw: calls.append((app, kw)))

    server.main()

    assert _FakeSupervisor.installed
    app, kwargs = calls[0]
    assert kwargs["host"] == "127.0.0.1"
    assert kwargs["port"] == 4321
    app.dependency_overrides[get_conversation_relay] = lambda: ConversationRelay(
        provider=object(), persona=Persona(system_prompt="sys", greeting="hello")
    )
    r = TestClient(app).post("/api/chat", json={"message": ""})
    assert r.status_code == 400
    assert r.json() == {"error": "Message is required"}
