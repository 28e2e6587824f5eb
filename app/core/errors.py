from __future__ import annotations


class ChatbotError(Exception):
    """Base class for errors raised by this service."""


class InvalidInput(ChatbotError):
    """The client sent a request the relay cannot act on (HTTP 400)."""


class UpstreamFailure(ChatbotError):
    """The generative-language provider failed or returned nothing usable."""

    def __init__(self, message: str, *, details: str | None = None) -> None:
        super().__init__(message)
        self.details = details if details is not None else message


class StartupConfigurationError(ChatbotError):
    """Required configuration is missing; the process must not start."""


class MalformedBody(InvalidInput):
    """The request body is not decodable JSON."""

    def __init__(self, details: str) -> None:
        super().__init__("Invalid JSON body")
        self.details = details
