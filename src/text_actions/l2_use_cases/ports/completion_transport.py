"""Port: completion transport."""

from __future__ import annotations

from typing import Protocol

from text_actions.l1_entities.chat_completion import ChatCompletionRequest


class CompletionTransport(Protocol):
    """Abstract HTTP boundary to an OpenAI/Ollama-compatible backend. Zero framework types leak through."""

    async def get_models_list(self) -> list[str]:
        """Model names advertised by the current provider. Raises CompletionTransportError."""
        ...

    async def get_completion_response(self, request: ChatCompletionRequest) -> str:
        """Single non-streamed completion. Returns the first choice's text.

        Raises CompletionTransportError on HTTP failure, InvalidResponseError when no choices come back.
        """
        ...

    def check_connectivity(self) -> tuple[bool, str]:
        """Pre-flight connectivity check. Returns (ok, error_message)."""
        ...
