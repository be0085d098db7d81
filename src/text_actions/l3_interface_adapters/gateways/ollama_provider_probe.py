"""Gateway: Ollama provider probe — native-API preflight for ollama-type providers."""

from __future__ import annotations

import httpx
import ollama as ollama_sync

from text_actions.l1_entities.errors import CompletionTransportError


class OllamaProviderProbe:
    """Wraps ollama.Client for connectivity and model checks against the native API."""

    def __init__(self, host: str = 'http://localhost:11434', headers: dict[str, str] | None = None) -> None:
        self._host = host
        self._headers = headers or {}

    def check_connectivity(self) -> tuple[bool, str]:
        try:
            client = ollama_sync.Client(host=self._host, headers=self._headers)
            client.list()
            return True, ''
        except Exception as e:
            return False, f'Cannot connect to Ollama: {e}'

    def list_models(self) -> list[str]:
        client = ollama_sync.Client(host=self._host, headers=self._headers)
        return [m.model for m in client.list().models if m.model]

    def check_models(self, models: list[str]) -> list[str]:
        """Return model names that are not pulled on the Ollama host.

        Raises CompletionTransportError when the host cannot be reached.
        """
        client = ollama_sync.Client(host=self._host, headers=self._headers)
        missing = []
        try:
            for model in models:
                try:
                    client.show(model)
                except ollama_sync.ResponseError:
                    missing.append(model)
        except (ConnectionError, httpx.HTTPError) as e:
            raise CompletionTransportError(f'Cannot connect to Ollama: {e}') from e
        return missing
