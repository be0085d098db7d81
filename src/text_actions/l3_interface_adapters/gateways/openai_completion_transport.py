"""Gateway: OpenAI-compatible completion transport — implements CompletionTransport port.

Works with any backend that speaks the OpenAI chat-completions wire format
(OpenAI, Groq, vLLM, LM Studio, Ollama's /v1 API, ...). Requests go to the
provider's configured endpoints, so non-standard paths are fine.
"""

from __future__ import annotations

import logging
import os

import httpx
import openai
from pydantic import ValidationError

from text_actions.l1_entities.chat_completion import (
    ChatCompletionRequest,
    ChatCompletionResponse,
    ModelListResponse,
)
from text_actions.l1_entities.errors import CompletionTransportError, InvalidResponseError, TextActionError
from text_actions.l1_entities.settings import ProviderConfig
from text_actions.l2_use_cases.ports.settings_store import SettingsStore

log = logging.getLogger('txa.llm')

# Keyless local servers still need a non-empty value for the SDK.
_PLACEHOLDER_API_KEY = 'not-needed'


class OpenAICompatCompletionTransport:
    """Wraps openai.AsyncOpenAI's raw get/post to implement the CompletionTransport protocol.

    The active provider is re-read from *settings_store* on every call.
    Provider headers override the SDK's default auth header.
    """

    def __init__(self, settings_store: SettingsStore, api_key: str | None = None) -> None:
        self._settings = settings_store
        self._api_key = api_key

    async def get_models_list(self) -> list[str]:
        provider = self._current_provider()
        if not provider.models_endpoint.strip():
            raise CompletionTransportError(f'models endpoint is not configured for provider {provider.provider_name}')
        client = openai.AsyncOpenAI(**self._client_kwargs(provider))
        try:
            resp = await client.get(provider.models_endpoint, cast_to=httpx.Response)
        except openai.APIError as e:
            raise CompletionTransportError(f'failed to retrieve model list from provider: {e}') from e

        payload = _parse(ModelListResponse, resp)
        names = [m.id for m in payload.data if m.id.strip()]
        log.info('Provider %s advertises %d models', provider.provider_name, len(names))
        return names

    async def get_completion_response(self, request: ChatCompletionRequest) -> str:
        provider = self._current_provider()
        client = openai.AsyncOpenAI(**self._client_kwargs(provider))
        try:
            resp = await client.post(
                provider.completion_endpoint,
                cast_to=httpx.Response,
                body=request.model_dump(exclude_none=True),
            )
        except openai.APIError as e:
            raise CompletionTransportError(f'chat completion request failed: {e}') from e

        payload = _parse(ChatCompletionResponse, resp)
        if not payload.choices:
            raise InvalidResponseError('invalid response: no choices returned in the completion response')
        content = payload.choices[0].message.content or ''
        if payload.usage is not None:
            log.debug(
                'Usage: prompt=%d completion=%d total=%d',
                payload.usage.prompt_tokens,
                payload.usage.completion_tokens,
                payload.usage.total_tokens,
            )
        return content

    def check_connectivity(self) -> tuple[bool, str]:
        try:
            provider = self._current_provider()
            client = openai.OpenAI(**self._client_kwargs(provider))
            client.get(provider.models_endpoint, cast_to=httpx.Response)
            return True, ''
        except openai.AuthenticationError as e:
            return False, f'Authentication failed: {e}'
        except (openai.APIError, TextActionError) as e:
            return False, f'Cannot connect to OpenAI-compatible API: {e}'

    def _current_provider(self) -> ProviderConfig:
        return self._settings.get_current_settings().current_provider_config

    def _client_kwargs(self, provider: ProviderConfig) -> dict:
        return {
            'api_key': self._api_key or os.environ.get('OPENAI_API_KEY') or _PLACEHOLDER_API_KEY,
            'base_url': provider.base_url,
            'default_headers': dict(provider.headers),
        }


def _parse(model_cls, resp: httpx.Response):
    try:
        return model_cls.model_validate_json(resp.content)
    except ValidationError as e:
        raise InvalidResponseError(f'invalid response: unexpected payload from provider: {e}') from e
