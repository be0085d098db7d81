"""Pure functions for shaping chat completion requests."""

from __future__ import annotations

from text_actions.l1_entities.chat_completion import ChatCompletionRequest, ChatMessage, ChatOptions
from text_actions.l1_entities.settings import ProviderType, Settings


def build_chat_completion_request(settings: Settings, user_prompt: str, system_prompt: str) -> ChatCompletionRequest:
    """Build a single-choice, non-streamed request for the active model.

    Temperature is only sent when enabled; Ollama providers also get it
    mirrored into ``options``.
    """
    model_cfg = settings.llm_config
    request = ChatCompletionRequest(
        model=model_cfg.model_name,
        messages=[
            ChatMessage(role='system', content=system_prompt.strip()),
            ChatMessage(role='user', content=user_prompt.strip()),
        ],
        stream=False,
        n=1,
    )
    if model_cfg.is_temperature_enabled:
        request.temperature = model_cfg.temperature
        if settings.current_provider_config.provider_type == ProviderType.OLLAMA:
            request.options = ChatOptions(temperature=model_cfg.temperature)
    return request
