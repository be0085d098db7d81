"""Use case: run one text action end to end through the completion backend."""

from __future__ import annotations

import logging
import time

from text_actions.l1_entities.action import ActionRequest
from text_actions.l1_entities.errors import (
    ActionValidationError,
    CompletionTransportError,
    ConfigurationError,
    InvalidResponseError,
)
from text_actions.l1_entities.prompt import PROMPT_CATEGORY_TRANSLATION
from text_actions.l1_entities.settings import Settings
from text_actions.l2_use_cases.ports.completion_transport import CompletionTransport
from text_actions.l2_use_cases.ports.prompt_catalog import PromptCatalog
from text_actions.l2_use_cases.ports.settings_store import SettingsStore
from text_actions.l2_use_cases.utils.prompt_builder import build_prompt, is_blank
from text_actions.l2_use_cases.utils.request_builder import build_chat_completion_request
from text_actions.l2_use_cases.utils.response_sanitizer import sanitize_reasoning_block

log = logging.getLogger('txa.pipeline')


def validate_provider_settings(settings: Settings) -> None:
    """Fail fast, before any network call, when the provider or model is incomplete."""
    provider = settings.current_provider_config
    if is_blank(provider.base_url):
        log.error('Provider base URL not configured (provider=%s)', provider.provider_name)
        raise ConfigurationError('provider base_url is not configured properly')
    if is_blank(provider.completion_endpoint):
        log.error('Provider completion endpoint not configured (provider=%s)', provider.provider_name)
        raise ConfigurationError('provider completion_endpoint is not configured properly')
    if is_blank(settings.llm_config.model_name):
        log.error('Model not configured (provider=%s)', provider.provider_name)
        raise ConfigurationError('model_name is not configured properly')


def _completion_context(model_name: str, provider_name: str, started: float) -> str:
    elapsed_ms = (time.monotonic() - started) * 1000
    return f'model={model_name}, provider={provider_name}, elapsed={elapsed_ms:.0f}ms'


class ProcessActionUseCase:
    """Resolves the prompt, checks the provider, calls the LLM once, cleans the answer.

    Every call re-reads the settings snapshot and re-issues both network
    requests; nothing is cached between calls. A same-language translation
    returns before either request is made.
    """

    def __init__(
        self,
        prompt_catalog: PromptCatalog,
        settings_store: SettingsStore,
        transport: CompletionTransport,
    ) -> None:
        self._prompts = prompt_catalog
        self._settings = settings_store
        self._transport = transport

    async def execute(self, request: ActionRequest) -> str:
        """Process *request*. Returns the sanitized model output. Raises TextActionError subclasses."""
        started = time.monotonic()
        action_id = request.id
        log.info('Processing action %s', action_id)

        if is_blank(action_id):
            log.error('Action ID is blank')
            raise ActionValidationError('action id is blank')

        prompt_def = self._prompts.get_prompt(action_id)
        category = prompt_def.category
        log.debug('Resolved prompt %s (category=%s)', action_id, category)

        system_prompt = self._prompts.get_system_prompt(category)

        settings = self._settings.get_current_settings()
        provider_name = settings.current_provider_config.provider_name
        model_name = settings.llm_config.model_name
        log.info('Loaded settings (provider=%s, model=%s)', provider_name, model_name)

        validate_provider_settings(settings)

        user_prompt = build_prompt(prompt_def.value, category, request, settings.use_markdown_for_output)
        log.debug('Built user prompt for %s (%d chars)', action_id, len(user_prompt))

        if category == PROMPT_CATEGORY_TRANSLATION and request.input_language_id == request.output_language_id:
            log.info('Skipping translation for %s: same language (%s)', action_id, request.input_language_id)
            return request.input_text

        await self._check_model_availability(model_name, provider_name)

        completion_request = build_chat_completion_request(settings, user_prompt, system_prompt)
        llm_started = time.monotonic()
        try:
            raw = await self._transport.get_completion_response(completion_request)
        except CompletionTransportError as e:
            context = _completion_context(model_name, provider_name, llm_started)
            log.error('Completion failed for %s (%s): %s', action_id, context, e)
            raise CompletionTransportError(f'failed to get completion result ({context}): {e}') from e
        except InvalidResponseError as e:
            context = _completion_context(model_name, provider_name, llm_started)
            log.error('Unusable completion for %s (%s): %s', action_id, context, e)
            raise InvalidResponseError(f'failed to get completion result ({context}): {e}') from e
        log.debug('LLM raw response (%d chars): %s', len(raw), raw[:500])

        result = sanitize_reasoning_block(raw)
        log.info(
            'Action %s completed (category=%s, %.0fms, %d chars)',
            action_id,
            category,
            (time.monotonic() - started) * 1000,
            len(result),
        )
        return result

    async def _check_model_availability(self, model_name: str, provider_name: str) -> None:
        """Fatal on transport failure; an empty or mismatched list only warns."""
        try:
            models = await self._transport.get_models_list()
        except CompletionTransportError as e:
            log.error('Failed to load models (provider=%s): %s', provider_name, e)
            raise CompletionTransportError(f'failed to load models for provider {provider_name}: {e}') from e

        if not models:
            log.warning('No models available from provider %s', provider_name)
        elif model_name not in models:
            log.warning(
                'Configured model %s not found on provider %s; available: %s',
                model_name,
                provider_name,
                models,
            )
