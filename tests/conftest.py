"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

from pathlib import Path

import pytest

from text_actions.l1_entities.chat_completion import ChatCompletionRequest
from text_actions.l1_entities.errors import PromptNotFoundError
from text_actions.l1_entities.prompt import (
    PROMPT_CATEGORY_PROOFREAD,
    PROMPT_CATEGORY_TRANSLATION,
    AppPrompts,
    PromptDefinition,
    PromptGroup,
    PromptType,
)
from text_actions.l1_entities.settings import Settings
from text_actions.l4_frameworks_and_drivers.settings_defaults import build_settings

# --- Protocol-conforming Fakes ---


def _system(category: str, value: str) -> PromptDefinition:
    return PromptDefinition(
        id=f'system_{category}',
        name=f'System {category}',
        type=PromptType.SYSTEM,
        category=category,
        value=value,
    )


def _user(prompt_id: str, name: str, category: str, value: str) -> PromptDefinition:
    return PromptDefinition(id=prompt_id, name=name, type=PromptType.USER, category=category, value=value)


class FakePromptCatalog:
    """Fake prompt catalog for L2 use case tests."""

    def __init__(self, app_prompts: AppPrompts | None = None) -> None:
        self._app_prompts = app_prompts or AppPrompts(
            prompt_groups={
                PROMPT_CATEGORY_PROOFREAD: PromptGroup(
                    group_name='Proofreading',
                    system_prompt=_system(PROMPT_CATEGORY_PROOFREAD, 'You are a proofreader.'),
                    prompts={
                        'proofread': _user(
                            'proofread',
                            'Proofread',
                            PROMPT_CATEGORY_PROOFREAD,
                            'Proofread as {{user_format}}: {{user_text}}',
                        ),
                    },
                ),
                PROMPT_CATEGORY_TRANSLATION: PromptGroup(
                    group_name='Translation',
                    system_prompt=_system(PROMPT_CATEGORY_TRANSLATION, 'You are a translator.'),
                    prompts={
                        'translatePlain': _user(
                            'translatePlain',
                            'Translate',
                            PROMPT_CATEGORY_TRANSLATION,
                            'Translate from {{input_language}} to {{output_language}}: {{user_text}}',
                        ),
                    },
                ),
            }
        )
        self.get_app_prompts_calls = 0

    def get_prompt(self, action_id: str) -> PromptDefinition:
        for group in self._app_prompts.prompt_groups.values():
            if action_id in group.prompts:
                return group.prompts[action_id]
        raise PromptNotFoundError(f"failed to retrieve prompt with ID '{action_id}': unknown prompt id")

    def get_system_prompt(self, category: str) -> str:
        group = self._app_prompts.prompt_groups.get(category)
        if group is None:
            raise PromptNotFoundError(f"failed to retrieve system prompt for category '{category}'")
        return group.system_prompt.value

    def get_app_prompts(self) -> AppPrompts:
        self.get_app_prompts_calls += 1
        return self._app_prompts


class FakeSettingsStore:
    """Fake settings store — returns whatever snapshot the test put in."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or build_settings({})
        self.calls = 0

    def get_current_settings(self) -> Settings:
        self.calls += 1
        return self._settings

    def set_settings(self, settings: Settings) -> None:
        self._settings = settings


class FakeCompletionTransport:
    """Fake completion transport for L2/L3 tests."""

    def __init__(self, response: str = 'Fake LLM response', models: list[str] | None = None) -> None:
        self._response = response
        self._models = list(models) if models is not None else ['llama3.2']
        self._models_error: Exception | None = None
        self._completion_error: Exception | None = None
        self._connectivity = (True, '')
        self.models_calls = 0
        self.completion_calls: list[ChatCompletionRequest] = []

    async def get_models_list(self) -> list[str]:
        self.models_calls += 1
        if self._models_error is not None:
            raise self._models_error
        return list(self._models)

    async def get_completion_response(self, request: ChatCompletionRequest) -> str:
        self.completion_calls.append(request)
        if self._completion_error is not None:
            raise self._completion_error
        return self._response

    def check_connectivity(self) -> tuple[bool, str]:
        return self._connectivity

    def set_response(self, response: str) -> None:
        self._response = response

    def set_models(self, models: list[str]) -> None:
        self._models = list(models)

    def set_models_error(self, error: Exception) -> None:
        self._models_error = error

    def set_completion_error(self, error: Exception) -> None:
        self._completion_error = error

    def set_connectivity(self, ok: bool, msg: str = '') -> None:
        self._connectivity = (ok, msg)

    @property
    def network_calls(self) -> int:
        return self.models_calls + len(self.completion_calls)


# --- Standard Fixtures ---


@pytest.fixture
def default_settings() -> Settings:
    return build_settings({})


@pytest.fixture
def fake_catalog() -> FakePromptCatalog:
    return FakePromptCatalog()


@pytest.fixture
def fake_settings_store(default_settings: Settings) -> FakeSettingsStore:
    return FakeSettingsStore(default_settings)


@pytest.fixture
def fake_transport() -> FakeCompletionTransport:
    return FakeCompletionTransport()


@pytest.fixture
def sample_settings_yaml(tmp_path: Path) -> Path:
    content = """\
current_provider_config:
  provider_name: "LM Studio"
  provider_type: "open-ai-compatible"
  base_url: "http://localhost:1234"
  models_endpoint: "/v1/models"
  completion_endpoint: "/v1/chat/completions"
  headers:
    Authorization: "Bearer secret"
llm_config:
  model_name: "qwen3:8b"
  is_temperature_enabled: true
  temperature: 0.2
use_markdown_for_output: true
"""
    p = tmp_path / 'settings.yaml'
    p.write_text(content, encoding='utf-8')
    return p
