"""Default settings — lives in L4, not domain."""

from __future__ import annotations

import copy

from text_actions.l1_entities.settings import Settings
from text_actions.l3_interface_adapters.gateways.yaml_settings_store import deep_merge

_OLLAMA_PROVIDER: dict = {
    'provider_name': 'Ollama',
    'provider_type': 'ollama',
    'base_url': 'http://localhost:11434',
    'models_endpoint': '/v1/models',
    'completion_endpoint': '/v1/chat/completions',
    'headers': {},
}

SETTINGS_DEFAULTS: dict = {
    'available_provider_configs': [copy.deepcopy(_OLLAMA_PROVIDER)],
    'current_provider_config': copy.deepcopy(_OLLAMA_PROVIDER),
    'llm_config': {
        'model_name': 'llama3.2',
        'is_temperature_enabled': False,
        'temperature': 0.5,
    },
    'language_config': {
        'languages': ['English', 'German', 'French', 'Spanish', 'Italian', 'Ukrainian', 'Japanese', 'Chinese'],
        'default_input_language': 'English',
        'default_output_language': 'German',
    },
    'use_markdown_for_output': False,
}


def build_settings(raw: dict) -> Settings:
    """Merge *raw* user overrides on top of defaults, then validate."""
    merged = copy.deepcopy(SETTINGS_DEFAULTS)
    deep_merge(merged, raw)
    return Settings.model_validate(merged)
