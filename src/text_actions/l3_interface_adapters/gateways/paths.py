"""Shared path constants for settings and user prompt overrides."""

from __future__ import annotations

from platformdirs import user_config_path, user_log_path

CONFIG_DIR = user_config_path('llm-text-actions')
USER_PROMPTS_PATH = CONFIG_DIR / 'prompts.yaml'
LOG_DIR = user_log_path('llm-text-actions')

DEFAULT_SETTINGS_PATHS = [
    CONFIG_DIR / 'settings.yaml',
    CONFIG_DIR / 'settings.yml',
]
