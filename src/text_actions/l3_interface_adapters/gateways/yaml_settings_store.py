"""Gateway: YAML settings store — implements SettingsStore port."""

from __future__ import annotations

import copy
import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from text_actions.l1_entities.errors import SettingsLoadError
from text_actions.l1_entities.settings import Settings
from text_actions.l3_interface_adapters.gateways.paths import DEFAULT_SETTINGS_PATHS

log = logging.getLogger('txa.settings')


class YamlSettingsStore:
    """Loads a fresh Settings snapshot from YAML on every call, merged over *defaults*."""

    def __init__(self, settings_path: str | None = None, defaults: dict | None = None) -> None:
        self._settings_path = settings_path
        self._defaults = defaults or {}

    def get_current_settings(self) -> Settings:
        try:
            data = self.load_raw()
        except FileNotFoundError as e:
            raise SettingsLoadError(f'failed to load application settings: {e}') from e
        except yaml.YAMLError as e:
            raise SettingsLoadError(f'failed to parse settings file: {e}') from e
        try:
            return Settings.model_validate(data)
        except ValidationError as e:
            raise SettingsLoadError(f'invalid settings: {e}') from e

    def load_raw(self) -> dict:
        """Return defaults with the settings file merged on top (before Pydantic validation)."""
        data = copy.deepcopy(self._defaults)
        path = self._resolve_path()
        if path is not None:
            deep_merge(data, yaml.safe_load(path.read_text(encoding='utf-8')) or {})
        return data

    def save_settings(self, settings: Settings) -> Path:
        """Write *settings* to the explicit path, or the first default location."""
        path = Path(self._settings_path) if self._settings_path is not None else DEFAULT_SETTINGS_PATHS[0]
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            yaml.safe_dump(settings.model_dump(mode='json'), sort_keys=False, allow_unicode=True),
            encoding='utf-8',
        )
        log.info('Settings saved → %s', path)
        return path

    def _resolve_path(self) -> Path | None:
        if self._settings_path is not None:
            path = Path(self._settings_path)
            if not path.exists():
                raise FileNotFoundError(f'Settings file not found: {path}')
            return path
        for default_path in DEFAULT_SETTINGS_PATHS:
            if default_path.exists():
                return default_path
        return None


def deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into *base* (mutates base)."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base
