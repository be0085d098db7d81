"""Gateway: YAML prompt catalog — implements PromptCatalog port."""

from __future__ import annotations

from importlib import resources
from pathlib import Path

import yaml
from pydantic import ValidationError

from text_actions.l1_entities.errors import PromptCatalogError, PromptNotFoundError
from text_actions.l1_entities.prompt import AppPrompts, PromptDefinition, PromptGroup, PromptType
from text_actions.l3_interface_adapters.gateways.paths import USER_PROMPTS_PATH
from text_actions.l3_interface_adapters.gateways.yaml_settings_store import deep_merge

_BUILTIN_PROMPTS = resources.files('text_actions') / 'templates' / 'prompts.yaml'


class YamlPromptCatalog:
    """Static prompt catalog: the built-in YAML, with an optional user file merged on top.

    The catalog is read once, on first use.
    """

    def __init__(self, user_prompts_path: Path | None = None) -> None:
        self._user_path = user_prompts_path if user_prompts_path is not None else USER_PROMPTS_PATH
        self._prompts: AppPrompts | None = None

    def get_app_prompts(self) -> AppPrompts:
        if self._prompts is None:
            try:
                data = self._load_raw()
            except (OSError, yaml.YAMLError) as e:
                raise PromptCatalogError(f'failed to load prompt catalog: {e}') from e
            try:
                self._prompts = _parse_catalog(data)
            except (AttributeError, KeyError, TypeError, ValidationError) as e:
                raise PromptCatalogError(f'invalid prompt catalog: {e!r}') from e
        return self._prompts

    def get_prompt(self, action_id: str) -> PromptDefinition:
        for group in self.get_app_prompts().prompt_groups.values():
            prompt = group.prompts.get(action_id)
            if prompt is not None:
                return prompt
        raise PromptNotFoundError(f"failed to retrieve prompt with ID '{action_id}': unknown prompt id")

    def get_system_prompt(self, category: str) -> str:
        group = self.get_app_prompts().prompt_groups.get(category)
        if group is None:
            raise PromptNotFoundError(
                f"failed to retrieve system prompt for category '{category}': unknown prompt category"
            )
        return group.system_prompt.value

    def _load_raw(self) -> dict:
        data = yaml.safe_load(_BUILTIN_PROMPTS.read_text(encoding='utf-8')) or {}
        if self._user_path.is_file():
            user_data = yaml.safe_load(self._user_path.read_text(encoding='utf-8')) or {}
            if not isinstance(user_data, dict):
                raise PromptCatalogError(f'invalid prompt catalog: {self._user_path} is not a mapping')
            deep_merge(data, user_data)
        return data


def _parse_catalog(data: dict) -> AppPrompts:
    """Build AppPrompts from ``{category: {group_name, system_prompt, prompts}}`` YAML.

    Category, type and prompt IDs come from the mapping keys, so the YAML
    never repeats them.
    """
    groups: dict[str, PromptGroup] = {}
    for category, raw_group in data.items():
        system = raw_group['system_prompt']
        groups[category] = PromptGroup(
            group_id=raw_group.get('group_id', category),
            group_name=raw_group.get('group_name', category),
            system_prompt=PromptDefinition(
                id=system.get('id', f'system_{category}'),
                name=system.get('name', category),
                type=PromptType.SYSTEM,
                category=category,
                value=system['value'],
            ),
            prompts={
                prompt_id: PromptDefinition(
                    id=prompt_id,
                    name=raw_prompt['name'],
                    type=PromptType.USER,
                    category=category,
                    value=raw_prompt['value'],
                )
                for prompt_id, raw_prompt in (raw_group.get('prompts') or {}).items()
            },
        )
    return AppPrompts(prompt_groups=groups)
