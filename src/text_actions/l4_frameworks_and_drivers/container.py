"""Dependency container — composition root for wiring all layers together."""

from __future__ import annotations

from pathlib import Path

from text_actions.l2_use_cases.ports.completion_transport import CompletionTransport
from text_actions.l2_use_cases.ports.prompt_catalog import PromptCatalog
from text_actions.l3_interface_adapters.controllers.action_controller import ActionController
from text_actions.l3_interface_adapters.gateways.ollama_provider_probe import OllamaProviderProbe
from text_actions.l3_interface_adapters.gateways.openai_completion_transport import OpenAICompatCompletionTransport
from text_actions.l3_interface_adapters.gateways.yaml_prompt_catalog import YamlPromptCatalog
from text_actions.l3_interface_adapters.gateways.yaml_settings_store import YamlSettingsStore
from text_actions.l4_frameworks_and_drivers.settings_defaults import SETTINGS_DEFAULTS


class DependencyContainer:
    """Creates and wires all concrete instances. Easy to override for testing."""

    def __init__(
        self,
        settings_path: str | None = None,
        user_prompts_path: Path | None = None,
        api_key: str | None = None,
    ) -> None:
        self.settings_store = YamlSettingsStore(settings_path, defaults=SETTINGS_DEFAULTS)
        self.prompt_catalog: PromptCatalog = YamlPromptCatalog(user_prompts_path)
        self.transport: CompletionTransport = OpenAICompatCompletionTransport(self.settings_store, api_key=api_key)

        self.controller = ActionController(
            prompt_catalog=self.prompt_catalog,
            settings_store=self.settings_store,
            transport=self.transport,
        )

    def ollama_probe(self) -> OllamaProviderProbe:
        provider = self.settings_store.get_current_settings().current_provider_config
        return OllamaProviderProbe(host=provider.base_url, headers=provider.headers)
