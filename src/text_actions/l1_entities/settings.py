"""Settings Pydantic models — pure schema, no infrastructure defaults."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ProviderType(str, Enum):
    CUSTOM = 'open-ai-compatible'
    OLLAMA = 'ollama'


class ProviderConfig(BaseModel):
    provider_name: str  # unique key
    provider_type: ProviderType = ProviderType.CUSTOM
    base_url: str = ''
    models_endpoint: str = ''
    completion_endpoint: str = ''
    headers: dict[str, str] = Field(default_factory=dict)


class ModelConfig(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    model_name: str = ''
    is_temperature_enabled: bool = False
    temperature: float = 0.5


class LanguageConfig(BaseModel):
    languages: list[str] = Field(default_factory=list)
    default_input_language: str = ''
    default_output_language: str = ''


class Settings(BaseModel):
    available_provider_configs: list[ProviderConfig] = Field(default_factory=list)
    current_provider_config: ProviderConfig
    llm_config: ModelConfig = Field(default_factory=ModelConfig)
    language_config: LanguageConfig = Field(default_factory=LanguageConfig)
    use_markdown_for_output: bool = False
