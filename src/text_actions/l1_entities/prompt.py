"""Prompt Pydantic models and template constants — pure data, no I/O."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

PROMPT_CATEGORY_PROOFREAD = 'proofread'
PROMPT_CATEGORY_FORMAT = 'format'
PROMPT_CATEGORY_TRANSLATION = 'translation'
PROMPT_CATEGORY_SUMMARY = 'summary'
PROMPT_CATEGORY_TRANSFORMING = 'transforming'

TEMPLATE_PARAM_TEXT = '{{user_text}}'
TEMPLATE_PARAM_INPUT_LANGUAGE = '{{input_language}}'
TEMPLATE_PARAM_OUTPUT_LANGUAGE = '{{output_language}}'
TEMPLATE_PARAM_FORMAT = '{{user_format}}'

OUTPUT_FORMAT_PLAIN_TEXT = 'plain text'
OUTPUT_FORMAT_MARKDOWN = 'markdown'


class PromptType(str, Enum):
    SYSTEM = 'system'
    USER = 'user'


class PromptDefinition(BaseModel):
    """A single catalog entry. *value* is the template string."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    type: PromptType
    category: str
    value: str


class PromptGroup(BaseModel):
    group_id: str = ''
    group_name: str
    system_prompt: PromptDefinition
    prompts: dict[str, PromptDefinition] = Field(default_factory=dict)


class AppPrompts(BaseModel):
    """The whole catalog, keyed by category."""

    prompt_groups: dict[str, PromptGroup] = Field(default_factory=dict)
