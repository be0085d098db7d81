"""Pure functions for building LLM prompts from catalog templates."""

from __future__ import annotations

from text_actions.l1_entities.action import ActionRequest
from text_actions.l1_entities.errors import ActionValidationError
from text_actions.l1_entities.prompt import (
    OUTPUT_FORMAT_MARKDOWN,
    OUTPUT_FORMAT_PLAIN_TEXT,
    PROMPT_CATEGORY_TRANSLATION,
    TEMPLATE_PARAM_FORMAT,
    TEMPLATE_PARAM_INPUT_LANGUAGE,
    TEMPLATE_PARAM_OUTPUT_LANGUAGE,
    TEMPLATE_PARAM_TEXT,
)


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def replace_template_parameter(token: str, value: str, prompt: str) -> str:
    """Replace every occurrence of *token* in *prompt*. Absent token is a no-op."""
    if is_blank(prompt):
        raise ActionValidationError('invalid input: prompt cannot be blank')
    if is_blank(token):
        raise ActionValidationError('invalid input: template cannot be blank')
    if token not in prompt:
        return prompt
    return prompt.replace(token, value)


def validate_action_request(request: ActionRequest | None, *, is_translation: bool) -> None:
    """Raise ActionValidationError unless *request* carries what the category needs."""
    if request is None:
        raise ActionValidationError('action validation failed: ActionRequest must not be None')
    if is_blank(request.id):
        raise ActionValidationError('action validation failed: invalid action id: cannot be empty or whitespace')
    if is_blank(request.input_text):
        raise ActionValidationError(
            'action validation failed: invalid action input_text: cannot be empty or whitespace'
        )
    if is_translation:
        if is_blank(request.input_language_id):
            raise ActionValidationError(
                'action validation failed: invalid action input_language_id: cannot be empty or whitespace'
            )
        if is_blank(request.output_language_id):
            raise ActionValidationError(
                'action validation failed: invalid action output_language_id: cannot be empty or whitespace'
            )


def build_prompt(
    template: str,
    category: str,
    request: ActionRequest | None,
    use_markdown: bool,
) -> str:
    """Build the user prompt for an action.

    All preconditions are checked before the first substitution. The
    language tokens are only filled for the translation category, and the
    format token only when the template actually asks for it.
    """
    if request is None:
        raise ActionValidationError('invalid input: action is None')
    if is_blank(template):
        raise ActionValidationError('invalid input: invalid template')
    if is_blank(category):
        raise ActionValidationError('invalid input: invalid category')

    is_translation = category == PROMPT_CATEGORY_TRANSLATION
    validate_action_request(request, is_translation=is_translation)

    replacements: list[tuple[str, str]] = []
    if is_translation:
        replacements.append((TEMPLATE_PARAM_INPUT_LANGUAGE, request.input_language_id))
        replacements.append((TEMPLATE_PARAM_OUTPUT_LANGUAGE, request.output_language_id))
    if TEMPLATE_PARAM_FORMAT in template:
        output_format = OUTPUT_FORMAT_MARKDOWN if use_markdown else OUTPUT_FORMAT_PLAIN_TEXT
        replacements.append((TEMPLATE_PARAM_FORMAT, output_format))
    replacements.append((TEMPLATE_PARAM_TEXT, request.input_text))

    result = template
    for token, value in replacements:
        result = replace_template_parameter(token, value, result)
    return result
