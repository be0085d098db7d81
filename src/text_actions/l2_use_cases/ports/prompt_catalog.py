"""Port: prompt catalog."""

from __future__ import annotations

from typing import Protocol

from text_actions.l1_entities.prompt import AppPrompts, PromptDefinition


class PromptCatalog(Protocol):  # pragma: no cover -- abstract Protocol; never instantiated directly
    """Abstract, read-only prompt catalog."""

    def get_prompt(self, action_id: str) -> PromptDefinition:
        """Return the user prompt bound to *action_id*. Raises PromptNotFoundError."""
        ...

    def get_system_prompt(self, category: str) -> str:
        """Return the system prompt text for *category*. Raises PromptNotFoundError."""
        ...

    def get_app_prompts(self) -> AppPrompts:
        """Return the whole catalog, grouped by category."""
        ...
