"""Port: settings snapshot provider."""

from __future__ import annotations

from typing import Protocol

from text_actions.l1_entities.settings import Settings


class SettingsStore(Protocol):
    """Abstract settings source. Every call returns a fresh snapshot."""

    def get_current_settings(self) -> Settings:
        """Load the active provider/model/language configuration. Raises SettingsLoadError."""
        ...
