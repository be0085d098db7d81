"""ActionController — the single entry point a UI bridge or CLI talks to."""

from __future__ import annotations

import logging
import time

from text_actions.l1_entities.action import ActionGroups, ActionRequest
from text_actions.l1_entities.errors import ActionProcessingError, TextActionError
from text_actions.l2_use_cases.action_groups_use_case import ListActionGroupsUseCase
from text_actions.l2_use_cases.ports.completion_transport import CompletionTransport
from text_actions.l2_use_cases.ports.prompt_catalog import PromptCatalog
from text_actions.l2_use_cases.ports.settings_store import SettingsStore
from text_actions.l2_use_cases.process_action_use_case import ProcessActionUseCase

log = logging.getLogger('txa.controller')


class ActionController:
    """Owns the use cases and turns any pipeline failure into ActionProcessingError.

    The original exception stays reachable through ``__cause__``.
    """

    def __init__(
        self,
        prompt_catalog: PromptCatalog,
        settings_store: SettingsStore,
        transport: CompletionTransport,
    ) -> None:
        self._process_uc = ProcessActionUseCase(prompt_catalog, settings_store, transport)
        self._groups_uc = ListActionGroupsUseCase(prompt_catalog)

    def get_action_groups(self) -> ActionGroups:
        return self._groups_uc.execute()

    async def process_action(self, request: ActionRequest) -> str:
        started = time.monotonic()
        log.info('Processing action: %s', request.id)
        try:
            result = await self._process_uc.execute(request)
        except TextActionError as e:
            log.error('Failed to process action %r: %s', request.id, e, exc_info=True)
            raise ActionProcessingError(f'action processing failed: {e}') from e

        log.info(
            'Processed action %r in %.0fms (%d chars)',
            request.id,
            (time.monotonic() - started) * 1000,
            len(result),
        )
        return result
