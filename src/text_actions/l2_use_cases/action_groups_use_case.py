"""Use case: expose the prompt catalog as a menu of action groups."""

from __future__ import annotations

import logging

from text_actions.l1_entities.action import Action, ActionGroup, ActionGroups
from text_actions.l2_use_cases.ports.prompt_catalog import PromptCatalog
from text_actions.l2_use_cases.utils.prompt_builder import is_blank

log = logging.getLogger('txa.prompt')


class ListActionGroupsUseCase:
    """Maps catalog categories to action groups. The result is built once per instance."""

    def __init__(self, prompt_catalog: PromptCatalog) -> None:
        self._prompts = prompt_catalog
        self._cached: ActionGroups | None = None

    def execute(self) -> ActionGroups:
        if self._cached is not None:
            return self._cached

        app_prompts = self._prompts.get_app_prompts()
        groups: list[ActionGroup] = []
        for category, group in app_prompts.prompt_groups.items():
            actions = [
                Action(id=p.id, text=p.name)
                for p in group.prompts.values()
                if not is_blank(p.id) and not is_blank(p.name)
            ]
            groups.append(
                ActionGroup(
                    group_id=group.group_id or category,
                    group_name=group.group_name,
                    group_actions=actions,
                )
            )

        self._cached = ActionGroups(action_groups=groups)
        log.info(
            'Built %d action groups with %d actions',
            len(groups),
            sum(len(g.group_actions) for g in groups),
        )
        return self._cached
