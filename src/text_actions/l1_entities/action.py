"""Action Pydantic models — what the user asks for and what the menu offers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ActionRequest(BaseModel):
    """One user interaction: run action *id* over *input_text*."""

    model_config = ConfigDict(frozen=True)

    id: str
    input_text: str
    output_text: str = ''  # caller-supplied, ignored by the pipeline
    input_language_id: str = ''
    output_language_id: str = ''


class Action(BaseModel):
    id: str
    text: str


class ActionGroup(BaseModel):
    group_id: str = ''
    group_name: str
    group_actions: list[Action] = Field(default_factory=list)


class ActionGroups(BaseModel):
    action_groups: list[ActionGroup] = Field(default_factory=list)
