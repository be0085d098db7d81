"""OpenAI-compatible chat completion wire models.

Only the transport boundary builds or parses these; the pipeline itself
sees the request it hands over and the text that comes back.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class ChatMessage(BaseModel):
    """A single message in an LLM request."""

    role: Literal['system', 'user', 'assistant']
    content: str


class ChatOptions(BaseModel):
    """Ollama-only request options."""

    temperature: float


class ChatCompletionRequest(BaseModel):
    model: str
    messages: list[ChatMessage]
    temperature: float | None = None
    options: ChatOptions | None = None
    stream: bool = False
    n: int = 1


class ResponseMessage(BaseModel):
    role: str = 'assistant'
    content: str | None = None


class Choice(BaseModel):
    index: int = 0
    message: ResponseMessage = Field(default_factory=ResponseMessage)
    finish_reason: str | None = None


class Usage(BaseModel):
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


class ChatCompletionResponse(BaseModel):
    id: str = ''
    model: str = ''
    choices: list[Choice] = Field(default_factory=list)
    usage: Usage | None = None


class ModelListItem(BaseModel):
    id: str = ''


class ModelListResponse(BaseModel):
    data: list[ModelListItem] = Field(default_factory=list)
