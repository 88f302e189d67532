"""Chat completion request and response shapes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from aiwire.chat import (
    ChatCompletionChoice,
    ChatCompletionMessage,
    Reasoning,
    Tool,
    ToolChoice,
    ToolChoiceMode,
    serialize_tool_choice,
)
from aiwire.common import Usage
from aiwire.schema import Model, wire_field


def _skip():
    return wire_field(omit_if_none=True, default=None)


@dataclass
class ChatCompletionRequest(Model):
    """A chat completion request; unset options are left out of the JSON."""

    model: str
    messages: list[ChatCompletionMessage]
    temperature: float | None = _skip()
    top_p: float | None = _skip()
    n: int | None = _skip()
    response_format: Any = _skip()
    stop: list[str] | None = _skip()
    max_tokens: int | None = _skip()
    presence_penalty: float | None = _skip()
    frequency_penalty: float | None = _skip()
    logit_bias: dict[str, int] | None = _skip()
    user: str | None = _skip()
    seed: int | None = _skip()
    tools: list[Tool] | None = _skip()
    parallel_tool_calls: bool | None = _skip()
    tool_choice: ToolChoiceMode | ToolChoice | None = _skip()
    reasoning: Reasoning | None = _skip()
    # Transforms applied to the request before it reaches the model.
    transforms: list[str] | None = _skip()

    def to_dict(self) -> dict[str, Any]:
        out = super().to_dict()
        if self.tool_choice is not None:
            out["tool_choice"] = serialize_tool_choice(self.tool_choice)
        return out


@dataclass
class ChatCompletionResponse(Model):
    """A complete chat completion returned by the API."""

    created: int
    model: str
    choices: list[ChatCompletionChoice]
    usage: Usage
    id: str | None = None
    object: str | None = None
    system_fingerprint: str | None = None