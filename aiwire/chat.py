"""Chat completion messages, tools and reasoning options."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from aiwire.schema import Model, wire_field
from aiwire.types import Function


def _skip():
    return wire_field(omit_if_none=True, default=None)


class ToolType(str, Enum):
    FUNCTION = "function"


@dataclass
class Tool(Model):
    """A tool the model may call."""

    type: ToolType
    function: Function


class ToolChoiceMode(str, Enum):
    NONE = "none"
    AUTO = "auto"
    REQUIRED = "required"


@dataclass
class ToolChoice(Model):
    """Force the model to call one specific tool."""

    tool: Tool

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.tool.type.value, "function": self.tool.function.to_dict()}

    @classmethod
    def from_dict(cls, data):
        return cls(tool=Tool.from_dict(data))


def serialize_tool_choice(value):
    """Return the wire form of a tool choice: a string, an object or ``None``."""
    if value is None:
        return None
    if isinstance(value, ToolChoiceMode):
        return value.value
    if isinstance(value, ToolChoice):
        return value.to_dict()
    raise TypeError(f"not a tool choice: {value!r}")


class ReasoningEffort(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass
class EffortMode(Model):
    effort: ReasoningEffort


@dataclass
class MaxTokensMode(Model):
    max_tokens: int


@dataclass
class Reasoning(Model):
    """Reasoning options; the mode's keys sit beside ``exclude`` and ``enabled``."""

    mode: EffortMode | MaxTokensMode | None = None
    exclude: bool | None = _skip()
    enabled: bool | None = _skip()

    def to_dict(self) -> dict[str, Any]:
        out = {} if self.mode is None else self.mode.to_dict()
        if self.exclude is not None:
            out["exclude"] = self.exclude
        if self.enabled is not None:
            out["enabled"] = self.enabled
        return out

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, dict):
            raise ValueError("Reasoning: expected a JSON object")
        mode = None
        for candidate in (EffortMode, MaxTokensMode):
            try:
                mode = candidate.from_dict(data)
                break
            except ValueError:
                continue
        flags = {key: data[key] for key in ("exclude", "enabled") if key in data}
        reasoning = super().from_dict(flags)
        reasoning.mode = mode
        return reasoning


class MessageRole(str, Enum):
    USER = "user"
    SYSTEM = "system"
    ASSISTANT = "assistant"
    FUNCTION = "function"
    TOOL = "tool"


class ContentType(str, Enum):
    TEXT = "text"
    IMAGE_URL = "image_url"


@dataclass
class ImageUrlType(Model):
    url: str


@dataclass
class ImageUrl(Model):
    """One part of a multi-part message."""

    type: ContentType
    text: str | None = _skip()
    image_url: ImageUrlType | None = _skip()


def encode_content(content):
    """Return the wire form of message content; empty text becomes ``None``."""
    if isinstance(content, str):
        return content or None
    if isinstance(content, list):
        return [part.to_dict() for part in content]
    raise TypeError(f"not message content: {content!r}")


def decode_content(value):
    """Decode message content: text, a list of parts, or null as empty text."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        return [ImageUrl.from_dict(part) for part in value]
    raise ValueError(f"not a valid content type: {value!r}")


@dataclass
class ToolCallFunction(Model):
    name: str | None = _skip()
    arguments: str | None = _skip()


@dataclass
class ToolCall(Model):
    id: str
    type: str
    function: ToolCallFunction


@dataclass
class ChatCompletionMessage(Model):
    """A message sent to the chat endpoint."""

    role: MessageRole
    content: str | list[ImageUrl]
    name: str | None = _skip()
    tool_calls: list[ToolCall] | None = _skip()
    tool_call_id: str | None = _skip()

    def to_dict(self) -> dict[str, Any]:
        out = super().to_dict()
        out["content"] = encode_content(self.content)
        return out

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, dict):
            raise ValueError("ChatCompletionMessage: expected a JSON object")
        if "content" not in data:
            raise ValueError("ChatCompletionMessage: missing field 'content'")
        content = decode_content(data["content"])
        message = super().from_dict({**data, "content": ""})
        message.content = content
        return message


@dataclass
class ChatCompletionMessageForResponse(Model):
    role: MessageRole
    content: str | None = _skip()
    reasoning_content: str | None = _skip()
    name: str | None = _skip()
    tool_calls: list[ToolCall] | None = _skip()


class FinishReason(str, Enum):
    STOP = "stop"
    LENGTH = "length"
    CONTENT_FILTER = "content_filter"
    TOOL_CALLS = "tool_calls"
    NULL = "null"


@dataclass
class FinishDetails(Model):
    type: FinishReason
    stop: str


@dataclass
class ChatCompletionChoice(Model):
    index: int
    message: ChatCompletionMessageForResponse
    finish_reason: FinishReason | None = None
    finish_details: FinishDetails | None = None