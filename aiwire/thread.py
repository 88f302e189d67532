"""Assistant thread shapes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from aiwire.schema import Model, wire_field

__all__ = [
    "CreateThreadRequest",
    "ToolResource",
    "CodeInterpreter",
    "FileSearch",
    "VectorStores",
    "ThreadObject",
    "Message",
    "Content",
    "ContentText",
    "Attachment",
    "Tool",
    "MessageRole",
    "ModifyThreadRequest",
]


def _skip():
    return wire_field(omit_if_none=True, default=None)


class MessageRole(str, Enum):
    """Who wrote a thread message."""

    USER = "user"
    SYSTEM = "system"
    ASSISTANT = "assistant"
    FUNCTION = "function"


@dataclass
class Tool(Model):
    """A tool an attachment is made available to."""

    type: str


@dataclass
class CodeInterpreter(Model):
    file_ids: list[str] | None = None


@dataclass
class VectorStores(Model):
    file_ids: list[str] | None = None
    chunking_strategy: str | None = None
    metadata: dict[str, str] | None = None


@dataclass
class FileSearch(Model):
    vector_store_ids: list[str] | None = None
    vector_stores: VectorStores | None = None


@dataclass
class ToolResource(Model):
    """Resources made available to the thread's tools."""

    code_interpreter: CodeInterpreter | None = None
    file_search: FileSearch | None = None


@dataclass
class ContentText(Model):
    value: str
    annotations: list[str]


@dataclass
class Content(Model):
    content_type: str = wire_field(rename="type")
    text: ContentText = wire_field()


@dataclass
class Attachment(Model):
    file_id: str
    tools: list[Tool]


@dataclass
class Message(Model):
    """A message carried in a new thread."""

    id: str
    object: str
    created_at: int
    thread_id: str
    role: MessageRole
    content: list[Content]
    assistant_id: str | None = _skip()
    run_id: str | None = _skip()
    attachments: list[Attachment] | None = _skip()
    metadata: dict[str, str] | None = None


@dataclass
class CreateThreadRequest(Model):
    messages: list[Message] | None = _skip()
    tool_resources: ToolResource | None = _skip()
    metadata: dict[str, str] | None = _skip()


@dataclass
class ThreadObject(Model):
    id: str
    object: str
    created_at: int
    metadata: dict[str, str]
    tool_resources: ToolResource | None = _skip()


@dataclass
class ModifyThreadRequest(Model):
    metadata: dict[str, str] | None = _skip()