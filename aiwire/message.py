"""Assistant thread message shapes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from aiwire.schema import Model, wire_field


def _skip():
    return wire_field(omit_if_none=True, default=None)


class MessageRole(str, Enum):
    USER = "user"
    SYSTEM = "system"
    ASSISTANT = "assistant"
    FUNCTION = "function"


@dataclass
class Tool(Model):
    """A tool an attachment is made available to."""

    type: str


@dataclass
class Attachment(Model):
    tools: list[Tool]
    file_id: str | None = None


@dataclass
class FileCitation(Model):
    file_id: str
    quote: str | None = None


@dataclass
class FilePath(Model):
    file_id: str


@dataclass
class FileCitationAnnotation(Model):
    """A citation pointing into a file."""

    _wire_tag = "file_citation"

    text: str
    file_citation: FileCitation
    start_index: int
    end_index: int


@dataclass
class FilePathAnnotation(Model):
    """A path to a file produced by a tool."""

    _wire_tag = "file_path"

    text: str
    file_path: FilePath
    start_index: int
    end_index: int


ContentTextAnnotation = FileCitationAnnotation | FilePathAnnotation

_ANNOTATION_CLASSES = {
    cls._wire_tag: cls for cls in (FileCitationAnnotation, FilePathAnnotation)
}


def parse_annotation(data):
    """Decode a text annotation by its ``type`` tag."""
    if not isinstance(data, dict):
        raise ValueError("an annotation must be a JSON object")
    tag = data.get("type")
    try:
        cls = _ANNOTATION_CLASSES[tag]
    except (KeyError, TypeError):
        raise ValueError(f"unknown annotation type {tag!r}") from None
    return cls.from_dict(data)


@dataclass
class ContentText(Model):
    value: str
    annotations: list[ContentTextAnnotation]


@dataclass
class Content(Model):
    content_type: str = wire_field(rename="type")
    text: ContentText = wire_field()


@dataclass
class CreateMessageRequest(Model):
    role: MessageRole
    content: str
    attachments: list[Attachment] | None = _skip()
    metadata: dict[str, str] | None = _skip()


@dataclass
class ModifyMessageRequest(Model):
    metadata: dict[str, str] | None = _skip()


@dataclass
class MessageObject(Model):
    """A message stored in a thread."""

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
class ListMessage(Model):
    object: str
    data: list[MessageObject]
    first_id: str
    last_id: str
    has_more: bool


@dataclass
class MessageFileObject(Model):
    id: str
    object: str
    created_at: int
    message_id: str


@dataclass
class ListMessageFile(Model):
    object: str
    data: list[MessageFileObject]
    first_id: str
    last_id: str
    has_more: bool