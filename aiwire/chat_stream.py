"""Streaming chat completions read from server-sent events."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass

from aiwire.chat import ToolCall
from aiwire.chat_completion import ChatCompletionRequest
from aiwire.sse import EventBuffer

logger = logging.getLogger(__name__)


@dataclass
class ChatCompletionStreamRequest(ChatCompletionRequest):
    """A chat completion request whose answer is streamed."""


@dataclass(frozen=True)
class ContentDelta:
    """A piece of the answer text."""

    text: str


@dataclass(frozen=True)
class ToolCallDelta:
    """Tool calls carried by one stream event."""

    tool_calls: list[ToolCall]


@dataclass(frozen=True)
class StreamDone:
    """The server signalled the end of the answer."""


ChatStreamItem = ContentDelta | ToolCallDelta | StreamDone


def _first_delta(message):
    if not isinstance(message, dict):
        return None
    choices = message.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    choice = choices[0]
    if not isinstance(choice, dict):
        return None
    delta = choice.get("delta")
    return delta if isinstance(delta, dict) else None


def _tool_call(value):
    try:
        return ToolCall.from_dict(value)
    except (ValueError, TypeError):
        return None


def parse_chat_payload(payload):
    """Turn one event's data into a stream item, or ``None`` if it carries nothing."""
    if payload == "[DONE]":
        return StreamDone()
    try:
        message = json.loads(payload)
    except json.JSONDecodeError as error:
        logger.warning("Failed to parse SSE chunk as JSON: %s", error)
        return None
    delta = _first_delta(message)
    if delta is None:
        return None
    tool_calls = delta.get("tool_calls")
    if isinstance(tool_calls, list):
        parsed = [call for call in map(_tool_call, tool_calls) if call is not None]
        if parsed:
            return ToolCallDelta(parsed)
    content = delta.get("content")
    if isinstance(content, str):
        return ContentDelta(content.replace("\\n", "\n"))
    return None


class ChatCompletionStream:
    """Async iterator of stream items read from an async iterable of byte chunks.

    A failure of the underlying stream is logged and ends the iteration.
    """

    def __init__(self, response) -> None:
        self._chunks = aiter(response)
        self._events = EventBuffer()
        self._finished = False

    def __aiter__(self):
        return self

    async def __anext__(self):
        while True:
            while (event := self._events.next_event()) is not None:
                item = parse_chat_payload(event[1])
                if item is not None:
                    return item
            if self._finished:
                raise StopAsyncIteration
            try:
                chunk = await anext(self._chunks)
            except StopAsyncIteration:
                self._finished = True
                raise
            except Exception as error:
                logger.error("Error in stream: %r", error)
                self._finished = True
                raise StopAsyncIteration from None
            self._events.feed(chunk)