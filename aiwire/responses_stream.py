"""Streaming responses read from server-sent events."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

from aiwire.responses import CreateResponseRequest
from aiwire.sse import EventBuffer

logger = logging.getLogger(__name__)

CreateResponseStreamRequest = CreateResponseRequest


@dataclass(frozen=True)
class ResponseStreamEvent:
    """One event: its name, if given, and its data decoded as JSON when possible."""

    event: str | None
    data: Any


@dataclass(frozen=True)
class ResponseStreamDone:
    """The server signalled the end of the stream."""


ResponseStreamItem = ResponseStreamEvent | ResponseStreamDone


def parse_response_event(event_name, payload):
    """Turn one event into a stream item; data that is not JSON stays a string."""
    if payload.strip() == "[DONE]":
        return ResponseStreamDone()
    try:
        data = json.loads(payload)
    except json.JSONDecodeError:
        data = payload
    return ResponseStreamEvent(event=event_name, data=data)


class ResponseStream:
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
            event = self._events.next_event()
            if event is not None:
                return parse_response_event(*event)
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