"""Request and response shapes for the responses endpoint."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from aiwire.schema import Model, wire_field
from aiwire.types import Tools

__all__ = [
    "CreateResponseRequest",
    "ResponseObject",
    "ListResponses",
    "CountTokensRequest",
    "CountTokensResponse",
]


def _skip():
    return wire_field(omit_if_none=True, default=None)


def _extra():
    return wire_field(default_factory=dict)


@dataclass
class CreateResponseRequest(Model):
    """Create a model response; keys in ``extra`` are sent beside the known ones."""

    _wire_extra = "extra"

    background: bool | None = _skip()
    conversation: Any = _skip()
    include: list[str] | None = _skip()
    input: Any = _skip()
    instructions: str | None = _skip()
    max_output_tokens: int | None = _skip()
    max_tool_calls: int | None = _skip()
    metadata: dict[str, str] | None = _skip()
    model: str | None = _skip()
    parallel_tool_calls: bool | None = _skip()
    previous_response_id: str | None = _skip()
    prompt: Any = _skip()
    prompt_cache_key: str | None = _skip()
    reasoning: Any = _skip()
    safety_identifier: str | None = _skip()
    service_tier: str | None = _skip()
    store: bool | None = _skip()
    stream: bool | None = _skip()
    stream_options: Any = _skip()
    temperature: float | None = _skip()
    text: Any = _skip()
    tool_choice: Any = _skip()
    tools: list[Tools] | None = _skip()
    top_logprobs: int | None = _skip()
    top_p: float | None = _skip()
    truncation: str | None = _skip()
    # Deprecated by the API, still accepted.
    user: str | None = _skip()
    extra: dict[str, Any] = _extra()


@dataclass
class ResponseObject(Model):
    """A response produced by the model; unknown keys are kept in ``extra``."""

    _wire_extra = "extra"

    id: str
    object: str
    created_at: int | None = _skip()
    model: str | None = _skip()
    status: str | None = _skip()
    output: Any = _skip()
    output_text: str | None = _skip()
    output_audio: Any = _skip()
    stop_reason: str | None = _skip()
    refusal: str | None = _skip()
    tool_calls: Any = _skip()
    metadata: Any = _skip()
    usage: Any = _skip()
    system_fingerprint: str | None = _skip()
    service_tier: str | None = _skip()
    status_details: Any = _skip()
    incomplete_details: Any = _skip()
    error: Any = _skip()
    extra: dict[str, Any] = _extra()


@dataclass
class ListResponses(Model):
    """A page of responses."""

    object: str
    data: list[ResponseObject]
    has_more: bool
    first_id: str | None = _skip()
    last_id: str | None = _skip()


@dataclass
class CountTokensRequest(Model):
    """Ask how many input tokens a request would use."""

    _wire_extra = "extra"

    conversation: Any = _skip()
    input: Any = _skip()
    instructions: str | None = _skip()
    model: str | None = _skip()
    parallel_tool_calls: bool | None = _skip()
    previous_response_id: str | None = _skip()
    reasoning: Any = _skip()
    text: Any = _skip()
    tool_choice: Any = _skip()
    tools: list[Tools] | None = _skip()
    truncation: str | None = _skip()
    extra: dict[str, Any] = _extra()


@dataclass
class CountTokensResponse(Model):
    """The input token count for a request."""

    _wire_extra = "extra"

    object: str | None = _skip()
    input_tokens: int | None = _skip()
    extra: dict[str, Any] = _extra()