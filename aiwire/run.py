"""Assistant run and run step shapes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from aiwire.schema import Model, wire_field
from aiwire.thread import CreateThreadRequest
from aiwire.types import Tools


def _skip():
    return wire_field(omit_if_none=True, default=None)


@dataclass
class CreateRunRequest(Model):
    """Start a run; ``response_format`` is ``"auto"`` or a JSON object."""

    assistant_id: str
    model: str | None = _skip()
    instructions: str | None = _skip()
    tools: list[dict[str, str]] | None = _skip()
    metadata: dict[str, str] | None = _skip()
    response_format: Any = _skip()


@dataclass
class ModifyRunRequest(Model):
    metadata: dict[str, str] | None = _skip()


@dataclass
class LastError(Model):
    code: str
    message: str


@dataclass
class RunObject(Model):
    id: str
    object: str
    created_at: int
    thread_id: str
    assistant_id: str
    status: str
    model: str
    tools: list[Tools]
    metadata: dict[str, str]
    required_action: dict[str, str] | None = _skip()
    last_error: LastError | None = _skip()
    expires_at: int | None = _skip()
    started_at: int | None = _skip()
    cancelled_at: int | None = _skip()
    failed_at: int | None = _skip()
    completed_at: int | None = _skip()
    instructions: str | None = None


@dataclass
class ListRun(Model):
    object: str
    data: list[RunObject]
    first_id: str
    last_id: str
    has_more: bool


@dataclass
class CreateThreadAndRunRequest(Model):
    assistant_id: str
    thread: CreateThreadRequest | None = _skip()
    model: str | None = _skip()
    instructions: str | None = _skip()
    tools: list[dict[str, str]] | None = _skip()
    metadata: dict[str, str] | None = _skip()


@dataclass
class RunStepObject(Model):
    id: str
    object: str
    created_at: int
    assistant_id: str
    thread_id: str
    run_id: str
    run_step_type: str = wire_field(rename="type")
    status: str = wire_field()
    step_details: dict[str, str] = wire_field()
    metadata: dict[str, str] = wire_field()
    last_error: LastError | None = _skip()
    expires_at: int | None = _skip()
    started_at: int | None = _skip()
    cancelled_at: int | None = _skip()
    failed_at: int | None = _skip()
    completed_at: int | None = _skip()


@dataclass
class ListRunStep(Model):
    object: str
    data: list[RunStepObject]
    first_id: str
    last_id: str
    has_more: bool