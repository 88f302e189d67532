"""Edit request and response shapes."""

from __future__ import annotations

from dataclasses import dataclass

from aiwire.common import Usage
from aiwire.schema import Model, wire_field


def _skip():
    return wire_field(omit_if_none=True, default=None)


@dataclass
class EditRequest(Model):
    model: str
    instruction: str
    input: str | None = _skip()
    n: int | None = _skip()
    temperature: float | None = _skip()
    top_p: float | None = _skip()


@dataclass
class EditChoice(Model):
    text: str
    index: int


@dataclass
class EditResponse(Model):
    object: str
    created: int
    usage: Usage
    choices: list[EditChoice]