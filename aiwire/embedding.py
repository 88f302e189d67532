"""Embedding request and response shapes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from aiwire.schema import Model, wire_field


def _skip():
    return wire_field(omit_if_none=True, default=None)


class EncodingFormat(str, Enum):
    FLOAT = "float"
    BASE64 = "base64"


@dataclass
class EmbeddingData(Model):
    object: str
    embedding: list[float]
    index: int


@dataclass
class EmbeddingRequest(Model):
    model: str
    input: list[str]
    encoding_format: EncodingFormat | None = _skip()
    dimensions: int | None = _skip()
    user: str | None = _skip()


@dataclass
class EmbeddingUsage(Model):
    prompt_tokens: int
    total_tokens: int


@dataclass
class EmbeddingResponse(Model):
    object: str
    data: list[EmbeddingData]
    model: str
    usage: EmbeddingUsage