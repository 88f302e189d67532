"""Model listing responses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from aiwire.schema import Model


@dataclass
class Architecture(Model):
    input_modalities: list[str] | None = None
    output_modalities: list[str] | None = None
    tokenizer: str | None = None
    instruct_type: str | None = None


@dataclass
class TopProvider(Model):
    is_moderated: bool | None = None
    context_length: int | None = None
    max_completion_tokens: int | None = None


@dataclass
class Pricing(Model):
    prompt: str | None = None
    completion: str | None = None
    image: str | None = None
    request: str | None = None
    web_search: str | None = None
    internal_reasoning: str | None = None
    input_cache_read: str | None = None
    input_cache_write: str | None = None


@dataclass
class ModelResponse(Model):
    """One model entry; every field is optional."""

    id: str | None = None
    name: str | None = None
    created: int | None = None
    description: str | None = None
    architecture: Architecture | None = None
    top_provider: TopProvider | None = None
    pricing: Pricing | None = None
    canonical_slug: str | None = None
    context_length: int | None = None
    hugging_face_id: str | None = None
    per_request_limits: Any = None
    supported_parameters: list[str] | None = None
    object: str | None = None
    owned_by: str | None = None


@dataclass
class ModelsResponse(Model):
    """A list of models."""

    data: list[ModelResponse]
    object: str | None = None