"""Image generation, edit and variation shapes."""

from __future__ import annotations

from dataclasses import dataclass

from aiwire.schema import Model, wire_field


def _skip():
    return wire_field(omit_if_none=True, default=None)


@dataclass
class ImageData(Model):
    url: str


@dataclass
class ImageGenerationRequest(Model):
    prompt: str
    model: str | None = _skip()
    n: int | None = _skip()
    size: str | None = _skip()
    response_format: str | None = _skip()
    user: str | None = _skip()


@dataclass
class ImageGenerationResponse(Model):
    created: int
    data: list[ImageData]


@dataclass
class ImageEditRequest(Model):
    """Edit an image file; ``image`` and ``mask`` are paths."""

    image: str
    prompt: str
    mask: str | None = _skip()
    model: str | None = _skip()
    n: int | None = _skip()
    size: str | None = _skip()
    response_format: str | None = _skip()
    user: str | None = _skip()


@dataclass
class ImageEditResponse(Model):
    created: int
    data: list[ImageData]


@dataclass
class ImageVariationRequest(Model):
    image: str
    n: int | None = _skip()
    model: str | None = _skip()
    size: str | None = _skip()
    response_format: str | None = _skip()
    user: str | None = _skip()


@dataclass
class ImageVariationResponse(Model):
    created: int
    data: list[ImageData]