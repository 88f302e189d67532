"""Audio transcription, translation and speech shapes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from aiwire.common import TTS_1, TTS_1_HD, WHISPER_1
from aiwire.schema import Model, wire_field

__all__ = [
    "TTS_1",
    "TTS_1_HD",
    "WHISPER_1",
    "VOICE_ALLOY",
    "VOICE_ECHO",
    "VOICE_FABLE",
    "VOICE_ONYX",
    "VOICE_NOVA",
    "VOICE_SHIMMER",
    "TimestampGranularity",
    "AudioTranscriptionRequest",
    "AudioTranscriptionResponse",
    "AudioTranslationRequest",
    "AudioTranslationResponse",
    "AudioSpeechRequest",
    "AudioSpeechResponse",
]

VOICE_ALLOY = "alloy"
VOICE_ECHO = "echo"
VOICE_FABLE = "fable"
VOICE_ONYX = "onyx"
VOICE_NOVA = "nova"
VOICE_SHIMMER = "shimmer"

# Alias so the field named ``bytes`` does not hide the type in annotations.
_Bytes = bytes


def _skip():
    return wire_field(omit_if_none=True, default=None)


class TimestampGranularity(str, Enum):
    WORD = "word"
    SEGMENT = "segment"


@dataclass
class AudioTranscriptionRequest(Model):
    """Transcribe audio given either as a file path or as raw bytes."""

    model: str
    file: str | None = _skip()
    bytes: _Bytes | None = _skip()
    prompt: str | None = None
    response_format: str | None = _skip()
    temperature: float | None = _skip()
    language: str | None = _skip()
    timestamp_granularities: list[TimestampGranularity] | None = _skip()

    @classmethod
    def from_bytes(cls, data, model):
        """Build a request carrying the audio itself instead of a path."""
        return cls(model=model, bytes=_Bytes(data))

    def to_dict(self) -> dict[str, Any]:
        out = super().to_dict()
        if self.bytes is not None:
            out["bytes"] = list(self.bytes)
        return out


@dataclass
class AudioTranscriptionResponse(Model):
    text: str


@dataclass
class AudioTranslationRequest(Model):
    file: str
    model: str
    prompt: str | None = _skip()
    response_format: str | None = _skip()
    temperature: float | None = _skip()


@dataclass
class AudioTranslationResponse(Model):
    text: str


@dataclass
class AudioSpeechRequest(Model):
    """Text to speak, and the path the audio is written to."""

    model: str
    input: str
    voice: str
    output: str


@dataclass
class AudioSpeechResponse:
    """Outcome of a speech request with the response headers."""

    result: bool
    headers: dict[str, str] | None = None