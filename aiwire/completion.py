"""Legacy text completion shapes."""

from __future__ import annotations

from dataclasses import dataclass

from aiwire.common import Usage
from aiwire.schema import Model, wire_field

GPT3_TEXT_DAVINCI_003 = "text-davinci-003"
GPT3_TEXT_DAVINCI_002 = "text-davinci-002"
GPT3_TEXT_CURIE_001 = "text-curie-001"
GPT3_TEXT_BABBAGE_001 = "text-babbage-001"
GPT3_TEXT_ADA_001 = "text-ada-001"
GPT3_TEXT_DAVINCI_001 = "text-davinci-001"
GPT3_DAVINCI_INSTRUCT_BETA = "davinci-instruct-beta"
GPT3_DAVINCI = "davinci"
GPT3_CURIE_INSTRUCT_BETA = "curie-instruct-beta"
GPT3_CURIE = "curie"
GPT3_ADA = "ada"
GPT3_BABBAGE = "babbage"


def _skip():
    return wire_field(omit_if_none=True, default=None)


@dataclass
class CompletionRequest(Model):
    model: str
    prompt: str
    suffix: str | None = _skip()
    max_tokens: int | None = _skip()
    temperature: float | None = _skip()
    top_p: float | None = _skip()
    n: int | None = _skip()
    stream: bool | None = _skip()
    logprobs: int | None = _skip()
    echo: bool | None = _skip()
    stop: list[str] | None = _skip()
    presence_penalty: float | None = _skip()
    frequency_penalty: float | None = _skip()
    best_of: int | None = _skip()
    logit_bias: dict[str, int] | None = _skip()
    user: str | None = _skip()


@dataclass
class LogprobResult(Model):
    tokens: list[str]
    token_logprobs: list[float]
    top_logprobs: list[dict[str, float]]
    text_offset: list[int]


@dataclass
class CompletionChoice(Model):
    text: str
    index: int
    finish_reason: str
    logprobs: LogprobResult | None = None


@dataclass
class CompletionResponse(Model):
    id: str
    object: str
    created: int
    model: str
    choices: list[CompletionChoice]
    usage: Usage