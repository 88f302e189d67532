"""Moderation request and response shapes."""

from __future__ import annotations

from dataclasses import dataclass

from aiwire.schema import Model, wire_field


@dataclass
class CreateModerationRequest(Model):
    input: str
    model: str | None = wire_field(omit_if_none=True, default=None)


@dataclass
class ModerationCategories(Model):
    is_hate: bool = wire_field(rename="hate")
    is_hate_threatening: bool = wire_field(rename="hate/threatening")
    is_self_harm: bool = wire_field(rename="self-harm")
    sexual: bool = wire_field()
    is_sexual_minors: bool = wire_field(rename="sexual/minors")
    violence: bool = wire_field()
    is_violence_graphic: bool = wire_field(rename="violence/graphic")


@dataclass
class ModerationCategoryScores(Model):
    hate_score: float = wire_field(rename="hate")
    hate_threatening_score: float = wire_field(rename="hate/threatening")
    self_harm_score: float = wire_field(rename="self-harm")
    sexual: float = wire_field()
    sexual_minors_score: float = wire_field(rename="sexual/minors")
    violence: float = wire_field()
    violence_graphic_score: float = wire_field(rename="violence/graphic")


@dataclass
class ModerationResult(Model):
    categories: ModerationCategories
    category_scores: ModerationCategoryScores
    flagged: bool


@dataclass
class CreateModerationResponse(Model):
    id: str
    model: str
    results: list[ModerationResult]