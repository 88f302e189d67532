"""Fine-tuning job shapes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from aiwire.schema import Model, wire_field

T = TypeVar("T")


def _skip():
    return wire_field(omit_if_none=True, default=None)


@dataclass
class HyperParameters(Model):
    batch_size: str | None = _skip()
    learning_rate_multiplier: str | None = _skip()
    n_epochs: str | None = _skip()


@dataclass
class CreateFineTuningJobRequest(Model):
    model: str
    training_file: str
    hyperparameters: HyperParameters | None = _skip()
    suffix: str | None = _skip()
    validation_file: str | None = _skip()


@dataclass
class ListFineTuningJobsRequest(Model):
    after: str | None = _skip()
    limit: int | None = _skip()


@dataclass
class ListFineTuningJobEventsRequest(Model):
    fine_tuning_job_id: str
    after: str | None = _skip()
    limit: int | None = _skip()


@dataclass
class RetrieveFineTuningJobRequest(Model):
    fine_tuning_job_id: str


@dataclass
class CancelFineTuningJobRequest(Model):
    fine_tuning_job_id: str


@dataclass
class FineTuningPagination(Model, Generic[T]):
    """A page of results; pass ``item_type`` to decode each entry."""

    object: str
    data: list[T]
    has_more: bool

    @classmethod
    def from_dict(cls, data, item_type=None):
        page = super().from_dict(data)
        if item_type is not None:
            page.data = [item_type.from_dict(item) for item in page.data]
        return page


@dataclass
class FineTuningJobError(Model):
    code: str
    message: str
    param: str | None = None


@dataclass
class FineTuningJobObject(Model):
    id: str
    created_at: int
    hyperparameters: HyperParameters
    model: str
    object: str
    organization_id: str
    result_files: list[str]
    status: str
    training_file: str
    error: FineTuningJobError | None = None
    fine_tuned_model: str | None = None
    finished_at: str | None = None
    trained_tokens: int | None = None
    validation_file: str | None = None


@dataclass
class FineTuningJobEvent(Model):
    id: str
    created_at: int
    level: str
    message: str
    object: str