"""Batch job shapes."""

from __future__ import annotations

from dataclasses import dataclass

from aiwire.schema import Model, wire_field


@dataclass
class Metadata(Model):
    customer_id: str
    batch_description: str


@dataclass
class CreateBatchRequest(Model):
    input_file_id: str
    endpoint: str
    completion_window: str
    metadata: Metadata | None = wire_field(omit_if_none=True, default=None)


@dataclass
class RequestCounts(Model):
    total: int
    completed: int
    failed: int


@dataclass
class BatchError(Model):
    code: str
    message: str
    line: int | None = None
    param: str | None = None


@dataclass
class BatchErrors(Model):
    object: str
    data: list[BatchError]


@dataclass
class BatchResponse(Model):
    """State of a batch job."""

    completion_window: str
    created_at: int
    endpoint: str
    id: str
    input_file_id: str
    object: str
    request_counts: RequestCounts
    status: str
    cancelled_at: int | None = None
    cancelling_at: int | None = None
    completed_at: int | None = None
    error_file_id: str | None = None
    errors: BatchErrors | None = None
    expired_at: int | None = None
    expires_at: int | None = None
    failed_at: int | None = None
    finalizing_at: int | None = None
    in_progress_at: int | None = None
    metadata: Metadata | None = None
    output_file_id: str | None = None


@dataclass
class ListBatchResponse(Model):
    object: str
    data: list[BatchResponse]
    first_id: str
    last_id: str
    has_more: bool