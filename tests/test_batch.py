import pytest

from aiwire.batch import (
    BatchResponse,
    CreateBatchRequest,
    ListBatchResponse,
    Metadata,
)

BATCH = {
    "id": "batch_abc",
    "object": "batch",
    "endpoint": "/v1/chat/completions",
    "errors": None,
    "input_file_id": "file-abc",
    "completion_window": "24h",
    "status": "validating",
    "output_file_id": None,
    "error_file_id": None,
    "created_at": 1711471533,
    "request_counts": {"total": 4, "completed": 3, "failed": 1},
    "metadata": {"customer_id": "user_1", "batch_description": "nightly"},
}


def test_create_request_omits_metadata_when_unset():
    req = CreateBatchRequest("file-abc", "/v1/chat/completions", "24h")
    assert req.to_dict() == {
        "input_file_id": "file-abc",
        "endpoint": "/v1/chat/completions",
        "completion_window": "24h",
    }


def test_create_request_includes_metadata():
    req = CreateBatchRequest(
        "file-abc", "/v1/chat/completions", "24h", metadata=Metadata("user_1", "nightly")
    )
    assert req.to_dict()["metadata"] == {
        "customer_id": "user_1",
        "batch_description": "nightly",
    }


def test_batch_response_parses():
    resp = BatchResponse.from_dict(BATCH)
    assert resp.id == "batch_abc"
    assert resp.request_counts.completed == 3
    assert resp.metadata.customer_id == "user_1"
    assert resp.completed_at is None
    assert resp.errors is None


def test_batch_response_round_trip():
    resp = BatchResponse.from_dict(BATCH)
    assert BatchResponse.from_dict(resp.to_dict()) == resp


def test_batch_errors_parse():
    data = dict(BATCH)
    data["errors"] = {
        "object": "list",
        "data": [{"code": "invalid", "message": "bad line", "line": 2, "param": None}],
    }
    resp = BatchResponse.from_dict(data)
    assert resp.errors.data[0].line == 2
    assert resp.errors.data[0].param is None


def test_batch_response_missing_counts_raises():
    data = {k: v for k, v in BATCH.items() if k != "request_counts"}
    with pytest.raises(ValueError):
        BatchResponse.from_dict(data)


def test_list_batch_response():
    listing = ListBatchResponse.from_dict(
        {
            "object": "list",
            "data": [BATCH],
            "first_id": "batch_abc",
            "last_id": "batch_abc",
            "has_more": False,
        }
    )
    assert len(listing.data) == 1
    assert listing.data[0].status == "validating"
    assert listing.has_more is False