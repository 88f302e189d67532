import pytest

from aiwire.common import DeletionStatus, EmptyRequestBody, Usage


def test_usage_round_trip():
    data = {"prompt_tokens": 9, "completion_tokens": 12, "total_tokens": 21}
    usage = Usage.from_dict(data)
    assert usage == Usage(prompt_tokens=9, completion_tokens=12, total_tokens=21)
    assert usage.to_dict() == data


def test_usage_missing_field():
    with pytest.raises(ValueError, match="total_tokens"):
        Usage.from_dict({"prompt_tokens": 1, "completion_tokens": 2})


def test_deletion_status_from_json():
    status = DeletionStatus.from_json('{"id": "file-1", "object": "file", "deleted": true}')
    assert status.deleted is True
    assert status.id == "file-1"
    assert DeletionStatus.from_json(status.to_json()) == status


def test_deletion_status_rejects_non_bool():
    with pytest.raises(ValueError):
        DeletionStatus.from_dict({"id": "x", "object": "file", "deleted": "yes"})


def test_empty_request_body():
    assert EmptyRequestBody().to_dict() == {}
    assert EmptyRequestBody.from_dict({"anything": 1}) == EmptyRequestBody()