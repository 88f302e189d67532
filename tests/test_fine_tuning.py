import pytest

from aiwire.fine_tuning import (
    CancelFineTuningJobRequest,
    CreateFineTuningJobRequest,
    FineTuningJobEvent,
    FineTuningJobObject,
    FineTuningPagination,
    HyperParameters,
    ListFineTuningJobEventsRequest,
    ListFineTuningJobsRequest,
)

JOB = {
    "id": "ftjob-1",
    "created_at": 1692661014,
    "error": None,
    "fine_tuned_model": None,
    "finished_at": None,
    "hyperparameters": {"n_epochs": "4"},
    "model": "gpt-3.5-turbo-0613",
    "object": "fine_tuning.job",
    "organization_id": "org-1",
    "result_files": [],
    "status": "queued",
    "trained_tokens": None,
    "training_file": "file-abc",
    "validation_file": None,
}
EVENT = {
    "id": "ftevent-1",
    "created_at": 1692407401,
    "level": "info",
    "message": "Fine tuning job successfully completed",
    "object": "fine_tuning.job.event",
}


def test_create_request_omits_unset():
    req = CreateFineTuningJobRequest("gpt-3.5-turbo", "file-abc")
    assert req.to_dict() == {"model": "gpt-3.5-turbo", "training_file": "file-abc"}


def test_create_request_with_hyperparameters():
    req = CreateFineTuningJobRequest(
        "gpt-3.5-turbo", "file-abc", hyperparameters=HyperParameters(n_epochs="3")
    )
    assert req.to_dict()["hyperparameters"] == {"n_epochs": "3"}


def test_list_requests_omit_unset():
    assert ListFineTuningJobsRequest().to_dict() == {}
    assert ListFineTuningJobsRequest(limit=5).to_dict() == {"limit": 5}
    events = ListFineTuningJobEventsRequest("ftjob-1")
    assert events.to_dict() == {"fine_tuning_job_id": "ftjob-1"}
    assert CancelFineTuningJobRequest("ftjob-1").to_dict() == {
        "fine_tuning_job_id": "ftjob-1"
    }


def test_job_object_parses_and_round_trips():
    job = FineTuningJobObject.from_dict(JOB)
    assert job.status == "queued"
    assert job.hyperparameters.n_epochs == "4"
    assert job.hyperparameters.batch_size is None
    assert job.error is None
    assert FineTuningJobObject.from_dict(job.to_dict()) == job


def test_job_object_with_error():
    data = dict(JOB, error={"code": "invalid_file", "message": "bad", "param": None})
    job = FineTuningJobObject.from_dict(data)
    assert job.error.code == "invalid_file"


def test_pagination_decodes_items_with_type():
    page = FineTuningPagination.from_dict(
        {"object": "list", "data": [EVENT], "has_more": True},
        item_type=FineTuningJobEvent,
    )
    assert page.has_more is True
    assert page.data[0] == FineTuningJobEvent.from_dict(EVENT)
    assert page.to_dict()["data"] == [EVENT]


def test_pagination_without_type_keeps_raw_items():
    page = FineTuningPagination.from_dict({"object": "list", "data": [JOB], "has_more": False})
    assert page.data == [JOB]


def test_job_object_missing_field_raises():
    data = {k: v for k, v in JOB.items() if k != "hyperparameters"}
    with pytest.raises(ValueError):
        FineTuningJobObject.from_dict(data)