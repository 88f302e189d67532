import copy

import pytest

from aiwire.run import (
    CreateRunRequest,
    CreateThreadAndRunRequest,
    LastError,
    ListRun,
    ListRunStep,
    ModifyRunRequest,
    RunObject,
    RunStepObject,
)
from aiwire.thread import CreateThreadRequest
from aiwire.types import CodeInterpreterTool, ToolsFileSearch, ToolsFunction

RUN = {
    "id": "run_1",
    "object": "thread.run",
    "created_at": 1,
    "thread_id": "thread_1",
    "assistant_id": "asst_1",
    "status": "completed",
    "model": "gpt-4o",
    "instructions": None,
    "tools": [
        {"type": "code_interpreter"},
        {"type": "file_search"},
        {
            "type": "function",
            "function": {"name": "lookup", "parameters": {"type": "object"}},
        },
    ],
    "metadata": {},
    "last_error": {"code": "c", "message": "m"},
}
STEP = {
    "id": "step_1",
    "object": "thread.run.step",
    "created_at": 1,
    "assistant_id": "asst_1",
    "thread_id": "thread_1",
    "run_id": "run_1",
    "type": "message_creation",
    "status": "completed",
    "step_details": {"k": "v"},
    "metadata": {},
}


def test_create_run_request_minimal():
    assert CreateRunRequest(assistant_id="asst_1").to_dict() == {"assistant_id": "asst_1"}


@pytest.mark.parametrize("fmt", ["auto", {"type": "json_object"}])
def test_create_run_request_response_format(fmt):
    out = CreateRunRequest(assistant_id="asst_1", response_format=fmt).to_dict()
    assert out["response_format"] == fmt


def test_modify_run_request_empty():
    assert ModifyRunRequest().to_dict() == {}


def test_run_object_decodes_tools():
    run = RunObject.from_dict(RUN)
    code, search, function = run.tools
    assert isinstance(code, CodeInterpreterTool)
    assert isinstance(search, ToolsFileSearch)
    assert isinstance(function, ToolsFunction)
    assert function.function.name == "lookup"
    assert run.last_error == LastError(code="c", message="m")


def test_run_object_round_trip():
    assert RunObject.from_dict(RUN).to_dict() == RUN


def test_run_object_unknown_tool_rejected():
    data = copy.deepcopy(RUN)
    data["tools"] = [{"type": "browser"}]
    with pytest.raises(ValueError):
        RunObject.from_dict(data)


def test_run_object_missing_model_rejected():
    data = copy.deepcopy(RUN)
    del data["model"]
    with pytest.raises(ValueError):
        RunObject.from_dict(data)


def test_list_run_round_trip():
    listing = {"object": "list", "data": [RUN], "first_id": "run_1", "last_id": "run_1", "has_more": False}
    assert ListRun.from_dict(listing).to_dict() == listing


def test_run_step_type_is_renamed():
    step = RunStepObject.from_dict(STEP)
    assert step.run_step_type == "message_creation"
    assert step.to_dict() == STEP


def test_list_run_step_round_trip():
    listing = {"object": "list", "data": [STEP], "first_id": "step_1", "last_id": "step_1", "has_more": True}
    decoded = ListRunStep.from_dict(listing)
    assert decoded.data[0].run_id == "run_1"
    assert decoded.to_dict() == listing


def test_create_thread_and_run_with_thread():
    request = CreateThreadAndRunRequest(
        assistant_id="asst_1", thread=CreateThreadRequest(metadata={"k": "v"})
    )
    assert request.to_dict() == {"assistant_id": "asst_1", "thread": {"metadata": {"k": "v"}}}