import pytest

from aiwire.common import Usage
from aiwire.edit import EditChoice, EditRequest, EditResponse


def test_request_omits_unset_fields():
    request = EditRequest("text-davinci-edit-001", "Fix the spelling")
    assert request.to_dict() == {
        "model": "text-davinci-edit-001",
        "instruction": "Fix the spelling",
    }


def test_request_includes_set_fields():
    request = EditRequest("m", "do it", input="helo", n=2, temperature=0.5)
    out = request.to_dict()
    assert out["input"] == "helo"
    assert out["n"] == 2
    assert "top_p" not in out
    assert EditRequest.from_dict(out) == request


def test_response_round_trip():
    response = EditResponse(
        object="edit",
        created=1,
        usage=Usage(prompt_tokens=1, completion_tokens=2, total_tokens=3),
        choices=[EditChoice(text="hello", index=0)],
    )
    assert EditResponse.from_json(response.to_json()) == response


def test_response_requires_usage():
    with pytest.raises(ValueError, match="usage"):
        EditResponse.from_dict({"object": "edit", "created": 1, "choices": []})