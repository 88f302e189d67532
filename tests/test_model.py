import dataclasses

import pytest

from aiwire.model import Architecture, ModelResponse, ModelsResponse, Pricing, TopProvider


def test_minimal_listing():
    resp = ModelsResponse.from_dict({"data": [{"id": "gpt-4o", "owned_by": "system"}]})
    assert resp.object is None
    assert resp.data[0].id == "gpt-4o"
    assert resp.data[0].owned_by == "system"
    assert resp.data[0].created is None


def test_nulls_are_serialized():
    out = ModelResponse(id="m").to_dict()
    assert set(out) == {f.name for f in dataclasses.fields(ModelResponse)}
    assert [key for key, value in out.items() if value is not None] == ["id"]


def test_nested_round_trip():
    model = ModelResponse(
        id="m",
        architecture=Architecture(input_modalities=["text"], tokenizer="tk"),
        top_provider=TopProvider(is_moderated=True, context_length=1000),
        pricing=Pricing(prompt="0.1", completion="0.2"),
        per_request_limits={"any": [1, 2]},
        supported_parameters=["tools"],
    )
    restored = ModelsResponse.from_json(ModelsResponse(data=[model], object="list").to_json())
    assert restored.data == [model]
    assert restored.object == "list"


def test_per_request_limits_passes_through():
    model = ModelResponse.from_dict({"per_request_limits": {"a": {"b": None}}})
    assert model.per_request_limits == {"a": {"b": None}}


def test_missing_data_rejected():
    with pytest.raises(ValueError, match="data"):
        ModelsResponse.from_dict({"object": "list"})


def test_wrong_type_rejected():
    with pytest.raises(ValueError):
        ModelResponse.from_dict({"context_length": "big"})