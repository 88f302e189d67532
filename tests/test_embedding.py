import pytest

from aiwire.embedding import (
    EmbeddingData,
    EmbeddingRequest,
    EmbeddingResponse,
    EmbeddingUsage,
    EncodingFormat,
)


def test_request_omits_unset_fields():
    request = EmbeddingRequest("text-embedding-3-small", ["hello"])
    assert request.to_dict() == {"model": "text-embedding-3-small", "input": ["hello"]}


def test_request_encoding_format_wire_value():
    request = EmbeddingRequest("m", ["a"], encoding_format=EncodingFormat.BASE64, dimensions=8)
    out = request.to_dict()
    assert out["encoding_format"] == "base64"
    assert EmbeddingRequest.from_dict(out) == request


def test_invalid_encoding_format():
    with pytest.raises(ValueError):
        EmbeddingRequest.from_dict({"model": "m", "input": ["a"], "encoding_format": "hex"})


def test_integer_embeddings_become_floats():
    data = EmbeddingData.from_dict({"object": "embedding", "embedding": [1, 0.5], "index": 0})
    assert data.embedding == [1.0, 0.5]
    assert all(isinstance(value, float) for value in data.embedding)


def test_response_round_trip():
    response = EmbeddingResponse(
        object="list",
        data=[EmbeddingData(object="embedding", embedding=[0.25, -0.5], index=0)],
        model="m",
        usage=EmbeddingUsage(prompt_tokens=4, total_tokens=4),
    )
    assert EmbeddingResponse.from_json(response.to_json()) == response


def test_input_must_be_list():
    with pytest.raises(ValueError):
        EmbeddingRequest.from_dict({"model": "m", "input": "single"})