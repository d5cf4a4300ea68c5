"""Tests for the CohereClient facade."""
import pytest

from cohere_lib import (
    CohereClient,
    CohereConnectionError,
    InvalidEndpointError,
    NoArgsAndNoPayloadError,
)
from cohere_lib.data_models.classification import SummarizeModel
from cohere_lib.data_models.generation import GenerateModel

from tests.conftest import FakeSession


def test_client_requires_connection_settings() -> None:
    with pytest.raises(CohereConnectionError):
        CohereClient(api_key="", api="https://api.cohere.test", version="v1")


def test_client_from_env() -> None:
    session = FakeSession().add({"id": "1", "generations": []})
    client = CohereClient.from_env(
        {
            "COHERE_API_KEY": "env-key",
            "COHERE_BASE_URL": "https://env.cohere.test",
            "COHERE_VERSION": "v2",
        },
        session=session,
    )

    client.generate("hi")

    assert session.calls[0]["url"] == "https://env.cohere.test/v2/generate"
    assert session.calls[0]["headers"]["Authorization"] == "Bearer env-key"


def test_client_from_env_missing_variables() -> None:
    with pytest.raises(CohereConnectionError):
        CohereClient.from_env({})


def test_generate_with_keyword_arguments(client, session) -> None:
    session.add({"id": "1", "generations": []})

    client.generate("Once upon", model="command", max_tokens=10, stop_sequences=[])

    assert session.calls[0]["url"] == "https://api.cohere.test/v1/generate"
    assert session.calls[0]["json"] == {
        "prompt": "Once upon",
        "model": "command",
        "max_tokens": 10,
        "stop_sequences": [],
        "stream": False,
    }


def test_generate_with_model_payload(client, session) -> None:
    session.add({"id": "1", "generations": []})
    client.generate(payload=GenerateModel(prompt="hi", k=0))
    assert session.calls[0]["json"] == {"prompt": "hi", "k": 0, "stream": False}


def test_summarize_with_dict_payload(client, session) -> None:
    session.add({"id": "s", "summary": "ok", "meta": {}})
    assert client.summarize(payload={"text": "abc"}) == {"id": "s", "summary": "ok", "meta": {}}


def test_summarize_with_model_payload(client, session) -> None:
    session.add({"id": "s", "summary": "ok", "meta": {}, "other": 1})
    result = client.summarize(payload=SummarizeModel(text="abc", format="bullets"))
    assert result == {"id": "s", "summary": "ok", "meta": {}}
    assert session.calls[0]["json"] == {"text": "abc", "format": "bullets"}


@pytest.mark.parametrize(
    "method, kwargs",
    [
        ("generate", {}),
        ("chat", {"model": "command"}),
        ("rerank", {"query": "q"}),
        ("embed", {}),
        ("classify", {"inputs": ["a"]}),
        ("summarize", {}),
    ],
)
def test_missing_arguments_and_payload(client, session, method, kwargs) -> None:
    with pytest.raises(NoArgsAndNoPayloadError):
        getattr(client, method)(**kwargs)
    assert session.calls == []


def test_chat_default_temperature_survives_omitted_argument(client, session) -> None:
    session.add({"text": "hi"})
    client.chat("hello", max_tokens=None)
    assert session.calls[0]["json"]["temperature"] == 0.8


def test_rerank_scenario(client, session) -> None:
    session.add(
        {
            "id": "r",
            "results": [
                {"index": 1, "relevance_score": 0.9},
                {"index": 0, "relevance_score": 0.1},
            ],
        }
    )

    result = client.rerank(query="q", documents=["a", "b"])

    assert session.calls[0]["json"]["documents"] == [{"text": "a"}, {"text": "b"}]
    assert [r["document"] for r in result["results"]] == [{"text": "b"}, {"text": "a"}]
    assert result["meta"] is None


def test_embed_uses_client_batch_size(session) -> None:
    client = CohereClient(
        api_key="k", api="https://api.cohere.test", version="v1", session=session, batch_size=2
    )
    session.add({"embeddings": [[1.0], [2.0]], "meta": {"first": True}})
    session.add({"embeddings": [[3.0]], "meta": {"first": False}})

    result = client.embed(["a", "b", "c"])

    assert len(session.calls) == 2
    assert result["embeddings"] == [[1.0], [2.0], [3.0]]
    assert result["meta"] == {"first": True}


def test_classify_through_client(client, session) -> None:
    session.add(
        {
            "classifications": [
                {
                    "id": "1",
                    "input": "a",
                    "prediction": "x",
                    "confidence": 0.7,
                    "labels": {"x": {"confidence": 0.7}, "y": {"confidence": 0.3}},
                }
            ],
            "meta": {},
        }
    )
    result = client.classify(inputs=["a"], examples=[{"text": "b", "label": "x"}])
    assert result["classifications"][0]["labels"] == {"x": 0.7, "y": 0.3}


def test_raw_request_validates_endpoint(client, session) -> None:
    with pytest.raises(InvalidEndpointError):
        client.request("detokenize", {"tokens": [1]})
    assert session.calls == []
