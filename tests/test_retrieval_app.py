import pytest
from fastapi.testclient import TestClient

from chunking import ConfigError
from retrieval.app import create_app
from retrieval.engine import RetrievalEngine

from conftest import LIBRARY_TEXT, REFERENCE_TEXT


def build_client(small_config) -> TestClient:
    return TestClient(create_app(RetrievalEngine(small_config)))


def test_health_reports_uninitialized(small_config) -> None:
    client = build_client(small_config)
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "initialized": False}


def test_query_before_initialize_is_conflict(small_config) -> None:
    client = build_client(small_config)
    response = client.post("/query", json={"question": "allocator"})
    assert response.status_code == 409


def test_initialize_and_query(small_config) -> None:
    client = build_client(small_config)
    response = client.post(
        "/initialize",
        json={"reference": REFERENCE_TEXT, "library": LIBRARY_TEXT},
    )
    assert response.status_code == 200
    names = [corpus["name"] for corpus in response.json()["corpora"]]
    assert names == ["reference", "library"]

    response = client.post("/query", json={"question": "growable list", "k_per_corpus": 1})
    assert response.status_code == 200
    payload = response.json()
    assert "growable" in payload["context"]
    assert len(payload["hits"]["library"]) == 1
    assert payload["hits"]["library"][0]["rank"] == 1


def test_empty_corpus_is_unprocessable(small_config) -> None:
    client = build_client(small_config)
    response = client.post("/initialize", json={"reference": "", "library": LIBRARY_TEXT})
    assert response.status_code == 422
    assert client.get("/stats").status_code == 409


def test_invalid_chunk_settings_fail_at_startup(monkeypatch) -> None:
    monkeypatch.setenv("ZAI_CHUNK_SIZE", "100")
    monkeypatch.setenv("ZAI_CHUNK_OVERLAP", "100")
    with pytest.raises(ConfigError):
        create_app()


def test_embedder_failure_is_unprocessable(small_config) -> None:
    def broken_factory(chunks):
        raise ValueError("bad chunk parameters")

    client = TestClient(create_app(RetrievalEngine(small_config, embedder_factory=broken_factory)))
    response = client.post(
        "/initialize",
        json={"reference": REFERENCE_TEXT, "library": LIBRARY_TEXT},
    )
    assert response.status_code == 422
    assert client.get("/health").json()["initialized"] is False
