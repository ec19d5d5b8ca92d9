import pytest
from fastapi.testclient import TestClient

from brainstormer.api.main import create_app
from brainstormer.config.settings import get_settings, load_settings
from brainstormer.core.errors import ConfigurationError

from conftest import FakeProvider, make_payload


@pytest.fixture
def client(provider):
    settings = load_settings(API_KEY="test-key", _env_file=None)
    app = create_app(settings=settings, provider=provider)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def session_id(client):
    resp = client.post("/api/v1/sessions")
    assert resp.status_code == 201
    return resp.json()["session_id"]


def test_create_app_without_api_key_refuses_to_start(monkeypatch, tmp_path):
    monkeypatch.delenv("API_KEY", raising=False)
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.chdir(tmp_path)  # no .env here
    get_settings.cache_clear()
    try:
        with pytest.raises(ConfigurationError, match="API_KEY"):
            create_app()
    finally:
        get_settings.cache_clear()


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_catalogues(client):
    modalities = client.get("/api/v1/modalities").json()
    assert [m["id"] for m in modalities][:2] == ["video_analysis", "audio_analysis"]
    assert len(modalities) == 6

    levels = client.get("/api/v1/randomness-levels").json()
    assert [lvl["temperature"] for lvl in levels] == [0.3, 0.5, 0.7, 0.9, 1.1]
    assert levels[4]["label"] == "Far-Out"


def test_new_session_defaults(client, session_id):
    state = client.get(f"/api/v1/sessions/{session_id}").json()
    assert state["selected_modality"] is None
    assert state["randomness"] == 3
    assert state["randomness_label"] == "Creative"
    assert state["can_generate"] is False
    assert state["feedback_history"] == []


def test_unknown_session_404(client):
    assert client.get("/api/v1/sessions/nope").status_code == 404


def test_generate_without_modality(client, session_id, provider):
    state = client.post(f"/api/v1/sessions/{session_id}/generate").json()
    assert state["error"] == "Please select a modality first."
    assert provider.calls == []


def test_full_flow(client, session_id, provider):
    base = f"/api/v1/sessions/{session_id}"
    state = client.put(f"{base}/modality", json={"modality_id": "text_to_speech"}).json()
    assert state["can_generate"] is True
    client.put(f"{base}/randomness", json={"level": 5})

    state = client.post(f"{base}/generate").json()
    assert state["use_case"] == {
        "useCaseTitle": "X",
        "useCaseDescription": "Y",
        "examplePrompt": "Z",
        "benefits": ["a", "b", "c"],
    }
    assert state["error"] is None
    assert state["is_loading"] is False
    assert state["feedback_given"] is False
    assert provider.calls[0]["temperature"] == 1.1

    first = client.post(f"{base}/feedback", json={"polarity": "positive"}).json()
    second = client.post(f"{base}/feedback", json={"polarity": "negative"}).json()
    assert first["recorded"] is True
    assert second["recorded"] is False
    assert second["session"]["feedback_given"] is True
    assert len(second["session"]["feedback_history"]) == 1
    assert second["session"]["feedback_history"][0]["polarity"] == "positive"


def test_generation_failure_in_state():
    provider = FakeProvider(error=ConnectionError("timeout"))
    app = create_app(settings=load_settings(API_KEY="test-key", _env_file=None), provider=provider)
    with TestClient(app) as client:
        sid = client.post("/api/v1/sessions").json()["session_id"]
        client.put(f"/api/v1/sessions/{sid}/modality", json={"modality_id": "video_analysis"})
        resp = client.post(f"/api/v1/sessions/{sid}/generate")

    assert resp.status_code == 200
    state = resp.json()
    assert "timeout" in state["error"]
    assert state["use_case"] is None


def test_validation_errors(client, session_id):
    base = f"/api/v1/sessions/{session_id}"
    assert client.put(f"{base}/modality", json={"modality_id": "smell"}).status_code == 422
    assert client.put(f"{base}/randomness", json={"level": 0}).status_code == 422
    assert client.put(f"{base}/randomness", json={"level": 6}).status_code == 422
    assert client.post(f"{base}/feedback", json={"polarity": "meh"}).status_code == 422


def test_generate_conflict_while_loading(client, session_id):
    session = client.app.state.sessions.get_by_id(session_id)
    session.state.is_loading = True
    assert client.post(f"/api/v1/sessions/{session_id}/generate").status_code == 409


def test_delete_session(client, session_id):
    assert client.delete(f"/api/v1/sessions/{session_id}").status_code == 204
    assert client.get(f"/api/v1/sessions/{session_id}").status_code == 404
    assert client.delete(f"/api/v1/sessions/{session_id}").status_code == 404
    assert client.get("/health").json()["sessions"] == 0


def test_oldest_sessions_evicted_at_limit(provider):
    settings = load_settings(API_KEY="test-key", max_sessions=3, _env_file=None)
    app = create_app(settings=settings, provider=provider)
    with TestClient(app) as client:
        ids = [client.post("/api/v1/sessions").json()["session_id"] for _ in range(5)]

        assert client.get("/health").json()["sessions"] == 3
        assert client.get(f"/api/v1/sessions/{ids[0]}").status_code == 404
        assert client.get(f"/api/v1/sessions/{ids[1]}").status_code == 404
        assert client.get(f"/api/v1/sessions/{ids[4]}").status_code == 200
