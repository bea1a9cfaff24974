"""API tests: health, error envelope and correlation ids."""

import pytest

pytestmark = pytest.mark.integration


async def test_health(api_client):
    response = await api_client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "service": "curriculum-ops"}


async def test_ready_checks_database(api_client):
    response = await api_client.get("/api/ready")
    assert response.status_code == 200
    assert response.json()["checks"] == {"database": True}


async def test_not_found_payload(api_client):
    response = await api_client.get("/api/lessons/missing-lesson")

    assert response.status_code == 404
    body = response.json()
    assert body["error"] == {"code": "NOT_FOUND", "message": "Lesson not found: missing-lesson"}
    assert body["debug_id"]


async def test_unknown_route_uses_error_envelope(api_client):
    response = await api_client.get("/api/does-not-exist")
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"


async def test_validation_error_is_bad_request(api_client):
    response = await api_client.post("/api/mapping-rules", json={"answer_value": "Student"})

    assert response.status_code == 400
    body = response.json()
    assert body["error"]["code"] == "BAD_REQUEST"
    assert "question_id" in body["error"]["message"]


async def test_request_id_echoed(api_client):
    response = await api_client.get("/api/health", headers={"X-Request-ID": "trace-123"})
    assert response.headers["X-Request-ID"] == "trace-123"


async def test_request_id_minted_and_long_ids_trimmed(api_client):
    minted = await api_client.get("/api/health")
    assert len(minted.headers["X-Request-ID"]) == 36

    trimmed = await api_client.get("/api/health", headers={"X-Request-ID": "x" * 300})
    assert trimmed.headers["X-Request-ID"] == "x" * 128


async def test_missing_generation_credential_is_config_error(app, api_client):
    from curriculum_ops.api.deps import get_generation_client

    app.dependency_overrides.pop(get_generation_client)

    response = await api_client.post(
        "/api/lessons/generate",
        json={
            "title": "Voice Agents",
            "provider": "ElevenLabs",
            "level": "intermediate",
            "audience": "Support leads",
            "objectives": "Ship a voice agent",
        },
    )

    assert response.status_code == 500
    assert response.json()["error"]["code"] == "CONFIG_ERROR"
