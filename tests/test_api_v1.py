"""Tests for the versioned `/api/v1` router and its flat response shapes."""

from fastapi.testclient import TestClient

from info_service.api.application import create_api_application
from info_service.config import AppSettings
from info_service.system import PsutilSystemSnapshotService


def _build_client() -> TestClient:
    """Create a test client backed by the live psutil snapshot reader.

    Returns:
        TestClient: Client bound to a fresh application instance.
    """

    settings = AppSettings(environment_name="test")
    snapshot_service = PsutilSystemSnapshotService(settings=settings, process_started_at=0.0)
    return TestClient(create_api_application(settings, snapshot_service))


def test_api_v1_welcome_is_not_enveloped() -> None:
    response = _build_client().get("/api/v1/")

    assert response.status_code == 200
    body = response.json()
    assert "success" not in body
    assert body["application"] == "learn-python"
    assert len(body["endpoints"]) == 4
    assert {"path": "/api/v1/greet", "method": "POST", "description": "Greet a user by name"} in body["endpoints"]


def test_api_v1_ping_returns_json_pong() -> None:
    response = _build_client().get("/api/v1/ping")

    assert response.status_code == 200
    assert response.json()["message"] == "pong"
    assert response.json()["timestamp"]


def test_api_v1_health_returns_flat_status() -> None:
    response = _build_client().get("/api/v1/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["uptime"] >= 0
    assert "data" not in body


def test_api_v1_greet_returns_created_greeting() -> None:
    """Return HTTP 201 with greeting message for a valid name.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when greeting is missing or status differs.
    """

    response = _build_client().post("/api/v1/greet", json={"name": "John"})

    assert response.status_code == 201
    assert "Hello, John!" in response.json()["message"]


def test_api_v1_greet_rejects_empty_name() -> None:
    """Return HTTP 400 with per-field details for an empty name.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when validation details are missing.
    """

    response = _build_client().post("/api/v1/greet", json={"name": ""})

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Validation failed"
    assert body["details"]["name"]


def test_api_v1_greet_rejects_name_longer_than_fifty_characters() -> None:
    response = _build_client().post("/api/v1/greet", json={"name": "x" * 51})

    assert response.status_code == 400
    assert "between 2 and 50" in response.json()["details"]["name"]


def test_api_v1_greet_rejects_missing_name() -> None:
    response = _build_client().post("/api/v1/greet", json={})

    assert response.status_code == 400
    assert response.json()["details"]["name"] == "Name is required"


def test_api_v1_greet_reports_malformed_json_in_flat_shape() -> None:
    """Return this router's flat 400 body when the JSON cannot be decoded.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when the envelope shape or an offset key is returned.
    """

    response = _build_client().post(
        "/api/v1/greet",
        content=b'{"name": ',
        headers={"content-type": "application/json"},
    )

    assert response.status_code == 400
    body = response.json()
    assert body == {"error": "Validation failed", "details": {"body": "Malformed JSON body"}}


def test_api_v1_greet_treats_empty_body_as_missing_name() -> None:
    response = _build_client().post("/api/v1/greet", content=b"", headers={"content-type": "application/json"})

    assert response.status_code == 400
    assert response.json()["details"]["name"] == "Name is required"


def test_api_v1_greet_documents_request_body_schema() -> None:
    schema = _build_client().get("/openapi.json").json()

    request_body = schema["paths"]["/api/v1/greet"]["post"]["requestBody"]
    body_schema = request_body["content"]["application/json"]["schema"]
    assert "name" in body_schema["properties"]
    assert "201" in schema["paths"]["/api/v1/greet"]["post"]["responses"]
