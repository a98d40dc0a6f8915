"""
Tests for error kinds and their JSON responses.
"""
import json
import time
import pytest
from sqlalchemy.exc import OperationalError
from taskmanager.core.config import settings
from taskmanager.core.security import create_access_token
from taskmanager.db.session import get_db
from taskmanager.main import app
from taskmanager.services import task_service
from taskmanager.core.errors import (
    Conflict, InvalidInput, NotFound, RequestTimeout, ServerError, Unauthorized, error_response
)


@pytest.mark.parametrize("error, status_code", [
    (InvalidInput(), 400),
    (Unauthorized(), 401),
    (NotFound(), 404),
    (Conflict(), 409),
    (ServerError(), 500),
    (RequestTimeout(), 504),
])
def test_error_status_codes(error, status_code):
    """Test each error kind maps to its HTTP status with a message body."""
    response = error_response(error)
    assert response.status_code == status_code
    assert json.loads(response.body) == {"message": error.message}


def test_unauthorized_sets_challenge_header():
    """Test 401 responses advertise the bearer scheme."""
    response = error_response(Unauthorized("Invalid or expired token"))
    assert response.headers["www-authenticate"] == "Bearer"


def test_unknown_route_uses_message_body(client):
    """Test framework errors share the same body shape."""
    response = client.get("/api/nothing-here")
    assert response.status_code == 404
    assert "message" in response.json()


def test_health(client):
    """Test the health endpoints."""
    assert client.get("/health").json() == {"status": "healthy"}
    assert client.get("/").status_code == 200


class UnavailableSession:
    """Session stand-in whose storage is down."""

    def query(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("database is locked"))

    def close(self):
        pass


def test_storage_failure_returns_server_error(client):
    """Test a storage error raised inside a route becomes a 500 with a message body."""
    def unavailable_db():
        db = UnavailableSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = unavailable_db
    token = create_access_token({"sub": "1"})

    response = client.get("/api/tasks", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 500
    assert response.json() == {"message": "Storage unavailable"}


def test_slow_storage_call_times_out(client, register, monkeypatch):
    """Test a storage call running past the request budget returns 504."""
    headers = register("alice")

    def slow_list_tasks(*args, **kwargs):
        time.sleep(1.0)
        return []

    monkeypatch.setattr(task_service, "list_tasks", slow_list_tasks)
    monkeypatch.setattr(settings, "REQUEST_TIMEOUT_SECONDS", 0.2)

    started = time.monotonic()
    response = client.get("/api/tasks", headers=headers)
    assert response.status_code == 504
    assert response.json() == {"message": "Request timed out"}
    assert time.monotonic() - started < 1.0
