"""
Shared fixtures: an in-memory database per test and an API client bound to it.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from taskmanager.db.base import Base
from taskmanager.db.session import get_db, init_db
from taskmanager.main import app


@pytest.fixture()
def engine():
    # StaticPool keeps one connection so every session sees the same in-memory database
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def db_session(engine):
    """A session for tests that call services directly or inspect the database."""
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def client(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def register(client):
    """Register a user and return the Authorization header for them."""
    def _register(username: str, password: str = "testpassword123") -> dict:
        response = client.post(
            "/api/register",
            json={"username": username, "password": password}
        )
        assert response.status_code == 201, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}
    return _register


@pytest.fixture()
def make_category(client):
    """Create a category for the given auth headers and return its id."""
    def _make_category(headers: dict, name: str) -> int:
        response = client.post("/api/categories", json={"name": name}, headers=headers)
        assert response.status_code == 201, response.text
        return response.json()["category"]["id"]
    return _make_category


@pytest.fixture()
def make_task(client):
    """Create a task for the given auth headers and return its JSON."""
    def _make_task(headers: dict, category_id: int, title: str, **fields) -> dict:
        body = {"title": title, "category": category_id}
        body.update(fields)
        response = client.post("/api/tasks", json=body, headers=headers)
        assert response.status_code == 201, response.text
        return response.json()["task"]
    return _make_task
