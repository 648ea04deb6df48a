import pytest
from fastapi.testclient import TestClient

from education_api.app.core.config import settings
from education_api.app.core.db import init_db
from education_api.app.main import create_app


@pytest.fixture(autouse=True)
def database(tmp_path, monkeypatch):
    """Point every test at its own freshly migrated SQLite file."""
    monkeypatch.setattr(settings, "database_url", str(tmp_path / "education-test.db"))
    init_db()
    yield


@pytest.fixture
def client():
    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture
def college(client):
    response = client.post("/api/v1/colleges/", json={"name": "Tech U", "address": "1 Main St"})
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def department(client, college):
    response = client.post(
        "/api/v1/departments/",
        json={"name": "CS", "code": "CS01", "college": {"id": college["id"]}},
    )
    assert response.status_code == 201
    return response.json()
