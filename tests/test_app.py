import logging

from fastapi.testclient import TestClient

from education_api.app.core.config import settings
from education_api.app.core.logging_config import CONSOLE_HANDLER, FILE_HANDLER, setup_logging
from education_api.app.main import create_app
from education_api.app.services.college_service import CollegeService


def test_environment_message_follows_profile(client, monkeypatch):
    monkeypatch.setattr(settings, "app_profile", "dev")
    response = client.get("/api/v1/info/environment")
    assert response.status_code == 200
    assert response.text == "You are in the Development Environment!"

    monkeypatch.setattr(settings, "app_profile", "prod")
    assert client.get("/api/v1/info/environment").text == (
        "You are in the Production Environment. Be careful!"
    )


def test_validation_errors_map_fields_to_messages(client):
    response = client.post("/api/v1/colleges/", json={"name": "   "})
    assert response.status_code == 400
    assert response.json() == {
        "name": "College name is required",
        "address": "Field required",
    }


def test_nested_reference_errors_use_dotted_names(client):
    response = client.post(
        "/api/v1/departments/", json={"name": "CS", "code": "CS01", "college": {"id": "abc"}}
    )
    assert response.status_code == 400
    assert list(response.json()) == ["college.id"]


def test_unexpected_errors_hide_details(monkeypatch):
    async def broken():
        raise RuntimeError("database file is locked")

    monkeypatch.setattr(CollegeService, "list_all", broken)
    with TestClient(create_app(), raise_server_exceptions=False) as client:
        response = client.get("/api/v1/colleges/")
    assert response.status_code == 500
    body = response.json()
    assert body["message"] == "An unexpected error occurred"
    assert "locked" not in response.text


def test_logging_writes_to_configured_file(tmp_path, monkeypatch):
    root = logging.getLogger()
    previous_level = root.level
    previous_handlers = list(root.handlers)
    logfile = tmp_path / "education.log"
    monkeypatch.setattr(settings, "log_level", "debug")
    monkeypatch.setattr(settings, "log_file", str(logfile))
    try:
        setup_logging()
        setup_logging()
        names = [handler.get_name() for handler in root.handlers]
        assert names.count(CONSOLE_HANDLER) == 1
        assert names.count(FILE_HANDLER) == 1
        assert root.level == logging.DEBUG
        logging.getLogger("education_api.test").info("department created")
        for handler in root.handlers:
            handler.flush()
        assert "[INFO] education_api.test: department created" in logfile.read_text(encoding="utf-8")
    finally:
        for handler in root.handlers[:]:
            if handler not in previous_handlers:
                root.removeHandler(handler)
                handler.close()
        root.setLevel(previous_level)
