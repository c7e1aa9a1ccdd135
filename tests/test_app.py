from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from blog_server.app import create_app
from blog_server.settings import Settings


def test_settings_read_prefixed_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BLOG_SERVER_PORT", "9123")
    monkeypatch.setenv("BLOG_SERVER_DATABASE_PATH", "/tmp/other.db")

    settings = Settings()
    assert settings.port == 9123
    assert settings.database_url == "sqlite+aiosqlite:////tmp/other.db"


def test_lifespan_migrates_and_serves_file_database(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    db_path = tmp_path / "blog.db"
    monkeypatch.setenv("BLOG_SERVER_DATABASE_PATH", str(db_path))

    with TestClient(create_app()) as client:
        response = client.get("/posts")
        assert response.status_code == 200
        assert response.json()["total"] == 0

        authors = client.get("/authors")
        assert authors.status_code == 200
        assert authors.json()["authors"] == []

    assert db_path.exists()


def test_static_stylesheet_is_served(client: TestClient) -> None:
    response = client.get("/static/app.css")
    assert response.status_code == 200
    assert "text/css" in response.headers["content-type"]
