from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from src.api.deps import get_settings
from src.api.main import app

PROJECT_ROOT = Path(__file__).parent.parent.parent


@pytest.fixture
def client(tmp_path, monkeypatch):
    """The real app on a fresh data dir; startup runs the migrations."""
    monkeypatch.setenv("LINKHUB_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("LINKHUB_RULES", str(PROJECT_ROOT / "rules.yaml"))
    monkeypatch.setenv("LINKHUB_MIGRATIONS", str(PROJECT_ROOT / "migrations"))
    get_settings.cache_clear()
    with TestClient(app) as test_client:
        yield test_client
    get_settings.cache_clear()


@pytest.fixture
def owner(client):
    response = client.post(
        "/api/admin/owners", json={"slug": "jane", "display_name": "Jane", "bio": "Links"}
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def add_link(client, owner):
    def _add(title, enabled=True):
        response = client.post(
            f"/api/admin/owners/{owner['id']}/links",
            json={
                "title": title,
                "url": f"https://{title.lower()}.com",
                "icon": {"kind": "predefined", "name": "globe"},
            },
        )
        assert response.status_code == 201
        link = response.json()
        if not enabled:
            client.patch(
                f"/api/admin/owners/{owner['id']}/links/{link['id']}/enabled",
                json={"enabled": False},
            )
        return link

    return _add
