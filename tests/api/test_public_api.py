from pathlib import Path
from uuid import uuid4

import pytest
import yaml
from fastapi.testclient import TestClient

from src.api.deps import get_settings
from src.api.main import app
from src.app_shell.config import ConfigurationError


def test_public_page_shows_enabled_links_in_order(client, owner, add_link):
    add_link("GitHub")
    add_link("Hidden", enabled=False)
    add_link("YouTube")

    response = client.get("/api/public/jane")

    assert response.status_code == 200
    data = response.json()
    assert data["owner"]["display_name"] == "Jane"
    assert [link["title"] for link in data["links"]] == ["GitHub", "YouTube"]


def test_public_page_search(client, owner, add_link):
    add_link("GitHub")
    add_link("YouTube")

    data = client.get("/api/public/jane", params={"q": "  git "}).json()

    assert [link["title"] for link in data["links"]] == ["GitHub"]


def test_unknown_slug(client):
    assert client.get("/api/public/nobody").status_code == 404


def test_click_is_counted_once(client, owner, add_link):
    link = add_link("A")

    assert client.post(f"/api/public/links/{link['id']}/click").status_code == 204

    stored = client.get(f"/api/admin/owners/{owner['id']}/links/{link['id']}").json()
    assert stored["click_count"] == 1


def test_click_on_unknown_link_still_succeeds(client):
    assert client.post(f"/api/public/links/{uuid4()}/click").status_code == 204


def test_startup_fails_on_missing_required_env(tmp_path, monkeypatch):
    root = Path(__file__).parents[2]
    raw = yaml.safe_load((root / "rules.yaml").read_text())
    raw["ops"]["required_env"] = ["LINKHUB_DOES_NOT_EXIST"]
    rules_path = tmp_path / "rules.yaml"
    rules_path.write_text(yaml.safe_dump(raw))
    monkeypatch.delenv("LINKHUB_DOES_NOT_EXIST", raising=False)
    monkeypatch.setenv("LINKHUB_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("LINKHUB_RULES", str(rules_path))
    get_settings.cache_clear()

    with pytest.raises(ConfigurationError):
        with TestClient(app):
            pass
    get_settings.cache_clear()


def test_notepad_round_trip(client, owner):
    assert client.get("/api/public/jane/notepad").json()["content"] == ""

    saved = client.put("/api/public/jane/notepad", json={"content": "shared note"})
    assert saved.status_code == 200
    assert client.get("/api/public/jane/notepad").json()["content"] == "shared note"

    assert client.delete("/api/public/jane/notepad").status_code == 204
    assert client.get("/api/public/jane/notepad").json()["content"] == ""


def test_notepad_too_long(client, owner):
    response = client.put("/api/public/jane/notepad", json={"content": "x" * 5001})

    assert response.status_code == 400
    assert response.json()["detail"][0]["code"] == "content_too_long"


def test_notepad_unknown_slug(client):
    assert client.get("/api/public/nobody/notepad").status_code == 404
