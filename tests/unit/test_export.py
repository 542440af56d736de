import json
from datetime import UTC, datetime
from uuid import uuid4

import pytest

from src.adapters.clock import FixedClock
from src.components.links import LinkService, export_filename, export_json, export_owner
from src.domain.entities import CustomIcon, Owner, PredefinedIcon
from src.domain.errors import NotFound
from tests.fakes import MockLinkRepo, MockOwnerRepo


@pytest.fixture
def owner():
    return Owner(slug="jane", display_name="Jane")


@pytest.fixture
def service(owner):
    return LinkService(MockLinkRepo(), MockOwnerRepo(owner))


@pytest.fixture
def clock():
    return FixedClock(datetime(2025, 1, 31, 23, 59, tzinfo=UTC))


def test_export_filename():
    assert export_filename("jane", datetime(2025, 1, 31, 23, 59, tzinfo=UTC)) == (
        "jane-links-2025-01-31.json"
    )


def test_export_includes_disabled_links(service, owner, clock):
    a = service.create(owner.id, "A", "https://a.com", PredefinedIcon(name="globe"))
    b = service.create(owner.id, "B", "https://b.com", CustomIcon(url="https://cdn.b.com/i.png"))
    service.toggle(a.id, False)

    data = export_owner(service, owner.id, clock)
    payload = json.loads(export_json(data))

    assert payload["owner"]["slug"] == "jane"
    assert [link["id"] for link in payload["links"]] == [str(a.id), str(b.id)]
    assert payload["links"][0]["enabled"] is False
    assert payload["links"][1]["icon"] == {"kind": "custom", "url": "https://cdn.b.com/i.png"}
    assert payload["exported_at"].startswith("2025-01-31T23:59")


def test_export_unknown_owner(service, clock):
    with pytest.raises(NotFound):
        export_owner(service, uuid4(), clock)
