"""
Tests for the links shell layer: errors become output models, never exceptions.
"""

from uuid import uuid4

import pytest

from src.components.links import (
    CreateLinkInput,
    DeleteLinkInput,
    GetLinkInput,
    LinkService,
    ListLinksInput,
    ReorderLinksInput,
    ToggleLinkInput,
    UpdateLinkInput,
    run_create,
    run_delete,
    run_get,
    run_list,
    run_reorder,
    run_toggle,
    run_update,
)
from src.domain.entities import Owner, PredefinedIcon
from tests.fakes import MockLinkRepo, MockOwnerRepo

GLOBE = PredefinedIcon(name="globe")


@pytest.fixture
def owner():
    return Owner(slug="jane", display_name="Jane")


@pytest.fixture
def repo():
    return MockLinkRepo()


@pytest.fixture
def service(repo, owner):
    return LinkService(repo=repo, owners=MockOwnerRepo(owner))


def _add(service, owner, title):
    result = run_create(
        CreateLinkInput(owner_id=owner.id, title=title, url=f"https://{title.lower()}.com", icon=GLOBE),
        service,
    )
    assert result.success
    return result.link


def test_run_create_success(service, owner):
    link = _add(service, owner, "GitHub")

    assert link.title == "GitHub"
    assert link.order == 0


def test_run_create_invalid_url(service, owner):
    result = run_create(
        CreateLinkInput(owner_id=owner.id, title="My Site", url="ftp://example.com", icon=GLOBE),
        service,
    )

    assert result.success is False
    assert result.link is None
    assert result.errors[0].code == "url_invalid"


def test_run_create_unknown_owner(service):
    result = run_create(
        CreateLinkInput(owner_id=uuid4(), title="A", url="https://a.com", icon=GLOBE), service
    )

    assert result.errors[0].code == "owner_not_found"


def test_run_update_and_toggle(service, owner):
    link = _add(service, owner, "A")

    updated = run_update(UpdateLinkInput(link_id=link.id, title="B"), service)
    toggled = run_toggle(ToggleLinkInput(link_id=link.id, enabled=False), service)

    assert updated.link.title == "B"
    assert toggled.link.enabled is False
    assert toggled.link.title == "B"


def test_run_get_not_found(service):
    result = run_get(GetLinkInput(link_id=uuid4()), service)

    assert result.success is False
    assert result.errors[0].code == "link_not_found"


def test_run_delete(service, owner):
    link = _add(service, owner, "A")

    assert run_delete(DeleteLinkInput(link_id=link.id), service).success
    assert run_delete(DeleteLinkInput(link_id=link.id), service).errors[0].code == "link_not_found"


def test_run_list_visible_and_search(service, owner):
    github = _add(service, owner, "GitHub")
    _add(service, owner, "GitLab")
    _add(service, owner, "YouTube")
    run_toggle(ToggleLinkInput(link_id=github.id, enabled=False), service)

    everything = run_list(ListLinksInput(owner_id=owner.id), service)
    visible_git = run_list(ListLinksInput(owner_id=owner.id, visible_only=True, query="git"), service)

    assert everything.total == 3
    assert [link.title for link in visible_git.links] == ["GitLab"]


def test_run_list_unknown_owner(service):
    result = run_list(ListLinksInput(owner_id=uuid4()), service)

    assert result.success is False
    assert result.total == 0


def test_run_reorder_failure(service, repo, owner):
    a = _add(service, owner, "A")
    b = _add(service, owner, "B")
    repo.failing_ids = {b.id}

    result = run_reorder(ReorderLinksInput(owner_id=owner.id, link_ids=(b.id, a.id)), service)

    assert result.success is False
    assert result.errors[0].code == "reorder_failed"


def test_run_reorder_with_unreachable_store(service, repo, owner):
    a = _add(service, owner, "A")
    repo.fail_everything = True

    result = run_reorder(ReorderLinksInput(owner_id=owner.id, link_ids=(a.id,)), service)

    assert result.errors[0].code == "reorder_failed"
    assert "connection refused" in result.errors[0].message
