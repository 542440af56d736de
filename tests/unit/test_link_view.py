"""
Unit tests for LinkCollectionView (optimistic local state).
"""

from uuid import uuid4

import pytest

from src.components.links import LinkCollectionView, LinkService
from src.domain.entities import Owner, PredefinedIcon
from src.domain.errors import InvalidInput, NotFound, PersistenceFailure, ReorderFailed
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


@pytest.fixture
def view(service, owner):
    for title in ("GitHub", "YouTube", "Blog"):
        service.create(owner.id, title, f"https://{title.lower()}.com", GLOBE)
    view = LinkCollectionView(service, owner.id)
    view.load()
    return view


def test_load_reads_store(view):
    assert [link.title for link in view.items] == ["GitHub", "YouTube", "Blog"]
    assert view.stale is False


def test_add_appends_without_refetch(view, repo):
    repo.calls.clear()

    link = view.add("Shop", "https://shop.example.com", GLOBE)

    assert view.items[-1] == link
    assert "fetch_all" not in repo.calls


def test_toggle_updates_visible_items(view):
    youtube = view.items[1]

    view.toggle(youtube.id, False)

    assert [link.title for link in view.visible_items] == ["GitHub", "Blog"]
    assert len(view.items) == 3


def test_search_filters_local_items(view):
    assert [link.title for link in view.search("git")] == ["GitHub"]
    assert len(view.search("")) == 3


def test_edit_invalid_input_restores_local_item(view):
    github = view.items[0]

    with pytest.raises(InvalidInput):
        view.edit(github.id, url="ftp://github.com")

    assert view.items[0] == github
    assert view.stale is False


def test_edit_failure_keeps_optimistic_state(view, repo):
    github = view.items[0]
    repo.fail_everything = True

    with pytest.raises(PersistenceFailure):
        view.edit(github.id, title="Code")

    assert view.items[0].title == "Code"
    assert view.stale is True


def test_remove_is_applied_locally_first(view, repo):
    blog = view.items[2]
    repo.fail_everything = True

    with pytest.raises(PersistenceFailure):
        view.remove(blog.id)

    assert blog.id not in {link.id for link in view.items}
    assert view.stale is True


def test_remove_unknown_link(view):
    with pytest.raises(NotFound):
        view.remove(uuid4())


def test_move_persists_full_order(view, service, owner):
    blog = view.items[2]

    view.move(blog.id, 0)

    assert [link.title for link in view.items] == ["Blog", "GitHub", "YouTube"]
    assert [link.order for link in view.items] == [0, 1, 2]
    assert [link.title for link in service.list(owner.id)] == ["Blog", "GitHub", "YouTube"]


def test_failed_reorder_reloads_authoritative_list(view, repo):
    github, youtube, blog = view.items
    repo.failing_ids = {github.id}

    with pytest.raises(ReorderFailed):
        view.reorder([blog.id, youtube.id, github.id])

    # Local state now mirrors the store, including the partial writes.
    stored = sorted(repo.links.values(), key=lambda link: link.order)
    assert [link.id for link in view.items] == [link.id for link in stored]
    assert view.stale is False


def test_failed_reorder_and_failed_reload_marks_stale(view, repo):
    github, youtube, blog = view.items
    repo.fail_everything = True

    with pytest.raises(ReorderFailed):
        view.reorder([blog.id, youtube.id, github.id])

    assert view.stale is True


def test_reorder_with_partial_ids_keeps_the_rest_after(view):
    github, youtube, blog = view.items

    view.reorder([blog.id, github.id])

    assert [link.id for link in view.items] == [blog.id, github.id, youtube.id]
