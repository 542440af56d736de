"""
Unit tests for AnalyticsService.

Recording never raises; summaries read straight from the stores.
"""

from datetime import UTC, datetime
from uuid import uuid4

import pytest

from src.adapters.clock import FixedClock
from src.components.analytics import AnalyticsService
from src.components.links import LinkService
from src.domain.entities import Owner, PredefinedIcon
from tests.fakes import CountingLinkRepo, MockEventRepo, MockOwnerRepo


@pytest.fixture
def owner():
    return Owner(slug="jane", display_name="Jane")


@pytest.fixture
def links():
    return CountingLinkRepo()


@pytest.fixture
def events():
    return MockEventRepo()


@pytest.fixture
def clock():
    return FixedClock(datetime(2025, 1, 31, 12, 0, tzinfo=UTC))


@pytest.fixture
def service(events, links, clock):
    return AnalyticsService(events, links, clock, recent_events_limit=2)


@pytest.fixture
def link_service(links, owner):
    return LinkService(links, MockOwnerRepo(owner))


def test_record_page_view(service, events, owner, clock):
    service.record_page_view(owner.id)

    assert len(events.events) == 1
    assert events.events[0].event_type == "page_view"
    assert events.events[0].created_at == clock.now_utc()


def test_page_view_failure_is_swallowed(service, events, owner):
    events.fail = True

    service.record_page_view(owner.id)

    assert events.events == []


def test_click_increments_exactly_once(service, link_service, links, events, owner):
    link = link_service.create(owner.id, "A", "https://a.com", PredefinedIcon(name="globe"))

    assert service.record_link_click(link.id) is True
    assert service.record_link_click(link.id) is True

    assert links.links[link.id].click_count == 2
    assert events.count(owner.id, "link_click") == 2
    assert events.events[0].link_id == link.id


def test_click_on_unknown_link(service, events):
    assert service.record_link_click(uuid4()) is False
    assert events.events == []


def test_click_counted_even_if_event_store_fails(service, link_service, links, events, owner):
    link = link_service.create(owner.id, "A", "https://a.com", PredefinedIcon(name="globe"))
    events.fail = True

    assert service.record_link_click(link.id) is True
    assert links.links[link.id].click_count == 1


def test_click_with_broken_link_store(service, link_service, links, owner):
    link = link_service.create(owner.id, "A", "https://a.com", PredefinedIcon(name="globe"))
    links.fail_everything = True

    assert service.record_link_click(link.id) is False


def test_summary(service, link_service, owner):
    icon = PredefinedIcon(name="globe")
    a = link_service.create(owner.id, "A", "https://a.com", icon)
    b = link_service.create(owner.id, "B", "https://b.com", icon)
    service.record_page_view(owner.id)
    service.record_page_view(owner.id)
    service.record_link_click(b.id)

    summary = service.get_summary(owner.id)

    assert summary.total_views == 2
    assert summary.total_clicks == 1
    assert [(s.link_id, s.click_count) for s in summary.link_stats] == [(a.id, 0), (b.id, 1)]


def test_recent_events_newest_first(service, owner, clock):
    for _ in range(3):
        service.record_page_view(owner.id)
        clock.advance(60)

    recent = service.get_recent_events(owner.id)

    assert len(recent) == 2
    assert recent[0].created_at > recent[1].created_at
