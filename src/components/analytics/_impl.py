"""
AnalyticsService - page view and link click counters.

Recording is fire-and-forget: a failed write is logged and the visitor's
request carries on. Reading the summary propagates errors.
"""

from __future__ import annotations

import logging
from uuid import UUID

from src.domain.entities import AnalyticsEvent
from src.domain.errors import LinkHubError
from src.ports.clock import ClockPort

from .models import AnalyticsSummary, LinkStats, RecentEvent
from .ports import AnalyticsRepoPort, ClickCounterPort

logger = logging.getLogger(__name__)

RECENT_EVENTS_LIMIT = 100


class AnalyticsService:
    def __init__(
        self,
        events: AnalyticsRepoPort,
        links: ClickCounterPort,
        clock: ClockPort,
        recent_events_limit: int = RECENT_EVENTS_LIMIT,
    ) -> None:
        self._events = events
        self._links = links
        self._clock = clock
        self._recent_events_limit = recent_events_limit

    def record_page_view(self, owner_id: UUID) -> None:
        try:
            self._events.store(
                AnalyticsEvent(
                    owner_id=owner_id,
                    event_type="page_view",
                    created_at=self._clock.now_utc(),
                )
            )
        except LinkHubError as e:
            logger.warning("Failed to record page view for %s: %s", owner_id, e)

    def record_link_click(self, link_id: UUID) -> bool:
        """
        Count one click: an event row plus exactly one increment of the link's
        counter. Returns False if the link is unknown or nothing was counted.
        """
        try:
            link = self._links.get(link_id)
        except LinkHubError as e:
            logger.warning("Failed to look up clicked link %s: %s", link_id, e)
            return False
        if link is None:
            logger.info("Ignoring click on unknown link %s", link_id)
            return False

        try:
            self._events.store(
                AnalyticsEvent(
                    owner_id=link.owner_id,
                    link_id=link_id,
                    event_type="link_click",
                    created_at=self._clock.now_utc(),
                )
            )
        except LinkHubError as e:
            logger.warning("Failed to record link click event for %s: %s", link_id, e)

        try:
            return self._links.increment_clicks(link_id)
        except LinkHubError as e:
            logger.warning("Failed to increment click count for %s: %s", link_id, e)
            return False

    def get_summary(self, owner_id: UUID) -> AnalyticsSummary:
        links = self._links.fetch_all(owner_id)
        return AnalyticsSummary(
            total_views=self._events.count(owner_id, "page_view"),
            total_clicks=self._events.count(owner_id, "link_click"),
            link_stats=tuple(
                LinkStats(link_id=link.id, title=link.title, click_count=link.click_count)
                for link in sorted(links, key=lambda link: link.order)
            ),
        )

    def get_recent_events(self, owner_id: UUID, limit: int | None = None) -> list[RecentEvent]:
        events = self._events.list_recent(owner_id, limit or self._recent_events_limit)
        return [
            RecentEvent(event_type=e.event_type, link_id=e.link_id, created_at=e.created_at)
            for e in events
        ]
