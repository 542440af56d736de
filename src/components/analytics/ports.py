"""
Analytics component port definitions.
"""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.entities import AnalyticsEvent, LinkItem


class AnalyticsRepoPort(Protocol):
    """Event store for page views and link clicks."""

    def store(self, event: AnalyticsEvent) -> None:
        ...

    def count(self, owner_id: UUID, event_type: str) -> int:
        ...

    def list_recent(self, owner_id: UUID, limit: int = 100) -> list[AnalyticsEvent]:
        """Newest first."""
        ...


class ClickCounterPort(Protocol):
    """The per-link counter lives on the link record itself."""

    def get(self, link_id: UUID) -> LinkItem | None:
        ...

    def fetch_all(self, owner_id: UUID) -> list[LinkItem]:
        ...

    def increment_clicks(self, link_id: UUID) -> bool:
        ...
