"""
Analytics component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class LinkStats:
    """Click count for one link."""

    link_id: UUID
    title: str
    click_count: int


@dataclass(frozen=True)
class AnalyticsSummary:
    """Totals for one owner's page plus per-link counts in display order."""

    total_views: int
    total_clicks: int
    link_stats: tuple[LinkStats, ...]


@dataclass(frozen=True)
class RecentEvent:
    event_type: str
    link_id: UUID | None
    created_at: datetime
