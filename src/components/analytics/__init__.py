"""
Analytics component - page views and link clicks.
"""

from ._impl import AnalyticsService
from .models import AnalyticsSummary, LinkStats, RecentEvent
from .ports import AnalyticsRepoPort, ClickCounterPort

__all__ = [
    "AnalyticsService",
    "AnalyticsSummary",
    "LinkStats",
    "RecentEvent",
    "AnalyticsRepoPort",
    "ClickCounterPort",
]
