from __future__ import annotations

from dataclasses import dataclass

from src.adapters.clock import SystemClock
from src.adapters.sqlite.repos import (
    SQLiteAnalyticsRepo,
    SQLiteLinkRepo,
    SQLiteNotepadRepo,
    SQLiteOwnerRepo,
)
from src.components.analytics import AnalyticsService
from src.components.links import LinkService
from src.components.notepad import NotepadService
from src.components.owners import OwnerService
from src.ports.clock import ClockPort
from src.rules.models import Rules


@dataclass
class ServiceContext:
    owner_service: OwnerService
    link_service: LinkService
    analytics_service: AnalyticsService
    notepad_service: NotepadService
    owner_repo: SQLiteOwnerRepo
    link_repo: SQLiteLinkRepo
    analytics_repo: SQLiteAnalyticsRepo
    notepad_repo: SQLiteNotepadRepo
    rules: Rules
    clock: ClockPort

    @classmethod
    def create(cls, db_path: str, rules: Rules, clock: ClockPort | None = None) -> ServiceContext:
        clock = clock or SystemClock()

        # Adapters
        owner_repo = SQLiteOwnerRepo(db_path)
        link_repo = SQLiteLinkRepo(db_path, clock=clock)
        analytics_repo = SQLiteAnalyticsRepo(db_path)
        notepad_repo = SQLiteNotepadRepo(db_path)

        # Services
        owner_service = OwnerService(
            owner_repo,
            min_slug_length=rules.owners.slug.min,
            max_slug_length=rules.owners.slug.max,
            slug_pattern=rules.owners.slug.pattern,
            max_bio_length=rules.owners.bio_max_length,
        )
        link_service = LinkService(
            link_repo,
            owner_repo,
            title_max_length=rules.links.title_max_length,
            icon_names=rules.links.icon_names(),
            url_pattern=rules.links.url_pattern,
        )
        analytics_service = AnalyticsService(
            analytics_repo,
            link_repo,
            clock,
            recent_events_limit=rules.analytics.recent_events_limit,
        )
        notepad_service = NotepadService(
            notepad_repo,
            owner_repo,
            clock,
            max_length=rules.notepad.content_max_length,
        )

        return cls(
            owner_service=owner_service,
            link_service=link_service,
            analytics_service=analytics_service,
            notepad_service=notepad_service,
            owner_repo=owner_repo,
            link_repo=link_repo,
            analytics_repo=analytics_repo,
            notepad_repo=notepad_repo,
            rules=rules,
            clock=clock,
        )
