import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends

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
from src.rules.loader import load_rules
from src.rules.models import Rules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.data_dir = Path(os.environ.get("LINKHUB_DATA_DIR", "./data"))
        self.db_path = str(self.data_dir / "linkhub.db")
        self.rules_path = Path(os.environ.get("LINKHUB_RULES", str(self.base_dir / "rules.yaml")))
        self.migrations_dir = Path(
            os.environ.get("LINKHUB_MIGRATIONS", str(self.base_dir / "migrations"))
        )
        origins = os.environ.get("LINKHUB_CORS_ORIGINS", "http://localhost:3000")
        self.cors_origins = [o.strip() for o in origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def _rules_at(path: Path) -> Rules:
    return load_rules(path)


def get_rules(settings: Settings = Depends(get_settings)) -> Rules:
    return _rules_at(settings.rules_path)


def get_clock() -> ClockPort:
    return SystemClock()


# --- Repos ---
def get_owner_repo(settings: Settings = Depends(get_settings)) -> SQLiteOwnerRepo:
    return SQLiteOwnerRepo(settings.db_path)


def get_link_repo(
    settings: Settings = Depends(get_settings),
    clock: ClockPort = Depends(get_clock),
) -> SQLiteLinkRepo:
    return SQLiteLinkRepo(settings.db_path, clock=clock)


def get_analytics_repo(settings: Settings = Depends(get_settings)) -> SQLiteAnalyticsRepo:
    return SQLiteAnalyticsRepo(settings.db_path)


# --- Component Services ---
def get_owner_service(
    repo: SQLiteOwnerRepo = Depends(get_owner_repo),
    rules: Rules = Depends(get_rules),
) -> OwnerService:
    """Get owner component service."""
    return OwnerService(
        repo=repo,
        min_slug_length=rules.owners.slug.min,
        max_slug_length=rules.owners.slug.max,
        slug_pattern=rules.owners.slug.pattern,
        max_bio_length=rules.owners.bio_max_length,
    )


def get_link_service(
    repo: SQLiteLinkRepo = Depends(get_link_repo),
    owners: SQLiteOwnerRepo = Depends(get_owner_repo),
    rules: Rules = Depends(get_rules),
) -> LinkService:
    """Get link component service."""
    return LinkService(
        repo=repo,
        owners=owners,
        title_max_length=rules.links.title_max_length,
        icon_names=rules.links.icon_names(),
        url_pattern=rules.links.url_pattern,
    )


def get_analytics_service(
    events: SQLiteAnalyticsRepo = Depends(get_analytics_repo),
    links: SQLiteLinkRepo = Depends(get_link_repo),
    clock: ClockPort = Depends(get_clock),
    rules: Rules = Depends(get_rules),
) -> AnalyticsService:
    """Get analytics component service."""
    return AnalyticsService(
        events=events,
        links=links,
        clock=clock,
        recent_events_limit=rules.analytics.recent_events_limit,
    )


def get_notepad_repo(settings: Settings = Depends(get_settings)) -> SQLiteNotepadRepo:
    return SQLiteNotepadRepo(settings.db_path)


def get_notepad_service(
    repo: SQLiteNotepadRepo = Depends(get_notepad_repo),
    owners: SQLiteOwnerRepo = Depends(get_owner_repo),
    clock: ClockPort = Depends(get_clock),
    rules: Rules = Depends(get_rules),
) -> NotepadService:
    """Get notepad component service."""
    return NotepadService(
        repo=repo,
        owners=owners,
        clock=clock,
        max_length=rules.notepad.content_max_length,
    )
