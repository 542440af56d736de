"""
Owner backup export: profile plus every link, serialised as JSON.
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from src.ports.clock import ClockPort

from ._impl import LinkService
from .models import ExportData


def export_owner(service: LinkService, owner_id: UUID, clock: ClockPort) -> ExportData:
    """Gather the owner and all links, disabled ones included, in display order."""
    owner = service.get_owner(owner_id)
    return ExportData(
        owner=owner,
        links=service.list(owner_id),
        exported_at=clock.now_utc(),
    )


def export_filename(slug: str, when: datetime) -> str:
    """e.g. ``jane-links-2025-01-31.json``"""
    return f"{slug}-links-{when.date().isoformat()}.json"


def export_json(data: ExportData) -> str:
    return data.model_dump_json(indent=2)
