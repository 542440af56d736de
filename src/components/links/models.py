"""
Links component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from src.domain.entities import CustomIcon, LinkItem, Owner, PredefinedIcon
from src.domain.errors import ValidationError as LinkValidationError

IconInput = PredefinedIcon | CustomIcon


# --- Input Models ---


@dataclass(frozen=True)
class CreateLinkInput:
    """Input for creating a link."""

    owner_id: UUID
    title: str
    url: str
    icon: IconInput


@dataclass(frozen=True)
class UpdateLinkInput:
    """Input for updating a link. `None` leaves a field unchanged."""

    link_id: UUID
    title: str | None = None
    url: str | None = None
    icon: IconInput | None = None
    enabled: bool | None = None


@dataclass(frozen=True)
class ToggleLinkInput:
    """Input for enabling or disabling a link."""

    link_id: UUID
    enabled: bool


@dataclass(frozen=True)
class DeleteLinkInput:
    """Input for deleting a link."""

    link_id: UUID


@dataclass(frozen=True)
class GetLinkInput:
    """Input for getting a link."""

    link_id: UUID


@dataclass(frozen=True)
class ListLinksInput:
    """Input for listing an owner's links."""

    owner_id: UUID
    visible_only: bool = False
    query: str = ""


@dataclass(frozen=True)
class ReorderLinksInput:
    """Input for reordering; `link_ids` is the complete collection in display order."""

    owner_id: UUID
    link_ids: tuple[UUID, ...]


# --- Output Models ---


@dataclass(frozen=True)
class LinkOperationOutput:
    """Output from link operation."""

    link: LinkItem | None
    errors: tuple[LinkValidationError, ...]
    success: bool


@dataclass(frozen=True)
class LinkListOutput:
    """Output from list operation."""

    links: tuple[LinkItem, ...]
    total: int
    errors: tuple[LinkValidationError, ...] = ()
    success: bool = True


class ExportData(BaseModel):
    """Full backup of an owner's profile and links, disabled links included."""

    owner: Owner
    links: list[LinkItem]
    exported_at: datetime


__all__ = [
    "CreateLinkInput",
    "DeleteLinkInput",
    "ExportData",
    "GetLinkInput",
    "IconInput",
    "LinkListOutput",
    "LinkOperationOutput",
    "LinkValidationError",
    "ListLinksInput",
    "ReorderLinksInput",
    "ToggleLinkInput",
    "UpdateLinkInput",
]
