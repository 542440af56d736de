from datetime import datetime
from typing import NoReturn
from uuid import UUID

from fastapi import HTTPException
from pydantic import BaseModel, Field

from src.domain.entities import Icon, LinkItem, Owner
from src.domain.errors import ValidationError


# --- Owners ---
class OwnerCreateRequest(BaseModel):
    slug: str
    display_name: str
    bio: str | None = None


class OwnerUpdateRequest(BaseModel):
    slug: str | None = None
    display_name: str | None = None
    bio: str | None = None


class OwnerResponse(BaseModel):
    id: UUID
    slug: str
    display_name: str
    bio: str | None
    created_at: datetime

    @classmethod
    def from_owner(cls, owner: Owner) -> "OwnerResponse":
        return cls(
            id=owner.id,
            slug=owner.slug,
            display_name=owner.display_name,
            bio=owner.bio,
            created_at=owner.created_at,
        )


# --- Links ---
class LinkCreateRequest(BaseModel):
    title: str
    url: str
    icon: Icon


class LinkUpdateRequest(BaseModel):
    title: str | None = None
    url: str | None = None
    icon: Icon | None = None
    enabled: bool | None = None


class LinkToggleRequest(BaseModel):
    enabled: bool


class LinkReorderRequest(BaseModel):
    link_ids: list[UUID] = Field(..., description="Every link id, in the new display order")


class LinkResponse(BaseModel):
    id: UUID
    owner_id: UUID
    title: str
    url: str
    icon: Icon
    order: int
    enabled: bool
    click_count: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_link(cls, link: LinkItem) -> "LinkResponse":
        return cls.model_validate(link.model_dump())


class LinkListResponse(BaseModel):
    items: list[LinkResponse]
    total: int


class PublicLinkResponse(BaseModel):
    id: UUID
    title: str
    url: str
    icon: Icon


class PublicPageResponse(BaseModel):
    owner: OwnerResponse
    links: list[PublicLinkResponse]


# --- Analytics ---
class LinkStatsResponse(BaseModel):
    link_id: UUID
    title: str
    click_count: int


class AnalyticsSummaryResponse(BaseModel):
    total_views: int
    total_clicks: int
    link_stats: list[LinkStatsResponse]


class RecentEventResponse(BaseModel):
    event_type: str
    link_id: UUID | None
    created_at: datetime


# --- Notepad ---
class NotepadSaveRequest(BaseModel):
    content: str


class NotepadResponse(BaseModel):
    content: str
    updated_at: datetime


# --- Errors ---
_STATUS_BY_CODE = {
    "reorder_failed": 409,
    "persistence_failure": 503,
}


def raise_for_errors(errors: tuple[ValidationError, ...] | list[ValidationError]) -> NoReturn:
    """Turn output errors into the matching HTTP error."""
    if not errors:
        raise HTTPException(status_code=500, detail="Operation failed")

    first = errors[0]
    if first.code.endswith("_not_found"):
        raise HTTPException(status_code=404, detail=first.message)
    if first.code in _STATUS_BY_CODE:
        raise HTTPException(status_code=_STATUS_BY_CODE[first.code], detail=first.message)
    raise HTTPException(
        status_code=400,
        detail=[{"code": err.code, "message": err.message, "field": err.field} for err in errors],
    )
