from datetime import UTC, datetime
from typing import Annotated, Literal
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

# --- Enums / Literals ---
IconType = Literal["predefined", "custom"]
EventType = Literal["page_view", "link_click"]


def utc_now() -> datetime:
    return datetime.now(UTC)

# --- Owners ---

class Owner(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    slug: str
    display_name: str
    bio: str | None = None
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

# --- Icons ---

class PredefinedIcon(BaseModel):
    kind: Literal["predefined"] = "predefined"
    name: str

class CustomIcon(BaseModel):
    kind: Literal["custom"] = "custom"
    url: str

Icon = Annotated[PredefinedIcon | CustomIcon, Field(discriminator="kind")]


def icon_from_parts(icon_type: IconType, value: str) -> PredefinedIcon | CustomIcon:
    """Build an icon from its stored (type, value) pair."""
    if icon_type == "custom":
        return CustomIcon(url=value)
    return PredefinedIcon(name=value)


def icon_to_parts(icon: PredefinedIcon | CustomIcon) -> tuple[IconType, str]:
    if isinstance(icon, CustomIcon):
        return "custom", icon.url
    return "predefined", icon.name

# --- Links ---

class LinkItem(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    owner_id: UUID
    title: str
    url: str
    icon: Icon
    order: int = 0
    enabled: bool = True
    click_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

class LinkDraft(BaseModel):
    """A link that has not been stored yet; the repository assigns its id."""

    owner_id: UUID
    title: str
    url: str
    icon: Icon
    order: int

# --- Notepad ---

class Notepad(BaseModel):
    """Shared scratch-pad text attached to one owner's page."""

    owner_id: UUID
    content: str = ""
    updated_at: datetime = Field(default_factory=utc_now)

# --- Analytics ---

class AnalyticsEvent(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    owner_id: UUID
    link_id: UUID | None = None
    event_type: EventType
    created_at: datetime = Field(default_factory=utc_now)

class PatchResult(BaseModel):
    """Outcome of one write inside a batch; `applied` is False for foreign ids."""

    link_id: UUID
    applied: bool
    error: str | None = None
