"""Public link page, click tracking and the shared notepad."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query

from src.api.deps import (
    get_analytics_service,
    get_link_service,
    get_notepad_service,
    get_owner_service,
)
from src.api.schemas import (
    NotepadResponse,
    NotepadSaveRequest,
    OwnerResponse,
    PublicLinkResponse,
    PublicPageResponse,
    raise_for_errors,
)
from src.components.analytics import AnalyticsService
from src.components.links import LinkService, ListLinksInput, errors_from, run_list
from src.components.notepad import NotepadService
from src.components.owners import OwnerService
from src.domain.errors import LinkHubError

router = APIRouter()


@router.get("/{slug}", response_model=PublicPageResponse)
def get_public_page(
    slug: str,
    q: str = Query("", description="Filter links by title"),
    owners: OwnerService = Depends(get_owner_service),
    links: LinkService = Depends(get_link_service),
    analytics: AnalyticsService = Depends(get_analytics_service),
) -> PublicPageResponse:
    """Profile and enabled links, in display order. Counts a page view."""
    try:
        owner = owners.get_by_slug(slug)
    except LinkHubError as exc:
        raise_for_errors(errors_from(exc))

    result = run_list(ListLinksInput(owner_id=owner.id, visible_only=True, query=q), links)
    if not result.success:
        raise_for_errors(result.errors)

    analytics.record_page_view(owner.id)

    return PublicPageResponse(
        owner=OwnerResponse.from_owner(owner),
        links=[
            PublicLinkResponse(id=link.id, title=link.title, url=link.url, icon=link.icon)
            for link in result.links
        ],
    )


@router.post("/links/{link_id}/click", status_code=204)
def record_click(
    link_id: UUID,
    analytics: AnalyticsService = Depends(get_analytics_service),
) -> None:
    """Count a click. Never fails the visitor's navigation."""
    analytics.record_link_click(link_id)


# --- Shared notepad ---


@router.get("/{slug}/notepad", response_model=NotepadResponse)
def get_notepad(
    slug: str,
    notepads: NotepadService = Depends(get_notepad_service),
) -> NotepadResponse:
    try:
        notepad = notepads.get(slug)
    except LinkHubError as exc:
        raise_for_errors(errors_from(exc))
    return NotepadResponse(content=notepad.content, updated_at=notepad.updated_at)


@router.put("/{slug}/notepad", response_model=NotepadResponse)
def save_notepad(
    slug: str,
    data: NotepadSaveRequest,
    notepads: NotepadService = Depends(get_notepad_service),
) -> NotepadResponse:
    """Replace the note. Anyone viewing the page may write it."""
    try:
        notepad = notepads.save(slug, data.content)
    except LinkHubError as exc:
        raise_for_errors(errors_from(exc))
    return NotepadResponse(content=notepad.content, updated_at=notepad.updated_at)


@router.delete("/{slug}/notepad", status_code=204)
def clear_notepad(
    slug: str,
    notepads: NotepadService = Depends(get_notepad_service),
) -> None:
    try:
        notepads.clear(slug)
    except LinkHubError as exc:
        raise_for_errors(errors_from(exc))
