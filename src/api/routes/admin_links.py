"""Admin routes for managing an owner's links."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response

from src.api.deps import get_analytics_service, get_clock, get_link_service
from src.api.schemas import (
    AnalyticsSummaryResponse,
    LinkCreateRequest,
    LinkListResponse,
    LinkReorderRequest,
    LinkResponse,
    LinkStatsResponse,
    LinkToggleRequest,
    LinkUpdateRequest,
    RecentEventResponse,
    raise_for_errors,
)
from src.components.analytics import AnalyticsService
from src.components.links import (
    CreateLinkInput,
    DeleteLinkInput,
    GetLinkInput,
    LinkService,
    ListLinksInput,
    ReorderLinksInput,
    ToggleLinkInput,
    UpdateLinkInput,
    errors_from,
    export_filename,
    export_json,
    export_owner,
    run_create,
    run_delete,
    run_get,
    run_list,
    run_reorder,
    run_toggle,
    run_update,
)
from src.domain.entities import LinkItem
from src.domain.errors import LinkHubError, NotFound
from src.ports.clock import ClockPort

router = APIRouter()


def _owned_link(owner_id: UUID, link_id: UUID, service: LinkService) -> LinkItem:
    """Fetch a link and make sure it belongs to `owner_id` (404 otherwise)."""
    result = run_get(GetLinkInput(link_id=link_id), service)
    if not result.success:
        raise_for_errors(result.errors)
    link = result.link
    assert link is not None
    if link.owner_id != owner_id:
        raise_for_errors(errors_from(NotFound("Link", link_id)))
    return link


# --- Routes ---


@router.get("/{owner_id}/links", response_model=LinkListResponse)
def list_links(
    owner_id: UUID,
    q: str = "",
    service: LinkService = Depends(get_link_service),
) -> LinkListResponse:
    """List all of the owner's links, disabled ones included, optionally searched by title."""
    result = run_list(ListLinksInput(owner_id=owner_id, query=q), service)
    if not result.success:
        raise_for_errors(result.errors)
    return LinkListResponse(
        items=[LinkResponse.from_link(link) for link in result.links],
        total=result.total,
    )


@router.post("/{owner_id}/links", response_model=LinkResponse, status_code=201)
def create_link(
    owner_id: UUID,
    data: LinkCreateRequest,
    service: LinkService = Depends(get_link_service),
) -> LinkResponse:
    """Append a new link to the owner's collection."""
    input_data = CreateLinkInput(owner_id=owner_id, title=data.title, url=data.url, icon=data.icon)
    result = run_create(input_data, service)

    if not result.success:
        raise_for_errors(result.errors)

    link = result.link
    assert link is not None  # Success guarantees link is not None
    return LinkResponse.from_link(link)


@router.put("/{owner_id}/links/order", status_code=204)
def reorder_links(
    owner_id: UUID,
    data: LinkReorderRequest,
    service: LinkService = Depends(get_link_service),
) -> None:
    """Persist a new display order. On 409 the client must re-fetch the list."""
    result = run_reorder(ReorderLinksInput(owner_id=owner_id, link_ids=tuple(data.link_ids)), service)
    if not result.success:
        raise_for_errors(result.errors)


@router.get("/{owner_id}/links/export")
def export_links(
    owner_id: UUID,
    service: LinkService = Depends(get_link_service),
    clock: ClockPort = Depends(get_clock),
) -> Response:
    """Download a JSON backup of the profile and every link."""
    try:
        data = export_owner(service, owner_id, clock)
    except LinkHubError as exc:
        raise_for_errors(errors_from(exc))

    filename = export_filename(data.owner.slug, data.exported_at)
    return Response(
        content=export_json(data),
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/{owner_id}/analytics", response_model=AnalyticsSummaryResponse)
def get_analytics(
    owner_id: UUID,
    links: LinkService = Depends(get_link_service),
    analytics: AnalyticsService = Depends(get_analytics_service),
) -> AnalyticsSummaryResponse:
    """Page views, total clicks and per-link click counts."""
    try:
        links.get_owner(owner_id)
        summary = analytics.get_summary(owner_id)
    except LinkHubError as exc:
        raise_for_errors(errors_from(exc))

    return AnalyticsSummaryResponse(
        total_views=summary.total_views,
        total_clicks=summary.total_clicks,
        link_stats=[
            LinkStatsResponse(link_id=s.link_id, title=s.title, click_count=s.click_count)
            for s in summary.link_stats
        ],
    )


@router.get("/{owner_id}/analytics/events", response_model=list[RecentEventResponse])
def get_recent_events(
    owner_id: UUID,
    limit: int | None = Query(None, gt=0, le=1000),
    links: LinkService = Depends(get_link_service),
    analytics: AnalyticsService = Depends(get_analytics_service),
) -> list[RecentEventResponse]:
    """Latest page views and clicks, newest first."""
    try:
        links.get_owner(owner_id)
        events = analytics.get_recent_events(owner_id, limit)
    except LinkHubError as exc:
        raise_for_errors(errors_from(exc))

    return [
        RecentEventResponse(event_type=e.event_type, link_id=e.link_id, created_at=e.created_at)
        for e in events
    ]


@router.get("/{owner_id}/links/{link_id}", response_model=LinkResponse)
def get_link(
    owner_id: UUID,
    link_id: UUID,
    service: LinkService = Depends(get_link_service),
) -> LinkResponse:
    """Get a link by ID."""
    return LinkResponse.from_link(_owned_link(owner_id, link_id, service))


@router.put("/{owner_id}/links/{link_id}", response_model=LinkResponse)
def update_link(
    owner_id: UUID,
    link_id: UUID,
    data: LinkUpdateRequest,
    service: LinkService = Depends(get_link_service),
) -> LinkResponse:
    """Update any of title, url, icon and enabled."""
    _owned_link(owner_id, link_id, service)
    input_data = UpdateLinkInput(
        link_id=link_id,
        title=data.title,
        url=data.url,
        icon=data.icon,
        enabled=data.enabled,
    )
    result = run_update(input_data, service)

    if not result.success:
        raise_for_errors(result.errors)

    link = result.link
    assert link is not None
    return LinkResponse.from_link(link)


@router.patch("/{owner_id}/links/{link_id}/enabled", response_model=LinkResponse)
def toggle_link(
    owner_id: UUID,
    link_id: UUID,
    data: LinkToggleRequest,
    service: LinkService = Depends(get_link_service),
) -> LinkResponse:
    """Show or hide a link on the public page."""
    _owned_link(owner_id, link_id, service)
    result = run_toggle(ToggleLinkInput(link_id=link_id, enabled=data.enabled), service)

    if not result.success:
        raise_for_errors(result.errors)

    link = result.link
    assert link is not None
    return LinkResponse.from_link(link)


@router.delete("/{owner_id}/links/{link_id}", status_code=204)
def delete_link(
    owner_id: UUID,
    link_id: UUID,
    service: LinkService = Depends(get_link_service),
) -> None:
    """Delete a link."""
    _owned_link(owner_id, link_id, service)
    result = run_delete(DeleteLinkInput(link_id=link_id), service)

    if not result.success:
        raise_for_errors(result.errors)
