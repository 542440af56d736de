"""
Links component - ordered link collection management.

Shell Layer - runs the service and converts errors into output models.
"""

from __future__ import annotations

from src.domain.errors import (
    InvalidInput,
    LinkHubError,
    NotFound,
    PersistenceFailure,
    ReorderFailed,
)

from ._impl import LinkService
from ._search import filter_by_title
from .models import (
    CreateLinkInput,
    DeleteLinkInput,
    GetLinkInput,
    LinkListOutput,
    LinkOperationOutput,
    LinkValidationError,
    ListLinksInput,
    ReorderLinksInput,
    ToggleLinkInput,
    UpdateLinkInput,
)


def errors_from(exc: LinkHubError) -> tuple[LinkValidationError, ...]:
    """Describe a service error as validation errors for the caller."""
    if isinstance(exc, InvalidInput):
        return tuple(exc.errors)
    if isinstance(exc, NotFound):
        code = f"{exc.entity.lower()}_not_found"
        return (LinkValidationError(code=code, message=str(exc)),)
    if isinstance(exc, ReorderFailed):
        return (LinkValidationError(code="reorder_failed", message=str(exc)),)
    if isinstance(exc, PersistenceFailure):
        return (LinkValidationError(code="persistence_failure", message=str(exc)),)
    return (LinkValidationError(code="error", message=str(exc)),)


def _failed(exc: LinkHubError) -> LinkOperationOutput:
    return LinkOperationOutput(link=None, errors=errors_from(exc), success=False)


def run_create(
    input_data: CreateLinkInput,
    service: LinkService,
) -> LinkOperationOutput:
    """Create a new link at the end of the owner's collection."""
    try:
        link = service.create(
            owner_id=input_data.owner_id,
            title=input_data.title,
            url=input_data.url,
            icon=input_data.icon,
        )
    except LinkHubError as exc:
        return _failed(exc)

    return LinkOperationOutput(link=link, errors=(), success=True)


def run_update(
    input_data: UpdateLinkInput,
    service: LinkService,
) -> LinkOperationOutput:
    """Update an existing link."""
    try:
        link = service.update(
            input_data.link_id,
            title=input_data.title,
            url=input_data.url,
            icon=input_data.icon,
            enabled=input_data.enabled,
        )
    except LinkHubError as exc:
        return _failed(exc)

    return LinkOperationOutput(link=link, errors=(), success=True)


def run_toggle(
    input_data: ToggleLinkInput,
    service: LinkService,
) -> LinkOperationOutput:
    """Enable or disable a link."""
    try:
        link = service.toggle(input_data.link_id, input_data.enabled)
    except LinkHubError as exc:
        return _failed(exc)

    return LinkOperationOutput(link=link, errors=(), success=True)


def run_delete(
    input_data: DeleteLinkInput,
    service: LinkService,
) -> LinkOperationOutput:
    """Delete a link."""
    try:
        service.delete(input_data.link_id)
    except LinkHubError as exc:
        return _failed(exc)

    return LinkOperationOutput(link=None, errors=(), success=True)


def run_get(
    input_data: GetLinkInput,
    service: LinkService,
) -> LinkOperationOutput:
    """Get a link by ID."""
    try:
        link = service.get(input_data.link_id)
    except LinkHubError as exc:
        return _failed(exc)

    return LinkOperationOutput(link=link, errors=(), success=True)


def run_list(
    input_data: ListLinksInput,
    service: LinkService,
) -> LinkListOutput:
    """List an owner's links, optionally only the enabled ones, optionally searched."""
    try:
        if input_data.visible_only:
            links = service.list_visible(input_data.owner_id)
        else:
            links = service.list(input_data.owner_id)
    except LinkHubError as exc:
        return LinkListOutput(links=(), total=0, errors=errors_from(exc), success=False)

    found = tuple(filter_by_title(links, input_data.query))
    return LinkListOutput(links=found, total=len(found))


def run_reorder(
    input_data: ReorderLinksInput,
    service: LinkService,
) -> LinkOperationOutput:
    """Persist a new display order."""
    try:
        service.reorder(input_data.owner_id, input_data.link_ids)
    except LinkHubError as exc:
        return _failed(exc)

    return LinkOperationOutput(link=None, errors=(), success=True)
