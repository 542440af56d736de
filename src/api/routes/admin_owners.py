"""Admin routes for owner profiles."""

from uuid import UUID

from fastapi import APIRouter, Depends

from src.api.deps import get_owner_service
from src.api.schemas import (
    OwnerCreateRequest,
    OwnerResponse,
    OwnerUpdateRequest,
    raise_for_errors,
)
from src.components.links import errors_from
from src.components.owners import OwnerService
from src.domain.errors import LinkHubError

router = APIRouter()


@router.post("", response_model=OwnerResponse, status_code=201)
def create_owner(
    data: OwnerCreateRequest,
    service: OwnerService = Depends(get_owner_service),
) -> OwnerResponse:
    """Create a profile with a unique slug."""
    try:
        owner = service.create(slug=data.slug, display_name=data.display_name, bio=data.bio)
    except LinkHubError as exc:
        raise_for_errors(errors_from(exc))
    return OwnerResponse.from_owner(owner)


@router.get("/{owner_id}", response_model=OwnerResponse)
def get_owner(
    owner_id: UUID,
    service: OwnerService = Depends(get_owner_service),
) -> OwnerResponse:
    try:
        owner = service.get(owner_id)
    except LinkHubError as exc:
        raise_for_errors(errors_from(exc))
    return OwnerResponse.from_owner(owner)


@router.put("/{owner_id}", response_model=OwnerResponse)
def update_owner(
    owner_id: UUID,
    data: OwnerUpdateRequest,
    service: OwnerService = Depends(get_owner_service),
) -> OwnerResponse:
    """Edit slug, display name or bio. The slug must stay unique."""
    try:
        owner = service.update(
            owner_id, slug=data.slug, display_name=data.display_name, bio=data.bio
        )
    except LinkHubError as exc:
        raise_for_errors(errors_from(exc))
    return OwnerResponse.from_owner(owner)
