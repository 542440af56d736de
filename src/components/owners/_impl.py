"""
OwnerService - profiles that own link collections.

Creation, lookup and profile edits live here; profile styling is handled elsewhere.
"""

from __future__ import annotations

import logging
import re
from uuid import UUID

from src.domain.entities import Owner, utc_now
from src.domain.errors import InvalidInput, NotFound, ValidationError

from .ports import OwnerRepoPort

logger = logging.getLogger(__name__)

SLUG_PATTERN = r"^[a-z0-9-]+$"
MIN_SLUG_LENGTH = 3
MAX_SLUG_LENGTH = 50
MAX_BIO_LENGTH = 150


def validate_owner_data(
    slug: str | None = None,
    display_name: str | None = None,
    bio: str | None = None,
    *,
    min_slug_length: int = MIN_SLUG_LENGTH,
    max_slug_length: int = MAX_SLUG_LENGTH,
    slug_pattern: str = SLUG_PATTERN,
    max_bio_length: int = MAX_BIO_LENGTH,
) -> list[ValidationError]:
    errors: list[ValidationError] = []

    if slug is not None:
        trimmed = slug.strip()
        if not trimmed:
            errors.append(ValidationError("slug_required", "Slug is required", "slug"))
        elif not min_slug_length <= len(trimmed) <= max_slug_length:
            errors.append(
                ValidationError(
                    "slug_length",
                    f"Slug must be between {min_slug_length} and {max_slug_length} characters",
                    "slug",
                )
            )
        elif not re.match(slug_pattern, trimmed):
            errors.append(
                ValidationError(
                    "slug_invalid",
                    "Slug can only contain lowercase letters, numbers, and hyphens",
                    "slug",
                )
            )

    if display_name is not None and not display_name.strip():
        errors.append(
            ValidationError("display_name_required", "Display name is required", "display_name")
        )

    if bio is not None and len(bio) > max_bio_length:
        errors.append(
            ValidationError("bio_too_long", f"Bio must be {max_bio_length} characters or less", "bio")
        )

    return errors


class OwnerService:
    def __init__(
        self,
        repo: OwnerRepoPort,
        *,
        min_slug_length: int = MIN_SLUG_LENGTH,
        max_slug_length: int = MAX_SLUG_LENGTH,
        slug_pattern: str = SLUG_PATTERN,
        max_bio_length: int = MAX_BIO_LENGTH,
    ) -> None:
        self._repo = repo
        self._limits = {
            "min_slug_length": min_slug_length,
            "max_slug_length": max_slug_length,
            "slug_pattern": slug_pattern,
            "max_bio_length": max_bio_length,
        }

    def create(self, slug: str, display_name: str, bio: str | None = None) -> Owner:
        """Create a profile. Slugs are unique."""
        errors = validate_owner_data(slug=slug, display_name=display_name, bio=bio, **self._limits)
        if errors:
            raise InvalidInput(errors)

        slug = slug.strip()
        if self._repo.get_by_slug(slug) is not None:
            raise InvalidInput(
                [ValidationError("slug_taken", "This slug is already taken", "slug")]
            )

        owner = self._repo.save(Owner(slug=slug, display_name=display_name.strip(), bio=bio))
        logger.info("Created owner %s (%s)", owner.id, owner.slug)
        return owner

    def update(
        self,
        owner_id: UUID,
        *,
        slug: str | None = None,
        display_name: str | None = None,
        bio: str | None = None,
    ) -> Owner:
        """
        Change any of slug, display name and bio. `None` leaves a field as it
        is. The new slug may equal the owner's current one but no one else's.
        """
        errors = validate_owner_data(slug=slug, display_name=display_name, bio=bio, **self._limits)
        if errors:
            raise InvalidInput(errors)

        owner = self.get(owner_id)
        changes: dict[str, object] = {}
        if slug is not None:
            slug = slug.strip()
            holder = self._repo.get_by_slug(slug)
            if holder is not None and holder.id != owner_id:
                raise InvalidInput(
                    [ValidationError("slug_taken", "This slug is already taken", "slug")]
                )
            changes["slug"] = slug
        if display_name is not None:
            changes["display_name"] = display_name.strip()
        if bio is not None:
            changes["bio"] = bio

        if not changes:
            return owner
        updated = self._repo.save(owner.model_copy(update={**changes, "updated_at": utc_now()}))
        logger.info("Updated owner %s (%s)", updated.id, ", ".join(sorted(changes)))
        return updated

    def get(self, owner_id: UUID) -> Owner:
        owner = self._repo.get_by_id(owner_id)
        if owner is None:
            raise NotFound("Owner", owner_id)
        return owner

    def get_by_slug(self, slug: str) -> Owner:
        owner = self._repo.get_by_slug(slug)
        if owner is None:
            raise NotFound("Owner", slug)
        return owner
