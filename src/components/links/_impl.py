"""
LinkService - ordered link collections, one per owner.

Handles link creation, updates, reordering and validation.

Functional Core - business rules; storage goes through LinkRepoPort.
"""

from __future__ import annotations

import builtins
import logging
import re
from collections.abc import Collection, Iterable, Sequence
from typing import Any
from uuid import UUID

from src.domain.entities import CustomIcon, LinkDraft, LinkItem, Owner, PredefinedIcon
from src.domain.errors import InvalidInput, NotFound, PersistenceFailure, ReorderFailed

from .models import LinkValidationError
from .ports import LinkRepoPort, OwnerLookupPort

logger = logging.getLogger(__name__)

URL_PATTERN = re.compile(r"^https?://.+\..+")
TITLE_MAX_LENGTH = 100

DEFAULT_ICON_NAMES = frozenset(
    {
        # social
        "instagram", "youtube", "twitter", "github", "linkedin", "facebook",
        # general
        "globe", "mail", "phone", "link", "external", "message",
        # media
        "music", "video", "camera", "image",
        # business
        "shop", "briefcase", "calendar", "file", "download",
        # other
        "book", "location", "heart", "star", "coffee",
    }
)


# --- Validation Functions ---


def validate_url(url: str | None, pattern: re.Pattern[str] = URL_PATTERN) -> bool:
    """True when `url` starts with http(s):// and has a dotted host."""
    if not url or not isinstance(url, str):
        return False
    return pattern.match(url.strip()) is not None


def validate_link_data(
    title: str | None = None,
    url: str | None = None,
    icon: PredefinedIcon | CustomIcon | None = None,
    *,
    title_max_length: int = TITLE_MAX_LENGTH,
    icon_names: Collection[str] = DEFAULT_ICON_NAMES,
    url_pattern: re.Pattern[str] = URL_PATTERN,
) -> list[LinkValidationError]:
    """Validate the supplied link fields; omitted (None) fields are skipped."""
    errors: list[LinkValidationError] = []

    if title is not None:
        if not title.strip():
            errors.append(
                LinkValidationError(
                    code="title_required",
                    message="Title is required",
                    field="title",
                )
            )
        elif len(title.strip()) > title_max_length:
            errors.append(
                LinkValidationError(
                    code="title_too_long",
                    message=f"Title must be {title_max_length} characters or less",
                    field="title",
                )
            )

    if url is not None and not validate_url(url, url_pattern):
        errors.append(
            LinkValidationError(
                code="url_invalid",
                message="Invalid URL format. URL must start with http:// or https://",
                field="url",
            )
        )

    if isinstance(icon, PredefinedIcon) and icon.name not in icon_names:
        errors.append(
            LinkValidationError(
                code="icon_unknown",
                message=f"Unknown icon '{icon.name}'",
                field="icon",
            )
        )
    elif isinstance(icon, CustomIcon) and not validate_url(icon.url, url_pattern):
        errors.append(
            LinkValidationError(
                code="icon_url_invalid",
                message="Custom icon must be an http:// or https:// image URL",
                field="icon",
            )
        )

    return errors


# --- Link Service ---


class LinkService:
    """
    Link service.

    Keeps each owner's links in a strict display order. Validation runs before
    any repository call; every other failure propagates unchanged.
    """

    def __init__(
        self,
        repo: LinkRepoPort,
        owners: OwnerLookupPort,
        *,
        title_max_length: int = TITLE_MAX_LENGTH,
        icon_names: Iterable[str] = DEFAULT_ICON_NAMES,
        url_pattern: str | re.Pattern[str] = URL_PATTERN,
    ) -> None:
        """Initialize service."""
        self._repo = repo
        self._owners = owners
        self._title_max_length = title_max_length
        self._icon_names = frozenset(icon_names)
        self._url_pattern = re.compile(url_pattern)

    # --- Accessors ---

    def get_owner(self, owner_id: UUID) -> Owner:
        owner = self._owners.get_by_id(owner_id)
        if owner is None:
            raise NotFound("Owner", owner_id)
        return owner

    def list(self, owner_id: UUID) -> builtins.list[LinkItem]:
        """All of an owner's links, ascending by order. Empty list if none."""
        self.get_owner(owner_id)
        return sorted(self._repo.fetch_all(owner_id), key=lambda link: link.order)

    def list_visible(self, owner_id: UUID) -> builtins.list[LinkItem]:
        """Enabled links only, in the same order as `list`."""
        return [link for link in self.list(owner_id) if link.enabled]

    def get(self, link_id: UUID) -> LinkItem:
        link = self._repo.get(link_id)
        if link is None:
            raise NotFound("Link", link_id)
        return link

    # --- Mutations ---

    def create(
        self,
        owner_id: UUID,
        title: str,
        url: str,
        icon: PredefinedIcon | CustomIcon,
    ) -> LinkItem:
        """
        Append a new link to the owner's collection.

        The new order is the current maximum plus one, or 0 for an empty
        collection. Two concurrent creates for one owner can pick the same
        order; the dashboard has a single operator.
        """
        required = (("title", "Title", title), ("url", "URL", url), ("icon", "Icon", icon))
        missing = [
            LinkValidationError(code=f"{name}_required", message=f"{label} is required", field=name)
            for name, label, value in required
            if value is None
        ]
        if missing:
            raise InvalidInput(missing)
        self._check(title=title, url=url, icon=icon)
        self.get_owner(owner_id)

        current_max = self._repo.max_order(owner_id)
        next_order = 0 if current_max is None else current_max + 1

        link = self._repo.insert(
            LinkDraft(
                owner_id=owner_id,
                title=title.strip(),
                url=url.strip(),
                icon=icon,
                order=next_order,
            )
        )
        logger.info("Created link %s for owner %s at order %d", link.id, owner_id, link.order)
        return link

    def update(
        self,
        link_id: UUID,
        *,
        title: str | None = None,
        url: str | None = None,
        icon: PredefinedIcon | CustomIcon | None = None,
        enabled: bool | None = None,
    ) -> LinkItem:
        """
        Apply a partial update. Rejected as a whole if any supplied field is
        invalid. Never changes `order`.
        """
        self._check(title=title, url=url, icon=icon)
        existing = self.get(link_id)

        fields: dict[str, Any] = {}
        if title is not None:
            fields["title"] = title.strip()
        if url is not None:
            fields["url"] = url.strip()
        if icon is not None:
            fields["icon"] = icon
        if enabled is not None:
            fields["enabled"] = enabled

        if not fields:
            return existing
        return self._repo.patch(link_id, fields)

    def toggle(self, link_id: UUID, enabled: bool) -> LinkItem:
        """Show or hide a link on the public page."""
        return self.update(link_id, enabled=enabled)

    def delete(self, link_id: UUID) -> None:
        """
        Remove a link. Remaining orders are left as they are; a gap only
        affects contiguity, not relative order.
        """
        if not self._repo.remove(link_id):
            raise NotFound("Link", link_id)
        logger.info("Deleted link %s", link_id)

    def reorder(self, owner_id: UUID, link_ids: Sequence[UUID]) -> None:
        """
        Give the link at position i of `link_ids` order i.

        Each position is an independent write. Ids that do not belong to the
        owner are ignored by the store. If any write fails the whole call
        fails with the first error and callers must re-fetch.
        """
        self.get_owner(owner_id)
        try:
            results = self._repo.patch_many(
                owner_id, [(link_id, position) for position, link_id in enumerate(link_ids)]
            )
        except PersistenceFailure as e:
            # The store was unreachable, so no write is known to have landed.
            logger.warning("Reorder for owner %s failed outright: %s", owner_id, e.message)
            raise ReorderFailed(e.message) from e

        failures = [result for result in results if result.error is not None]
        if failures:
            logger.warning(
                "Reorder for owner %s failed on %d of %d writes: %s",
                owner_id,
                len(failures),
                len(results),
                failures[0].error,
            )
            raise ReorderFailed(failures[0].error or "unknown error")

        skipped = sum(1 for result in results if not result.applied)
        if skipped:
            logger.info("Reorder for owner %s ignored %d foreign ids", owner_id, skipped)

    # --- Helpers ---

    def _check(
        self,
        title: str | None = None,
        url: str | None = None,
        icon: PredefinedIcon | CustomIcon | None = None,
    ) -> None:
        errors = validate_link_data(
            title=title,
            url=url,
            icon=icon,
            title_max_length=self._title_max_length,
            icon_names=self._icon_names,
            url_pattern=self._url_pattern,
        )
        if errors:
            raise InvalidInput(errors)
