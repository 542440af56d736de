"""
Links component - Port interfaces.

Every storage failure is reported as PersistenceFailure.
"""

from __future__ import annotations

from typing import Any, Protocol
from uuid import UUID

from src.domain.entities import LinkDraft, LinkItem, Owner, PatchResult


class LinkRepoPort(Protocol):
    """Repository interface for links."""

    def fetch_all(self, owner_id: UUID) -> list[LinkItem]:
        """List an owner's links sorted by order."""
        ...

    def get(self, link_id: UUID) -> LinkItem | None:
        """Get link by ID."""
        ...

    def max_order(self, owner_id: UUID) -> int | None:
        """Highest order in the owner's collection, None when empty."""
        ...

    def insert(self, draft: LinkDraft) -> LinkItem:
        """Store a new link, assigning its id."""
        ...

    def patch(self, link_id: UUID, fields: dict[str, Any]) -> LinkItem:
        """Update the given fields. Raises NotFound for unknown ids."""
        ...

    def remove(self, link_id: UUID) -> bool:
        """Delete link. Returns False when nothing was deleted."""
        ...

    def patch_many(self, owner_id: UUID, orders: list[tuple[UUID, int]]) -> list[PatchResult]:
        """Write each (id, order) pair independently, restricted to the owner."""
        ...


class OwnerLookupPort(Protocol):
    """Read access to owners."""

    def get_by_id(self, owner_id: UUID) -> Owner | None:
        ...
