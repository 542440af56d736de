"""
Owners component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.entities import Owner


class OwnerRepoPort(Protocol):
    """Repository interface for owners."""

    def save(self, owner: Owner) -> Owner:
        ...

    def get_by_id(self, owner_id: UUID) -> Owner | None:
        ...

    def get_by_slug(self, slug: str) -> Owner | None:
        ...
