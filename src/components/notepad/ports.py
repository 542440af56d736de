"""
Notepad component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.entities import Notepad, Owner


class NotepadRepoPort(Protocol):
    """One notepad row per owner; `save` inserts or replaces it."""

    def get(self, owner_id: UUID) -> Notepad | None:
        ...

    def save(self, notepad: Notepad) -> Notepad:
        ...


class OwnerSlugLookupPort(Protocol):
    def get_by_slug(self, slug: str) -> Owner | None:
        ...
