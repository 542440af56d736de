"""
NotepadService - the shared scratch-pad on an owner's public page.

Addressed by the owner's slug and stored against the owner's id, so renaming
the slug keeps the note. Anyone with the page can read and write it.
"""

from __future__ import annotations

import logging

from src.domain.entities import Notepad, Owner
from src.domain.errors import InvalidInput, NotFound, ValidationError
from src.ports.clock import ClockPort

from .ports import NotepadRepoPort, OwnerSlugLookupPort

logger = logging.getLogger(__name__)

MAX_CONTENT_LENGTH = 5000


def validate_notepad_content(
    content: str | None, max_length: int = MAX_CONTENT_LENGTH
) -> list[ValidationError]:
    if content is None:
        return [ValidationError("content_required", "Content is required", "content")]
    if len(content) > max_length:
        return [
            ValidationError(
                "content_too_long",
                f"Notepad content must be {max_length} characters or less",
                "content",
            )
        ]
    return []


class NotepadService:
    def __init__(
        self,
        repo: NotepadRepoPort,
        owners: OwnerSlugLookupPort,
        clock: ClockPort,
        max_length: int = MAX_CONTENT_LENGTH,
    ) -> None:
        self._repo = repo
        self._owners = owners
        self._clock = clock
        self._max_length = max_length

    def get(self, slug: str) -> Notepad:
        """The saved note, or an empty one if nothing was written yet."""
        owner = self._owner(slug)
        return self._repo.get(owner.id) or Notepad(
            owner_id=owner.id, content="", updated_at=owner.created_at
        )

    def save(self, slug: str, content: str) -> Notepad:
        errors = validate_notepad_content(content, self._max_length)
        if errors:
            raise InvalidInput(errors)
        owner = self._owner(slug)
        notepad = self._repo.save(
            Notepad(owner_id=owner.id, content=content, updated_at=self._clock.now_utc())
        )
        logger.info("Saved notepad for %s (%d chars)", slug, len(content))
        return notepad

    def clear(self, slug: str) -> Notepad:
        return self.save(slug, "")

    def _owner(self, slug: str) -> Owner:
        owner = self._owners.get_by_slug(slug)
        if owner is None:
            raise NotFound("Owner", slug)
        return owner
