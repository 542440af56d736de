"""
Error types shared by components, adapters and the API layer.

Validation problems are raised before any storage call. Everything else is
propagated unchanged to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationError:
    """A single field-level validation problem."""

    code: str
    message: str
    field: str | None = None


class LinkHubError(Exception):
    """Base error."""

    pass


class InvalidInput(LinkHubError):
    """Input was rejected locally; nothing was written."""

    def __init__(self, errors: list[ValidationError]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(err.message for err in self.errors) or "Invalid input")


class NotFound(LinkHubError):
    """The targeted owner or link does not exist."""

    def __init__(self, entity: str, key: object) -> None:
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} {key} not found")


class PersistenceFailure(LinkHubError):
    """The storage call failed. Safe to retry."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ReorderFailed(LinkHubError):
    """At least one position write failed; the stored order is unreliable."""

    def __init__(self, first_error: str) -> None:
        self.first_error = first_error
        super().__init__(f"Failed to reorder links: {first_error}")
