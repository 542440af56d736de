"""
In-memory title search over an already fetched list of links.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, TypeVar


class HasTitle(Protocol):
    title: str


T = TypeVar("T", bound=HasTitle)


def filter_by_title(records: Sequence[T], query: str) -> Sequence[T]:
    """
    Keep the records whose title contains `query`, ignoring case.

    A blank query returns `records` itself. Surviving records keep their
    input order.
    """
    if not query or not query.strip():
        return records
    needle = query.strip().lower()
    return [record for record in records if needle in record.title.lower()]
