"""
LinkCollectionView - the dashboard's local copy of one owner's links.

Mutations are applied to the local list first and then sent to the service.
A failed reorder reloads the authoritative list. Other failures propagate and
leave the optimistic change in place, flagging the view as stale until the
next `load`.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from uuid import UUID

from src.domain.entities import CustomIcon, LinkItem, PredefinedIcon
from src.domain.errors import InvalidInput, LinkHubError, NotFound

from ._impl import LinkService
from ._search import filter_by_title

logger = logging.getLogger(__name__)


class LinkCollectionView:
    def __init__(self, service: LinkService, owner_id: UUID) -> None:
        self._service = service
        self.owner_id = owner_id
        self._items: list[LinkItem] = []
        self.stale = True

    @property
    def items(self) -> list[LinkItem]:
        return list(self._items)

    @property
    def visible_items(self) -> list[LinkItem]:
        return [link for link in self._items if link.enabled]

    def search(self, query: str) -> list[LinkItem]:
        return list(filter_by_title(self._items, query))

    def load(self) -> list[LinkItem]:
        """Replace the local list with the stored one."""
        self._items = self._service.list(self.owner_id)
        self.stale = False
        return self.items

    def add(self, title: str, url: str, icon: PredefinedIcon | CustomIcon) -> LinkItem:
        link = self._service.create(self.owner_id, title, url, icon)
        self._items.append(link)
        return link

    def edit(
        self,
        link_id: UUID,
        *,
        title: str | None = None,
        url: str | None = None,
        icon: PredefinedIcon | CustomIcon | None = None,
        enabled: bool | None = None,
    ) -> LinkItem:
        index = self._index_of(link_id)
        previous = self._items[index]
        changes = {
            name: value
            for name, value in (("title", title), ("url", url), ("icon", icon), ("enabled", enabled))
            if value is not None
        }
        self._items[index] = previous.model_copy(update=changes)

        try:
            saved = self._service.update(link_id, title=title, url=url, icon=icon, enabled=enabled)
        except InvalidInput:
            # Rejected before anything was written.
            self._items[index] = previous
            raise
        except LinkHubError:
            self.stale = True
            raise

        self._items[self._index_of(link_id)] = saved
        return saved

    def toggle(self, link_id: UUID, enabled: bool) -> LinkItem:
        return self.edit(link_id, enabled=enabled)

    def remove(self, link_id: UUID) -> None:
        self._items.pop(self._index_of(link_id))
        try:
            self._service.delete(link_id)
        except LinkHubError:
            self.stale = True
            raise

    def move(self, link_id: UUID, new_index: int) -> None:
        """Drag-and-drop: move one link to `new_index` and persist the full order."""
        ids = [link.id for link in self._items]
        ids.insert(new_index, ids.pop(self._index_of(link_id)))
        self.reorder(ids)

    def reorder(self, link_ids: Sequence[UUID]) -> None:
        by_id = {link.id: link for link in self._items}
        wanted = [link_id for link_id in link_ids if link_id in by_id]
        placed = set(wanted)
        rest = [link for link in self._items if link.id not in placed]
        self._items = [
            by_id[link_id].model_copy(update={"order": position})
            for position, link_id in enumerate(wanted)
        ] + rest

        try:
            self._service.reorder(self.owner_id, list(link_ids))
        except LinkHubError as err:
            logger.warning("Reorder failed for owner %s, reloading: %s", self.owner_id, err)
            self._resync()
            raise

    def _resync(self) -> None:
        try:
            self.load()
        except LinkHubError:
            logger.exception("Reload after failed reorder also failed for owner %s", self.owner_id)
            self.stale = True

    def _index_of(self, link_id: UUID) -> int:
        for index, link in enumerate(self._items):
            if link.id == link_id:
                return index
        raise NotFound("Link", link_id)
