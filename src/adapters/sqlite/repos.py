import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from typing import Any
from uuid import UUID, uuid4

from src.adapters.clock import SystemClock
from src.domain.entities import (
    AnalyticsEvent,
    LinkDraft,
    LinkItem,
    Notepad,
    Owner,
    PatchResult,
    icon_from_parts,
    icon_to_parts,
)
from src.domain.errors import NotFound, PersistenceFailure
from src.ports.clock import ClockPort


# Helper to convert sqlite rows to dicts
def dict_factory(cursor: sqlite3.Cursor, row: Any) -> dict[str, Any]:
    d = {}
    for idx, col in enumerate(cursor.description):
        d[col[0]] = row[idx]
    return d


def connect(db_path: str) -> sqlite3.Connection:
    conn = sqlite3.connect(db_path)
    conn.row_factory = dict_factory
    conn.execute("PRAGMA foreign_keys = ON;")
    return conn


@contextmanager
def open_db(db_path: str, action: str) -> Iterator[sqlite3.Connection]:
    """Yield a connection; sqlite errors surface as PersistenceFailure."""
    try:
        conn = connect(db_path)
    except sqlite3.Error as e:
        raise PersistenceFailure(f"Failed to {action}: {e}") from e
    try:
        yield conn
    except sqlite3.Error as e:
        conn.rollback()
        raise PersistenceFailure(f"Failed to {action}: {e}") from e
    finally:
        conn.close()


class SQLiteOwnerRepo:
    def __init__(self, db_path: str):
        self.db_path = db_path

    def save(self, owner: Owner) -> Owner:
        with open_db(self.db_path, "save owner") as conn:
            conn.execute(
                """
                INSERT INTO owners (id, slug, display_name, bio, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    slug=excluded.slug,
                    display_name=excluded.display_name,
                    bio=excluded.bio,
                    updated_at=excluded.updated_at
            """,
                (
                    str(owner.id),
                    owner.slug,
                    owner.display_name,
                    owner.bio,
                    owner.created_at.isoformat(),
                    owner.updated_at.isoformat(),
                ),
            )
            conn.commit()
            return owner

    def get_by_id(self, owner_id: UUID) -> Owner | None:
        with open_db(self.db_path, "fetch owner") as conn:
            row = conn.execute("SELECT * FROM owners WHERE id = ?", (str(owner_id),)).fetchone()
            return self._map_row(row) if row else None

    def get_by_slug(self, slug: str) -> Owner | None:
        with open_db(self.db_path, "fetch owner") as conn:
            row = conn.execute("SELECT * FROM owners WHERE slug = ?", (slug,)).fetchone()
            return self._map_row(row) if row else None

    def _map_row(self, row: dict[str, Any]) -> Owner:
        return Owner(
            id=UUID(row["id"]),
            slug=row["slug"],
            display_name=row["display_name"],
            bio=row["bio"],
            created_at=datetime.fromisoformat(row["created_at"]),
            updated_at=datetime.fromisoformat(row["updated_at"]),
        )


class SQLiteLinkRepo:
    # Patchable fields and the columns they live in.
    _COLUMNS = {
        "title": "title",
        "url": "url",
        "enabled": "is_enabled",
        "order": "display_order",
    }

    def __init__(self, db_path: str, clock: ClockPort | None = None):
        self.db_path = db_path
        self.clock = clock or SystemClock()

    def fetch_all(self, owner_id: UUID) -> list[LinkItem]:
        with open_db(self.db_path, "fetch links") as conn:
            rows = conn.execute(
                "SELECT * FROM links WHERE owner_id = ? ORDER BY display_order ASC",
                (str(owner_id),),
            ).fetchall()
            return [self._map_row(row) for row in rows]

    def get(self, link_id: UUID) -> LinkItem | None:
        with open_db(self.db_path, "fetch link") as conn:
            row = conn.execute("SELECT * FROM links WHERE id = ?", (str(link_id),)).fetchone()
            return self._map_row(row) if row else None

    def max_order(self, owner_id: UUID) -> int | None:
        with open_db(self.db_path, "fetch links") as conn:
            row = conn.execute(
                "SELECT MAX(display_order) AS max_order FROM links WHERE owner_id = ?",
                (str(owner_id),),
            ).fetchone()
            return row["max_order"]

    def insert(self, draft: LinkDraft) -> LinkItem:
        now = self.clock.now_utc()
        link = LinkItem(
            id=uuid4(),
            owner_id=draft.owner_id,
            title=draft.title,
            url=draft.url,
            icon=draft.icon,
            order=draft.order,
            created_at=now,
            updated_at=now,
        )
        icon_type, icon_value = icon_to_parts(link.icon)
        with open_db(self.db_path, "create link") as conn:
            conn.execute(
                """
                INSERT INTO links (
                    id, owner_id, title, url, icon_type, icon_value,
                    display_order, is_enabled, click_count, created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
                (
                    str(link.id),
                    str(link.owner_id),
                    link.title,
                    link.url,
                    icon_type,
                    icon_value,
                    link.order,
                    int(link.enabled),
                    link.click_count,
                    now.isoformat(),
                    now.isoformat(),
                ),
            )
            conn.commit()
        return link

    def patch(self, link_id: UUID, fields: dict[str, Any]) -> LinkItem:
        assignments: list[str] = []
        params: list[Any] = []
        for name, value in fields.items():
            if name == "icon":
                icon_type, icon_value = icon_to_parts(value)
                assignments += ["icon_type = ?", "icon_value = ?"]
                params += [icon_type, icon_value]
            elif name in self._COLUMNS:
                assignments.append(f"{self._COLUMNS[name]} = ?")
                params.append(int(value) if name == "enabled" else value)
            else:
                raise ValueError(f"Field '{name}' cannot be patched")

        assignments.append("updated_at = ?")
        params.append(self.clock.now_utc().isoformat())

        with open_db(self.db_path, "update link") as conn:
            cursor = conn.execute(
                f"UPDATE links SET {', '.join(assignments)} WHERE id = ?",
                (*params, str(link_id)),
            )
            conn.commit()
            if cursor.rowcount == 0:
                raise NotFound("Link", link_id)
            row = conn.execute("SELECT * FROM links WHERE id = ?", (str(link_id),)).fetchone()
            return self._map_row(row)

    def remove(self, link_id: UUID) -> bool:
        with open_db(self.db_path, "delete link") as conn:
            cursor = conn.execute("DELETE FROM links WHERE id = ?", (str(link_id),))
            conn.commit()
            return cursor.rowcount > 0

    def patch_many(
        self, owner_id: UUID, orders: list[tuple[UUID, int]]
    ) -> list[PatchResult]:
        """
        Write each position independently. Ids owned by someone else match no
        row and are reported as not applied, without an error.
        """
        results: list[PatchResult] = []
        now = self.clock.now_utc().isoformat()
        with open_db(self.db_path, "reorder links") as conn:
            for link_id, position in orders:
                try:
                    cursor = conn.execute(
                        "UPDATE links SET display_order = ?, updated_at = ? "
                        "WHERE id = ? AND owner_id = ?",
                        (position, now, str(link_id), str(owner_id)),
                    )
                    conn.commit()
                except sqlite3.Error as e:
                    conn.rollback()
                    results.append(PatchResult(link_id=link_id, applied=False, error=str(e)))
                    continue
                results.append(PatchResult(link_id=link_id, applied=cursor.rowcount > 0))
        return results

    def increment_clicks(self, link_id: UUID) -> bool:
        with open_db(self.db_path, "record click") as conn:
            cursor = conn.execute(
                "UPDATE links SET click_count = click_count + 1 WHERE id = ?",
                (str(link_id),),
            )
            conn.commit()
            return cursor.rowcount > 0

    def _map_row(self, row: dict[str, Any]) -> LinkItem:
        return LinkItem(
            id=UUID(row["id"]),
            owner_id=UUID(row["owner_id"]),
            title=row["title"],
            url=row["url"],
            icon=icon_from_parts(row["icon_type"], row["icon_value"]),
            order=row["display_order"],
            enabled=bool(row["is_enabled"]),
            click_count=row["click_count"],
            created_at=datetime.fromisoformat(row["created_at"]),
            updated_at=datetime.fromisoformat(row["updated_at"]),
        )


class SQLiteAnalyticsRepo:
    def __init__(self, db_path: str):
        self.db_path = db_path

    def store(self, event: AnalyticsEvent) -> None:
        with open_db(self.db_path, "record analytics event") as conn:
            conn.execute(
                "INSERT INTO analytics_events (id, owner_id, link_id, event_type, created_at) "
                "VALUES (?, ?, ?, ?, ?)",
                (
                    str(event.id),
                    str(event.owner_id),
                    str(event.link_id) if event.link_id else None,
                    event.event_type,
                    event.created_at.isoformat(),
                ),
            )
            conn.commit()

    def count(self, owner_id: UUID, event_type: str) -> int:
        with open_db(self.db_path, "count analytics events") as conn:
            row = conn.execute(
                "SELECT COUNT(*) AS total FROM analytics_events "
                "WHERE owner_id = ? AND event_type = ?",
                (str(owner_id), event_type),
            ).fetchone()
            return int(row["total"])

    def list_recent(self, owner_id: UUID, limit: int = 100) -> list[AnalyticsEvent]:
        with open_db(self.db_path, "fetch recent events") as conn:
            rows = conn.execute(
                "SELECT * FROM analytics_events WHERE owner_id = ? "
                "ORDER BY created_at DESC LIMIT ?",
                (str(owner_id), limit),
            ).fetchall()
            return [
                AnalyticsEvent(
                    id=UUID(row["id"]),
                    owner_id=UUID(row["owner_id"]),
                    link_id=UUID(row["link_id"]) if row["link_id"] else None,
                    event_type=row["event_type"],
                    created_at=datetime.fromisoformat(row["created_at"]),
                )
                for row in rows
            ]


class SQLiteNotepadRepo:
    def __init__(self, db_path: str):
        self.db_path = db_path

    def get(self, owner_id: UUID) -> Notepad | None:
        with open_db(self.db_path, "fetch notepad") as conn:
            row = conn.execute(
                "SELECT * FROM notepads WHERE owner_id = ?", (str(owner_id),)
            ).fetchone()
            if not row:
                return None
            return Notepad(
                owner_id=UUID(row["owner_id"]),
                content=row["content"],
                updated_at=datetime.fromisoformat(row["updated_at"]),
            )

    def save(self, notepad: Notepad) -> Notepad:
        with open_db(self.db_path, "save notepad") as conn:
            conn.execute(
                """
                INSERT INTO notepads (owner_id, content, updated_at) VALUES (?, ?, ?)
                ON CONFLICT(owner_id) DO UPDATE SET
                    content=excluded.content,
                    updated_at=excluded.updated_at
            """,
                (str(notepad.owner_id), notepad.content, notepad.updated_at.isoformat()),
            )
            conn.commit()
            return notepad
