import logging
import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

logger = logging.getLogger(__name__)

# Everything after this marker in a migration file is the rollback script.
DOWN_MARKER = "-- Down"


class SQLiteMigrator:
    """Applies the numbered `*.sql` files in a directory, each exactly once."""

    def __init__(self, db_path: str, migrations_dir: str | Path):
        self.db_path = db_path
        self.migrations_dir = Path(migrations_dir)

    @contextmanager
    def _tracked(self) -> Iterator[tuple[sqlite3.Connection, set[str]]]:
        """Yield a connection plus the filenames it has already applied."""
        conn = sqlite3.connect(self.db_path)
        try:
            conn.execute("PRAGMA foreign_keys = ON;")
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS _migrations (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    filename TEXT UNIQUE NOT NULL,
                    applied_at DATETIME DEFAULT CURRENT_TIMESTAMP
                )
                """
            )
            applied = {row[0] for row in conn.execute("SELECT filename FROM _migrations")}
            yield conn, applied
        finally:
            conn.close()

    def available(self) -> list[str]:
        return sorted(p.name for p in self.migrations_dir.glob("*.sql"))

    def pending(self) -> list[str]:
        with self._tracked() as (_, applied):
            return [name for name in self.available() if name not in applied]

    def run_migrations(self) -> list[str]:
        """Apply all pending migrations in filename order. Returns what was applied."""
        newly_applied: list[str] = []
        with self._tracked() as (conn, applied):
            for filename in self.available():
                if filename in applied:
                    continue
                logger.info("Applying migration: %s", filename)
                self._apply(conn, filename)
                newly_applied.append(filename)
        return newly_applied

    def _apply(self, conn: sqlite3.Connection, filename: str) -> None:
        up_script = (self.migrations_dir / filename).read_text().split(DOWN_MARKER)[0]
        try:
            conn.executescript(up_script)
            conn.execute("INSERT INTO _migrations (filename) VALUES (?)", (filename,))
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise RuntimeError(f"Migration {filename} failed: {e}") from e
