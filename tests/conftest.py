from datetime import UTC, datetime
from pathlib import Path

import pytest

from src.adapters.clock import FixedClock
from src.adapters.sqlite.migrator import SQLiteMigrator
from src.app_shell.context import ServiceContext
from src.rules.loader import load_rules

PROJECT_ROOT = Path(__file__).parent.parent
MIGRATIONS_DIR = PROJECT_ROOT / "migrations"
RULES_PATH = PROJECT_ROOT / "rules.yaml"


@pytest.fixture
def test_data_dir(tmp_path):
    return str(tmp_path)


@pytest.fixture
def clock():
    return FixedClock(datetime(2025, 1, 31, 12, 0, tzinfo=UTC))


@pytest.fixture
def db_path(test_data_dir):
    """A migrated, empty SQLite database."""
    path = str(Path(test_data_dir) / "linkhub.db")
    SQLiteMigrator(path, MIGRATIONS_DIR).run_migrations()
    return path


@pytest.fixture
def rules():
    return load_rules(RULES_PATH)


@pytest.fixture
def test_ctx(db_path, rules, clock):
    """
    Creates a full ServiceContext backed by a temporary SQLite DB.
    """
    return ServiceContext.create(db_path=db_path, rules=rules, clock=clock)
