import json
from pathlib import Path

import pytest

from src.app_shell.cli import main

PROJECT_ROOT = Path(__file__).parents[2]


@pytest.fixture
def base_args(tmp_path):
    return [
        "--db",
        str(tmp_path / "data" / "linkhub.db"),
        "--rules",
        str(PROJECT_ROOT / "rules.yaml"),
        "--migrations",
        str(PROJECT_ROOT / "migrations"),
    ]


def test_migrate_create_list_export(base_args, tmp_path, capsys):
    main([*base_args, "migrate"])
    main([*base_args, "create-owner", "jane", "Jane", "--bio", "hello"])
    main([*base_args, "list", "jane"])
    out_file = tmp_path / "backup.json"
    main([*base_args, "export", "jane", "--out", str(out_file)])

    output = capsys.readouterr().out
    assert "Applied 3 migration(s)." in output
    assert "Owner created:" in output
    assert "Exported 0 links" in output
    assert json.loads(out_file.read_text())["owner"]["bio"] == "hello"


def test_unknown_slug_exits_nonzero(base_args):
    main([*base_args, "migrate"])

    with pytest.raises(SystemExit) as exc_info:
        main([*base_args, "list", "nobody"])

    assert exc_info.value.code == 1


def test_missing_rules_file(base_args, tmp_path):
    args = [*base_args, "list", "jane"]
    args[3] = str(tmp_path / "missing.yaml")

    with pytest.raises(SystemExit):
        main(args)
