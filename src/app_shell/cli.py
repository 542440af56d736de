import argparse
import logging
import sys
from pathlib import Path

from src.adapters.sqlite.migrator import SQLiteMigrator
from src.app_shell.context import ServiceContext
from src.components.links import export_filename, export_json, export_owner
from src.domain.errors import LinkHubError
from src.rules.loader import load_rules

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("cli")

DB_PATH = "data/linkhub.db"
RULES_PATH = "rules.yaml"
MIGRATIONS_DIR = "migrations"


def get_context(args: argparse.Namespace) -> ServiceContext:
    rules_path = Path(args.rules)
    if not rules_path.exists():
        logger.error("Rules file %s not found.", rules_path)
        sys.exit(1)

    return ServiceContext.create(args.db, load_rules(rules_path))


def handle_migrate(args: argparse.Namespace) -> None:
    Path(args.db).parent.mkdir(parents=True, exist_ok=True)
    applied = SQLiteMigrator(args.db, args.migrations).run_migrations()
    print(f"Applied {len(applied)} migration(s).")


def handle_create_owner(ctx: ServiceContext, args: argparse.Namespace) -> None:
    owner = ctx.owner_service.create(args.slug, args.display_name, args.bio)
    print(f"Owner created: {owner.id} (/{owner.slug})")


def handle_list(ctx: ServiceContext, args: argparse.Namespace) -> None:
    owner = ctx.owner_service.get_by_slug(args.slug)
    links = ctx.link_service.list(owner.id)
    for link in links:
        marker = " " if link.enabled else "x"
        print(f"[{marker}] {link.order:>3}  {link.title}  {link.url}  ({link.click_count} clicks)")


def handle_export(ctx: ServiceContext, args: argparse.Namespace) -> None:
    owner = ctx.owner_service.get_by_slug(args.slug)
    data = export_owner(ctx.link_service, owner.id, ctx.clock)
    target = Path(args.out or export_filename(owner.slug, data.exported_at))
    target.write_text(export_json(data))
    print(f"Exported {len(data.links)} links to {target}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Link Hub CLI")
    parser.add_argument("--db", default=DB_PATH, help="SQLite database path")
    parser.add_argument("--rules", default=RULES_PATH, help="Rules file path")
    parser.add_argument("--migrations", default=MIGRATIONS_DIR, help="Migrations directory")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # migrate
    subparsers.add_parser("migrate", help="Apply pending database migrations")

    # create-owner
    owner_parser = subparsers.add_parser("create-owner", help="Create a profile")
    owner_parser.add_argument("slug")
    owner_parser.add_argument("display_name")
    owner_parser.add_argument("--bio", default=None)

    # list
    list_parser = subparsers.add_parser("list", help="List a profile's links in display order")
    list_parser.add_argument("slug")

    # export
    export_parser = subparsers.add_parser("export", help="Write a JSON backup of a profile")
    export_parser.add_argument("slug")
    export_parser.add_argument(
        "--out", default=None, help="Output file (default: <slug>-links-<date>.json)"
    )

    args = parser.parse_args(argv)

    if args.command == "migrate":
        handle_migrate(args)
        return

    ctx = get_context(args)
    handlers = {
        "create-owner": handle_create_owner,
        "list": handle_list,
        "export": handle_export,
    }
    try:
        handlers[args.command](ctx, args)
    except LinkHubError as e:
        logger.error("%s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
