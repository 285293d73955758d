"""Entry point for the chef-menu Textual app."""

from __future__ import annotations

import argparse

from chef_menu.config import DB_PATH, LOG_PATH
from chef_menu.logs import setup_logging
from chef_menu.menu_app import ChefMenuApp


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="chef-menu", description="Browse and manage the chef's menu.")
    parser.add_argument("--db", default=DB_PATH, help=f"SQLite database path (default: {DB_PATH})")
    parser.add_argument("--log", default=LOG_PATH, help=f"JSON log file path (default: {LOG_PATH})")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Run the Textual application."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log)
    ChefMenuApp(db_path=args.db).run()


if __name__ == "__main__":
    main()
