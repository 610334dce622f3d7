"""
Command-line entry point for the car sharing manager menu.

Usage:
    carsharing [-databaseFileName NAME] [--log-level LEVEL] [--json-logs]

Example:
    carsharing -databaseFileName fleet
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from carsharing.app import CarSharingApp
from carsharing.config import Settings
from carsharing.console import InputReader, MenuPrinter
from carsharing.exceptions import StorageUnavailable
from carsharing.logging_config import get_logger, setup_logging
from carsharing.store import open_store

logger = get_logger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="carsharing",
        description="Create and list car-sharing companies.",
    )
    parser.add_argument(
        "-databaseFileName",
        dest="database_file_name",
        metavar="NAME",
        help="Database file name, without extension (default: carsharing)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Diagnostic log level on stderr (default: WARNING)",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        default=None,
        help="Emit diagnostics as JSON lines",
    )
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    """Merge command-line flags over environment-derived settings."""
    overrides = {
        "database_file_name": args.database_file_name,
        "log_level": args.log_level,
        "json_logs": args.json_logs,
    }
    return Settings(**{key: value for key, value in overrides.items() if value is not None})


def _prepare_db_dir(db_dir: str) -> None:
    try:
        Path(db_dir).mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StorageUnavailable(f"Could not create database directory {db_dir}: {e}") from e


def main(argv: list[str] | None = None) -> int:
    settings = build_settings(parse_args(argv))
    setup_logging(json_logs=settings.json_logs, log_level=settings.log_level)

    try:
        _prepare_db_dir(settings.db_dir)
        with open_store(settings.database_url) as store:
            app = CarSharingApp(store, InputReader(), MenuPrinter())
            app.run()
    except StorageUnavailable as exc:
        logger.error("store_unavailable", database_url=settings.database_url, error=str(exc))
        print(f"Could not open the company database: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
