#!/usr/bin/env python3
import argparse
import logging
import sys

from pydantic import ValidationError
from pydantic_settings import SettingsError

from catalog_sync.logger import setup_logging
from catalog_sync.runner import run_sync
from catalog_sync.settings import Settings

logger = logging.getLogger("catalog_sync.cli")


def split_locales(values: list[str]) -> list[str]:
    return [locale.strip() for value in values for locale in value.split(",") if locale.strip()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="catalog-sync", description="Sync per-locale JSON translation catalogs with a source catalog."
    )
    parser.add_argument("--source", help="Directory containing the source catalog")
    parser.add_argument("--source-file", help="File name of the source catalog")
    parser.add_argument("--destination", help="Output directory (defaults to the source directory)")
    parser.add_argument(
        "-l",
        "--locale",
        "--locales",
        dest="locales",
        action="append",
        default=[],
        help="Locale to sync, repeatable or comma separated",
    )
    parser.add_argument("--indent", help="Indentation string, or a number of spaces")
    parser.add_argument("--check", action="store_true", default=None, help="Report stale catalogs without writing")
    parser.add_argument("--log-level", help="Logging level")
    parser.add_argument("--log-file", help="Also write logs to this file")
    return parser


def load_settings(args: argparse.Namespace) -> Settings:
    overrides = {
        "SOURCE": args.source,
        "SOURCE_FILE": args.source_file,
        "DESTINATION": args.destination,
        "LOCALES": split_locales(args.locales) or None,
        "INDENT": args.indent,
        "CHECK": args.check,
        "LOG_LEVEL": args.log_level,
        "LOG_FILE": args.log_file,
    }
    return Settings(**{key: value for key, value in overrides.items() if value is not None})


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args)
    except (ValidationError, SettingsError) as e:
        print(f"Error: Invalid configuration: {e}", file=sys.stderr)
        return 2

    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    result = run_sync(settings)
    if not result.success:
        logger.error(f"[Run] Sync failed: {result.error}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
