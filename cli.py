"""Command line interface for the course catalog."""

from __future__ import annotations

import argparse
import logging
import logging.config
import os
import sys
from pathlib import Path

import yaml
from dotenv import load_dotenv

from catalog import (
    CatalogLoader,
    CatalogShell,
    CourseTable,
    DEFAULT_TABLE_SIZE,
    build_distribution_report,
    format_report,
)

LOGGER = logging.getLogger(__name__)


def configure_logging(logging_path: Path) -> None:
    if not logging_path.exists():
        logging.basicConfig(level=logging.INFO)
        LOGGER.warning("Logging configuration %s not found. Using basicConfig().", logging_path)
        return

    logging.config.fileConfig(logging_path, disable_existing_loggers=False, defaults={"sys": sys})


def read_settings(path: Path) -> dict:
    if not path.exists():
        raise FileNotFoundError(f"Settings file not found: {path}")

    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}") from exc
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}")
    return number


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Browse a course catalog held in a hash table.")
    parser.add_argument("command", choices=["shell", "list", "show", "stats"], help="Operation to perform")
    parser.add_argument("code", nargs="?", help="Course number for the 'show' command")
    parser.add_argument(
        "--config",
        default=os.getenv("COURSE_CATALOG_CONFIG", "config/settings.yaml"),
        help="Path to YAML settings file",
    )
    parser.add_argument("--size", type=positive_int, help="Override the number of hash buckets")
    parser.add_argument("--input", help="Override the course file path")
    parser.add_argument("--logging-config", default="logging.conf", help="Path to logging fileConfig")
    return parser


def apply_overrides(settings: dict, args: argparse.Namespace) -> dict:
    table_cfg = settings.setdefault("table", {})
    catalog_cfg = settings.setdefault("catalog", {})

    if args.size is not None:
        table_cfg["size"] = args.size
    if args.input is not None:
        catalog_cfg["input_file"] = args.input

    return settings


def create_components(settings: dict) -> tuple[CourseTable, CatalogLoader]:
    table_cfg = settings.get("table", {})
    catalog_cfg = settings.get("catalog", {})

    table = CourseTable(int(table_cfg.get("size", DEFAULT_TABLE_SIZE)))
    loader = CatalogLoader(
        delimiter=catalog_cfg.get("delimiter", ","),
        encoding=catalog_cfg.get("encoding", "utf-8-sig"),
    )
    return table, loader


def load_catalog(loader: CatalogLoader, input_file: str, table: CourseTable) -> bool:
    """Load `input_file` into `table`, reporting failures instead of raising."""
    try:
        loader.load(input_file, table)
    except (OSError, ValueError) as exc:
        LOGGER.error("%s", exc)
        print(f"Could not open {input_file}.", file=sys.stderr)
        return False
    return True


def main(argv: list[str] | None = None) -> int:
    load_dotenv()

    parser = build_argument_parser()
    args = parser.parse_args(argv)

    if args.command == "show" and not args.code:
        parser.error("the 'show' command requires a course number")

    settings = read_settings(Path(args.config))
    settings = apply_overrides(settings, args)

    configure_logging(Path(args.logging_config))

    try:
        table, loader = create_components(settings)
    except ValueError as exc:
        LOGGER.error("Invalid settings in %s: %s", args.config, exc)
        return 2

    catalog_cfg = settings.get("catalog", {})
    input_file = catalog_cfg.get("input_file")

    if args.command == "shell":
        if input_file and catalog_cfg.get("preload", False):
            if not load_catalog(loader, input_file, table):
                return 2
        shell = CatalogShell(table, loader=loader, banner=bool(settings.get("shell", {}).get("banner", True)))
        shell.run()
        return 0

    if not input_file:
        LOGGER.error("No course file configured; pass --input or set catalog.input_file")
        return 2

    if not load_catalog(loader, input_file, table):
        return 2

    if args.command == "list":
        for number, title in table.items():
            print(f"{number}, {title}")
        return 0

    if args.command == "show":
        course = table.search(args.code)
        if course is None:
            print("Course not found.", file=sys.stderr)
            return 1
        print("\n".join(course.describe()))
        return 0

    print(format_report(build_distribution_report(table)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
