"""Command-line entrypoint: `rpgxref (-v ID | -s ID) [OUTPUT]`."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from rpgxref.diagnostics import count_by_severity, has_errors
from rpgxref.errors import RpgxrefError
from rpgxref.matcher import Query, ScriptMatchMode
from rpgxref.project import LoadOptions
from rpgxref.report import print_report, write_json_export, write_text_report
from rpgxref.scrape import ScrapeOptions, run_scrape

logger = logging.getLogger(__name__)


def _query_id(value: str) -> int:
    try:
        query_id = int(value, 10)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer id, got {value!r}") from exc
    if query_id < 0:
        raise argparse.ArgumentTypeError(f"id must be non-negative, got {query_id}")
    return query_id


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rpgxref",
        description="Find every read and write of an RPG Maker MV/MZ variable or switch",
    )
    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument("-v", "--variable", type=_query_id, metavar="ID", help="Variable id to scrape for")
    target.add_argument("-s", "--switch", type=_query_id, metavar="ID", help="Switch id to scrape for")
    parser.add_argument(
        "output",
        nargs="?",
        type=Path,
        default=None,
        help="Also write the plain-text report to this file",
    )
    parser.add_argument("--json", type=Path, default=None, dest="json_path", metavar="PATH", help="Write a JSON export")
    parser.add_argument(
        "--project",
        type=Path,
        default=None,
        metavar="ROOT",
        help="RPG Maker project root containing data/ (default: current directory)",
    )
    parser.add_argument(
        "--substring-scripts",
        action="store_true",
        help="Match script calls by plain substring instead of requiring an id boundary",
    )
    parser.add_argument("--active-only", action="store_true", help="Drop references whose clause is disabled")
    parser.add_argument("--progress", action="store_true", help="Show a tqdm progress bar while loading maps")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--verbose", action="store_true", help="Log debug messages")
    verbosity.add_argument("--quiet", action="store_true", help="Only log warnings and errors")
    return parser


def configure_logging(*, verbose: bool = False, quiet: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING if quiet else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose, quiet=args.quiet)

    query = Query.variable(args.variable) if args.variable is not None else Query.switch(args.switch)
    options = ScrapeOptions(
        script_match=ScriptMatchMode.SUBSTRING if args.substring_scripts else ScriptMatchMode.BOUNDARY,
        include_inactive=not args.active_only,
    )
    root = args.project if args.project is not None else Path.cwd()

    try:
        result = run_scrape(
            query,
            root=root,
            options=options,
            load_options=LoadOptions(show_progress=args.progress),
        )
    except RpgxrefError as exc:
        logger.error("%s", exc)
        return 1

    if result.diagnostics:
        counts = count_by_severity(result.diagnostics)
        logger.warning(
            "project loaded with %d error(s) and %d warning(s)",
            counts.get("error", 0),
            counts.get("warning", 0),
        )
        if has_errors(result.diagnostics):
            logger.warning("some map files were skipped; results may be incomplete")

    print_report(result)

    try:
        if args.output is not None:
            write_text_report(result, args.output)
            logger.info("wrote report to %s", args.output)
        if args.json_path is not None:
            write_json_export(result, args.json_path)
            logger.info("wrote JSON export to %s", args.json_path)
    except OSError as exc:
        logger.error("unable to write output: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
