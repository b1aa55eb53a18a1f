"""
Command-line entry point: ask for a query, search every engine, print links.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from dotenv import load_dotenv

from search.config import SearchConfig
from search.errors import ConfigError, QueryError
from search.orchestrator import SearchOrchestrator, perform_search
from ui import report as report_ui

logger = logging.getLogger(__name__)


LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def configure_logging(level: Optional[str] = None):
    """Root logging setup; httpx request lines are noise at INFO."""
    level = (level or os.getenv("LOG_LEVEL", "WARNING")).strip().upper()
    unknown = level not in LOG_LEVELS
    logging.basicConfig(
        level="WARNING" if unknown else level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    if unknown:
        logger.warning(f"Unknown log level {level!r}, using WARNING")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Search several web search engines at once and list result links."
    )
    parser.add_argument("query", nargs="*", help="Search query (prompted for when omitted).")
    parser.add_argument(
        "-e", "--engine", action="append", dest="engines",
        help="Engine to query (repeatable). Defaults to all, or SEARCH_ENGINES.",
    )
    parser.add_argument("--json", action="store_true", help="Print the report as JSON.")
    parser.add_argument("--quiet", action="store_true", help="Hide per-engine progress.")
    parser.add_argument(
        "--log-level", default=None, type=str.upper, choices=LOG_LEVELS,
        help="Logging level (default: LOG_LEVEL or WARNING).",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        config = SearchConfig.from_env()
        if args.engines:
            config.engines = args.engines
        orchestrator = SearchOrchestrator(config=config)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    query = " ".join(args.query) if args.query else _prompt_query()
    if not query.strip():
        return 0

    try:
        report = perform_search(
            query,
            orchestrator=orchestrator,
            on_status=None if args.quiet or args.json else report_ui.render_status,
        )
    except QueryError:
        return 0

    if args.json:
        print(report.model_dump_json(indent=2))
    else:
        report_ui.render(report)
    return 0


def _prompt_query() -> str:
    try:
        return input("Enter your search query: ")
    except EOFError:
        return ""


if __name__ == "__main__":
    sys.exit(main())
