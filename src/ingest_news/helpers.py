"""Helper functions for ingest_news CLI."""

from __future__ import annotations

import argparse

from common.cli_helpers import positive_int
from common.config import parse_duration


def _duration(value: str) -> float:
    try:
        return parse_duration(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def parse_ingest_news_args(argv: list[str] | None = None) -> argparse.Namespace:
    '''Parse CLI arguments for ingest_news.'''

    parser = argparse.ArgumentParser(
        description="Poll RSS feeds and upsert scored news articles",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Config name (test/prod) or path to YAML file (default: $CONFIG_ENV or prod)",
    )
    parser.add_argument(
        "--max-articles",
        type=positive_int,
        default=None,
        help="Articles kept per refresh (default: from config)",
    )
    parser.add_argument(
        "--interval",
        type=_duration,
        default=None,
        help="Time between refreshes, e.g. 30m (default: from config)",
    )
    parser.add_argument(
        "--timeout",
        type=_duration,
        default=None,
        help="Deadline for a single refresh, e.g. 4s (default: from config)",
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Run a single refresh and exit",
    )
    return parser.parse_args(argv)
