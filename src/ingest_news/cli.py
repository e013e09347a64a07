"""CLI for polling news feeds into the local store."""

from __future__ import annotations

import functools
import logging
import sys

from common.cli_helpers import setup_logging
from ingest_news.config import Config, load_config
from ingest_news.context import RefreshContext
from ingest_news.errors import IngestError
from ingest_news.fetch_feeds.fetch_rss_feed import fetch_feed
from ingest_news.helpers import parse_ingest_news_args
from ingest_news.ingest_news import NewsIngestor
from ingest_news.scheduler import RefreshScheduler
from ingest_news.score_articles.tickers import LexiconTickerRecognizer
from news_store.connection import configure, get_engine, init_db
from news_store.store import SqlArticleStore

logger = logging.getLogger(__name__)


def build_ingestor(config: Config) -> NewsIngestor:
    """Wire the ingestor to the configured database, feeds and lexicon."""
    engine = get_engine(config.database_path)
    init_db(engine)
    session_factory = configure(engine)

    return NewsIngestor(
        SqlArticleStore(session_factory),
        config.feeds,
        fetcher=functools.partial(fetch_feed, timeout=config.request_timeout),
        recognizer=LexiconTickerRecognizer(config.tickers, fallback=config.fallback_ticker),
        summary_max_length=config.summary_max_length,
    )


def main(argv: list[str] | None = None) -> int:
    args = parse_ingest_news_args(argv)
    setup_logging()

    config = load_config(args.config)
    max_articles = args.max_articles or config.max_articles
    interval = args.interval if args.interval is not None else config.poll_interval
    timeout = args.timeout if args.timeout is not None else config.request_timeout

    logger.info("Feeds: %s", config.feeds)
    logger.info("Database: %s", config.database_path)
    ingestor = build_ingestor(config)

    if args.once:
        try:
            summary = ingestor.refresh(max_articles, RefreshContext.with_timeout(timeout))
        except IngestError as e:
            logger.error("News ingest failed: err=%s", e)
            return 1
        logger.info(
            "Fetched %d articles, persisted %d of %d",
            summary.fetched,
            summary.persisted,
            summary.processed,
        )
        return 0

    scheduler = RefreshScheduler(ingestor, max_articles, interval, timeout)
    logger.info("Refreshing news every %.0fs (max %d articles)", interval, max_articles)
    try:
        scheduler.run()
    except KeyboardInterrupt:
        scheduler.stop()
        logger.info("Interrupted, stopping")
    return 0


if __name__ == "__main__":
    sys.exit(main())
