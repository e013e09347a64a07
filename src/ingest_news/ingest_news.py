"""Fetch RSS feeds, score the freshest articles and upsert them."""

import logging
from datetime import datetime, timezone
from typing import Callable, Protocol

from common.hashing import generate_news_article_id
from ingest_news.context import RefreshContext
from ingest_news.errors import InvalidArgument, NoData
from ingest_news.fetch_feeds.fetch_rss_feed import fetch_feed
from ingest_news.fetch_feeds.sources import DEFAULT_FEED_URL
from ingest_news.models import FeedArticle, NewsArticleRecord, ParsedFeed, RefreshSummary
from ingest_news.score_articles.sentiment import SentimentScorer, VaderSentimentScorer, trend_label
from ingest_news.score_articles.tickers import (
    DEFAULT_FALLBACK_TICKER,
    LexiconTickerRecognizer,
    TickerRecognizer,
    join_tickers,
)

DEFAULT_SUMMARY_MAX_LENGTH = 280


class ArticleStore(Protocol):
    def upsert_article(self, record: NewsArticleRecord) -> None:
        ...


FeedFetcher = Callable[[str, RefreshContext], ParsedFeed]


def truncate(text: str, limit: int) -> str:
    """Return at most `limit` characters of text, without an ellipsis."""
    if len(text) <= limit:
        return text
    return text[:limit]


class NewsIngestor:
    """Pulls the configured feeds and maps them into persisted articles.

    Holds no state between refreshes; everything a run learns goes to the
    store.
    """

    def __init__(
        self,
        store: ArticleStore,
        feeds: list[str] | None = None,
        *,
        fetcher: FeedFetcher = fetch_feed,
        scorer: SentimentScorer | None = None,
        recognizer: TickerRecognizer | None = None,
        summary_max_length: int = DEFAULT_SUMMARY_MAX_LENGTH,
        logger: logging.Logger | None = None,
    ):
        self.store = store
        self.feeds = list(feeds) if feeds else [DEFAULT_FEED_URL]
        self.fetcher = fetcher
        self.scorer = scorer if scorer is not None else VaderSentimentScorer()
        self.recognizer = recognizer if recognizer is not None else LexiconTickerRecognizer()
        self.summary_max_length = summary_max_length
        self.logger = logger or logging.getLogger(__name__)

    def refresh(self, max_articles: int, context: RefreshContext | None = None) -> RefreshSummary:
        """Fetch all feeds and upsert the `max_articles` most recent articles.

        Args:
            max_articles: Cap on records written this run, must be positive
            context: Deadline/cancellation for the feed fetches

        Returns:
            RefreshSummary with fetch and persist counts

        Raises:
            InvalidArgument: If max_articles is not a positive integer
            NoData: If no feed produced any article
        """
        if isinstance(max_articles, bool) or not isinstance(max_articles, int) or max_articles <= 0:
            raise InvalidArgument(f"max_articles must be positive, got {max_articles!r}")

        if context is None:
            context = RefreshContext.background()

        articles, failed_feeds = self._collect(context)
        if not articles:
            raise NoData(f"no articles fetched from {len(self.feeds)} feeds")

        # Stable sort keeps feed order for equal timestamps
        articles.sort(key=lambda article: article.published_at, reverse=True)
        selected = articles[:max_articles]

        persisted = 0
        failed_records = []
        for article in selected:
            record = self.build_record(article)
            try:
                self.store.upsert_article(record)
                persisted += 1
            except Exception as e:
                self.logger.warning("Upsert article failed: title=%s err=%s", article.title, e)
                failed_records.append(record.id)

        self.logger.info(
            "News refresh complete: articles=%d persisted=%d failed_feeds=%d",
            len(selected),
            persisted,
            len(failed_feeds),
        )
        return RefreshSummary(
            fetched=len(articles),
            processed=len(selected),
            persisted=persisted,
            failed_feeds=failed_feeds,
            failed_records=failed_records,
        )

    def _collect(self, context: RefreshContext) -> tuple[list[FeedArticle], list[str]]:
        """Fetch every feed in order, skipping the ones that fail."""
        articles = []
        failed_feeds = []

        for feed_url in self.feeds:
            try:
                feed = self.fetcher(feed_url, context)
            except Exception as e:
                self.logger.warning("RSS fetch failed: feed=%s err=%s", feed_url, e)
                failed_feeds.append(feed_url)
                continue

            for item in feed.items:
                articles.append(
                    FeedArticle(
                        title=item.title,
                        source=feed.title,
                        summary=item.description or item.content,
                        link=item.link,
                        published_at=item.published_at or datetime.now(timezone.utc),
                    )
                )

        return articles, failed_feeds

    def build_record(self, article: FeedArticle) -> NewsArticleRecord:
        """Score, tag and identify a single article."""
        text = f"{article.title} {article.summary}"
        score = self.scorer.score(text)
        tickers = self.recognizer.extract(text) or [DEFAULT_FALLBACK_TICKER]

        return NewsArticleRecord(
            id=generate_news_article_id(article.link, article.title, article.published_at),
            title=article.title,
            source=article.source,
            summary=truncate(article.summary, self.summary_max_length),
            sentiment_score=score,
            trend=trend_label(score),
            tickers=join_tickers(tickers),
            url=article.link,
            published_at=article.published_at,
        )
