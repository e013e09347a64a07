"""Data models for the news ingestion pipeline."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass
class FeedItem:
    """Single entry parsed from a syndication feed."""
    title: str
    link: str
    description: str
    content: str
    published_at: Optional[datetime]


@dataclass
class ParsedFeed:
    """Feed display title and its entries."""
    title: str
    items: list[FeedItem] = field(default_factory=list)


@dataclass
class FeedArticle:
    """Candidate article collected during a refresh."""
    title: str
    source: str
    summary: str
    link: str
    published_at: datetime


@dataclass
class NewsArticleRecord:
    """Scored article ready to be upserted into the store."""
    id: str
    title: str
    source: str
    summary: str
    sentiment_score: float
    trend: str
    tickers: str
    url: str
    published_at: datetime


@dataclass
class RefreshSummary:
    """Counts reported by a single refresh run."""
    fetched: int
    processed: int
    persisted: int
    failed_feeds: list[str] = field(default_factory=list)
    failed_records: list[str] = field(default_factory=list)
