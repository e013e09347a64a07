"""Read-side queries over stored news articles."""

from dataclasses import dataclass
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.orm import Session

from ingest_news.score_articles.tickers import split_tickers
from news_store.models import NewsArticle


@dataclass
class NewsHeadline:
    """Stored article as shown on the dashboard."""
    id: str
    title: str
    source: str
    summary: str
    sentiment: float
    trend: str
    tickers: list[str]
    url: str
    published_at: datetime


def list_latest_news(session: Session, limit: int) -> list[NewsHeadline]:
    """Return the `limit` most recently published articles."""
    stmt = (
        select(NewsArticle)
        .order_by(NewsArticle.published_at.desc())
        .limit(limit)
    )
    rows = session.execute(stmt).scalars().all()

    return [
        NewsHeadline(
            id=row.id,
            title=row.title,
            source=row.source,
            summary=row.summary,
            sentiment=row.sentiment_score,
            trend=row.trend,
            tickers=split_tickers(row.tickers),
            url=row.url,
            published_at=_as_utc(row.published_at),
        )
        for row in rows
    ]


def _as_utc(dt: datetime) -> datetime:
    """Stored timestamps are UTC; SQLite returns them naive."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)
