"""Idempotent article writes."""

import logging
from datetime import timezone
from typing import Callable

from sqlalchemy.dialects.sqlite import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ingest_news.errors import PersistFailure
from ingest_news.models import NewsArticleRecord
from news_store.models import NewsArticle

logger = logging.getLogger(__name__)

_UPDATE_COLUMNS = (
    "title",
    "source",
    "summary",
    "sentiment_score",
    "trend",
    "tickers",
    "url",
    "published_at",
)


class SqlArticleStore:
    """Upserts article records keyed on id; the last write wins."""

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def upsert_article(self, record: NewsArticleRecord) -> None:
        values = {
            "id": record.id,
            "title": record.title,
            "source": record.source,
            "summary": record.summary,
            "sentiment_score": record.sentiment_score,
            "trend": record.trend,
            "tickers": record.tickers,
            "url": record.url,
            "published_at": _to_utc(record.published_at),
        }
        stmt = insert(NewsArticle).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=["id"],
            set_={column: stmt.excluded[column] for column in _UPDATE_COLUMNS},
        )

        session = self.session_factory()
        try:
            session.execute(stmt)
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            raise PersistFailure(record.id, str(e)) from e
        finally:
            session.close()

        logger.debug("Upserted article id=%s", record.id)


def _to_utc(dt):
    """SQLite keeps wall-clock text only, so store every instant in UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)
