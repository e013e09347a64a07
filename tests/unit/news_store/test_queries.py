"""Tests for news_store.queries module."""

from datetime import datetime, timezone, timedelta

import pytest
from sqlalchemy.orm import sessionmaker

from ingest_news.models import NewsArticleRecord
from news_store.connection import configure, get_engine, get_session, init_db
from news_store.models import NewsArticle
from news_store.queries import list_latest_news
from news_store.store import SqlArticleStore

T0 = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def session_factory():
    engine = get_engine(":memory:")
    init_db(engine)
    yield sessionmaker(bind=engine, expire_on_commit=False)
    engine.dispose()


def _record(n: int, tickers: str = "SPY") -> NewsArticleRecord:
    return NewsArticleRecord(
        id=f"id-{n}",
        title=f"Story {n}",
        source="Wire",
        summary="",
        sentiment_score=0.0,
        trend="neutral",
        tickers=tickers,
        url=f"https://example.com/{n}",
        published_at=T0 + timedelta(minutes=n),
    )


class TestListLatestNews:
    def test_newest_first_with_limit(self, session_factory) -> None:
        store = SqlArticleStore(session_factory)
        for n in range(5):
            store.upsert_article(_record(n))

        with session_factory() as session:
            headlines = list_latest_news(session, 3)

        assert [h.title for h in headlines] == ["Story 4", "Story 3", "Story 2"]

    def test_splits_tickers(self, session_factory) -> None:
        SqlArticleStore(session_factory).upsert_article(_record(1, tickers="NVDA, MSFT"))

        with session_factory() as session:
            headlines = list_latest_news(session, 10)

        assert headlines[0].tickers == ["NVDA", "MSFT"]

    def test_empty_store(self, session_factory) -> None:
        with session_factory() as session:
            assert list_latest_news(session, 10) == []

    def test_orders_by_instant_across_offsets(self, session_factory) -> None:
        store = SqlArticleStore(session_factory)
        est = timezone(timedelta(hours=-5))
        newer = _record(1)
        newer.title = "Newer EST"
        newer.published_at = datetime(2024, 1, 1, 10, 0, 0, tzinfo=est)
        older = _record(2)
        older.title = "Older UTC"
        older.published_at = datetime(2024, 1, 1, 14, 0, 0, tzinfo=timezone.utc)
        store.upsert_article(newer)
        store.upsert_article(older)

        with session_factory() as session:
            headlines = list_latest_news(session, 10)

        assert [h.title for h in headlines] == ["Newer EST", "Older UTC"]
        assert headlines[0].published_at == datetime(2024, 1, 1, 15, 0, 0, tzinfo=timezone.utc)
        assert headlines[0].published_at.tzinfo == timezone.utc


class TestGetSession:
    def test_commits_on_exit(self) -> None:
        engine = get_engine(":memory:")
        init_db(engine)
        factory = configure(engine)

        SqlArticleStore(factory).upsert_article(_record(1))

        with get_session() as session:
            assert len(list_latest_news(session, 10)) == 1

    def test_rolls_back_on_error(self) -> None:
        engine = get_engine(":memory:")
        init_db(engine)
        configure(engine)

        with pytest.raises(RuntimeError):
            with get_session() as session:
                session.add(_record_row())
                raise RuntimeError("abort")

        with get_session() as session:
            assert list_latest_news(session, 10) == []


def _record_row():
    return NewsArticle(
        id="id-rollback",
        title="Rolled back",
        source="Wire",
        summary="",
        sentiment_score=0.0,
        trend="neutral",
        tickers="SPY",
        url="https://example.com/rollback",
        published_at=T0,
    )
