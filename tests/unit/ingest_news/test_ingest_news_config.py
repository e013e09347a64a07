"""Tests for ingest_news.config module."""

import pytest

from ingest_news.config import Config, _apply_env_overrides, _parse_config, load_config
from ingest_news.fetch_feeds.sources import DEFAULT_FEEDS


class TestParseConfig:
    def test_defaults_for_empty_document(self) -> None:
        config = _parse_config({})
        assert config == Config()
        assert config.feeds == DEFAULT_FEEDS
        assert config.max_articles == 20
        assert config.poll_interval == 1800.0
        assert config.request_timeout == 4.0
        assert config.summary_max_length == 280
        assert config.fallback_ticker == "SPY"

    def test_reads_values(self) -> None:
        config = _parse_config({
            "request_timeout": "10s",
            "database": {"path": "/tmp/news.db"},
            "news": {
                "feeds": ["https://a.example/rss"],
                "max_articles": 7,
                "poll_interval": "1h",
                "summary_max_length": 100,
                "tickers": ["NVDA"],
                "fallback_ticker": "QQQ",
            },
        })
        assert config.feeds == ["https://a.example/rss"]
        assert config.max_articles == 7
        assert config.poll_interval == 3600.0
        assert config.request_timeout == 10.0
        assert config.summary_max_length == 100
        assert config.tickers == ["NVDA"]
        assert config.fallback_ticker == "QQQ"
        assert config.database_path == "/tmp/news.db"


class TestEnvOverrides:
    def test_news_feeds_split(self) -> None:
        config = _apply_env_overrides(Config(), {"NEWS_FEEDS": " https://a/rss , ,https://b/rss"})
        assert config.feeds == ["https://a/rss", "https://b/rss"]

    def test_durations(self) -> None:
        config = _apply_env_overrides(Config(), {"NEWS_POLL_INTERVAL": "5m", "REQUEST_TIMEOUT": "2s"})
        assert config.poll_interval == 300.0
        assert config.request_timeout == 2.0

    def test_invalid_duration_names_variable(self) -> None:
        with pytest.raises(ValueError, match="NEWS_POLL_INTERVAL"):
            _apply_env_overrides(Config(), {"NEWS_POLL_INTERVAL": "soon"})

    def test_database_path(self) -> None:
        config = _apply_env_overrides(Config(), {"DATABASE_PATH": "other.db"})
        assert config.database_path == "other.db"

    def test_no_env_keeps_values(self) -> None:
        assert _apply_env_overrides(Config(), {}) == Config()


class TestLoadConfig:
    def test_loads_yaml_path(self, tmp_path, monkeypatch) -> None:
        for var in ("NEWS_FEEDS", "NEWS_POLL_INTERVAL", "REQUEST_TIMEOUT", "DATABASE_PATH"):
            monkeypatch.delenv(var, raising=False)
        path = tmp_path / "local.yaml"
        path.write_text("news:\n  max_articles: 3\n  feeds:\n    - https://a.example/rss\n")

        config = load_config(str(path))

        assert config.max_articles == 3
        assert config.feeds == ["https://a.example/rss"]

    def test_env_overrides_yaml(self, tmp_path, monkeypatch) -> None:
        path = tmp_path / "local.yaml"
        path.write_text("news:\n  feeds:\n    - https://a.example/rss\n")
        monkeypatch.setenv("NEWS_FEEDS", "https://b.example/rss")

        assert load_config(str(path)).feeds == ["https://b.example/rss"]

    def test_bundled_test_config(self, monkeypatch) -> None:
        for var in ("NEWS_FEEDS", "NEWS_POLL_INTERVAL", "REQUEST_TIMEOUT", "DATABASE_PATH"):
            monkeypatch.delenv(var, raising=False)

        config = load_config("test")

        assert config.database_path == ":memory:"
        assert config.max_articles == 5
        assert config.poll_interval == 60.0

    def test_each_call_returns_fresh_config(self, monkeypatch) -> None:
        for var in ("NEWS_FEEDS", "NEWS_POLL_INTERVAL", "REQUEST_TIMEOUT", "DATABASE_PATH"):
            monkeypatch.delenv(var, raising=False)

        first = load_config("test")
        first.max_articles = 99
        second = load_config("test")

        assert second is not first
        assert second.max_articles == 5
