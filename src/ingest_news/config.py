"""Configuration loader for ingest_news."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from common.config import find_config_path, load_yaml, parse_duration, split_and_clean
from ingest_news.fetch_feeds.sources import DEFAULT_FEEDS
from ingest_news.ingest_news import DEFAULT_SUMMARY_MAX_LENGTH
from ingest_news.score_articles.tickers import DEFAULT_FALLBACK_TICKER, DEFAULT_TICKER_LEXICON

load_dotenv()

CONFIG_DIR = Path(__file__).resolve().parent.parent.parent / "configs"


@dataclass
class Config:
    feeds: list[str] = field(default_factory=lambda: list(DEFAULT_FEEDS))
    max_articles: int = 20
    poll_interval: float = 1800.0  # seconds
    request_timeout: float = 4.0  # seconds
    summary_max_length: int = DEFAULT_SUMMARY_MAX_LENGTH
    tickers: list[str] = field(default_factory=lambda: sorted(DEFAULT_TICKER_LEXICON))
    fallback_ticker: str = DEFAULT_FALLBACK_TICKER
    database_path: str = "data/app.db"


def load_config(config_name: str | None = None) -> Config:
    """Load configuration from YAML file, then apply environment overrides.

    Args:
        config_name: Name of config file (without .yaml extension) or a path.
                    If None, uses CONFIG_ENV env var or "prod".

    Returns:
        Loaded Config object
    """
    config_path = find_config_path(config_name, CONFIG_DIR, env_var="CONFIG_ENV")
    config = _parse_config(load_yaml(config_path))
    return _apply_env_overrides(config, os.environ)


def _parse_config(data: dict) -> Config:
    """Parse config dictionary into Config object."""
    defaults = Config()
    news = data.get("news", {})

    return Config(
        feeds=news.get("feeds") or defaults.feeds,
        max_articles=int(news.get("max_articles", defaults.max_articles)),
        poll_interval=parse_duration(news.get("poll_interval", defaults.poll_interval)),
        request_timeout=parse_duration(data.get("request_timeout", defaults.request_timeout)),
        summary_max_length=int(news.get("summary_max_length", defaults.summary_max_length)),
        tickers=news.get("tickers") or defaults.tickers,
        fallback_ticker=news.get("fallback_ticker", defaults.fallback_ticker),
        database_path=data.get("database", {}).get("path", defaults.database_path),
    )


def _apply_env_overrides(config: Config, env) -> Config:
    """Override config values from NEWS_FEEDS, NEWS_POLL_INTERVAL, REQUEST_TIMEOUT and DATABASE_PATH."""
    if env.get("NEWS_FEEDS"):
        config.feeds = split_and_clean(env["NEWS_FEEDS"])

    for env_var, attr in (("NEWS_POLL_INTERVAL", "poll_interval"), ("REQUEST_TIMEOUT", "request_timeout")):
        if env.get(env_var):
            try:
                setattr(config, attr, parse_duration(env[env_var]))
            except ValueError as e:
                raise ValueError(f"invalid {env_var}: {e}") from e

    if env.get("DATABASE_PATH"):
        config.database_path = env["DATABASE_PATH"]

    return config
