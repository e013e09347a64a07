"""RSS feed fetching."""

import logging
from datetime import datetime, timezone, timedelta

import feedparser
import requests
from dateutil.parser import parse as parse_date

from ingest_news.context import RefreshContext
from ingest_news.errors import FetchFailure
from ingest_news.models import FeedItem, ParsedFeed

logger = logging.getLogger(__name__)

DEFAULT_REQUEST_TIMEOUT = 30.0
MIN_REQUEST_TIMEOUT = 0.1  # requests rejects non-positive timeouts
USER_AGENT = "news-ingest/1.0 (RSS reader)"

# Timezone abbreviations for date parsing
TZINFOS = {
    "EST": timezone(timedelta(hours=-5)),
    "EDT": timezone(timedelta(hours=-4)),
    "CST": timezone(timedelta(hours=-6)),
    "CDT": timezone(timedelta(hours=-5)),
    "MST": timezone(timedelta(hours=-7)),
    "MDT": timezone(timedelta(hours=-6)),
    "PST": timezone(timedelta(hours=-8)),
    "PDT": timezone(timedelta(hours=-7)),
    "GMT": timezone.utc,
    "UTC": timezone.utc,
    "BST": timezone(timedelta(hours=1)),
}


def fetch_feed(
    feed_url: str,
    context: RefreshContext | None = None,
    timeout: float = DEFAULT_REQUEST_TIMEOUT,
) -> ParsedFeed:
    """Download and parse a single feed.

    Raises:
        FetchFailure: On cancellation, network error, non-2xx response or
            a malformed document.
    """
    if context is None:
        context = RefreshContext.background()

    if context.cancelled():
        raise FetchFailure(feed_url, "context cancelled")
    if context.expired():
        raise FetchFailure(feed_url, "deadline exceeded")

    remaining = context.remaining()
    if remaining is not None:
        timeout = max(MIN_REQUEST_TIMEOUT, min(timeout, remaining))

    try:
        response = requests.get(
            feed_url,
            timeout=timeout,
            headers={"User-Agent": USER_AGENT},
        )
        response.raise_for_status()
    except (requests.RequestException, ValueError) as e:
        raise FetchFailure(feed_url, str(e)) from e

    # A cancel that lands mid-request discards the body.
    if context.cancelled():
        raise FetchFailure(feed_url, "context cancelled")

    feed = feedparser.parse(response.content)
    if feed.get("bozo") and not feed.entries:
        reason = feed.get("bozo_exception") or "malformed feed"
        raise FetchFailure(feed_url, f"parse error: {reason}")

    title = (feed.feed.get("title") or "").strip() or feed_url
    items = [_parse_entry(entry) for entry in feed.entries]
    logger.debug("Parsed %d items from %s", len(items), feed_url)
    return ParsedFeed(title=title, items=items)


def _parse_entry(entry) -> FeedItem:
    """Map a feedparser entry onto a FeedItem."""
    content = ""
    content_blocks = entry.get("content") or []
    if content_blocks:
        content = (content_blocks[0].get("value") or "").strip()

    return FeedItem(
        title=(entry.get("title") or "").strip(),
        link=(entry.get("link") or "").strip(),
        description=(entry.get("summary") or "").strip(),
        content=content,
        published_at=_parse_published_date(entry),
    )


def _parse_published_date(entry) -> datetime | None:
    """Extract and parse the published date from an RSS entry."""
    published = entry.get("published") or entry.get("updated")
    if not published:
        return None

    try:
        dt = parse_date(published, tzinfos=TZINFOS)
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return dt
    except (ValueError, OverflowError):
        return None
