"""Hashing utilities."""

import uuid
from datetime import datetime, timezone


def format_rfc3339(dt: datetime) -> str:
    """Format a datetime as RFC 3339 at second precision ("Z" for UTC)."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)

    offset = dt.utcoffset()
    base = dt.strftime("%Y-%m-%dT%H:%M:%S")
    if not offset:
        return f"{base}Z"

    total_minutes = int(offset.total_seconds()) // 60
    sign = "+" if total_minutes >= 0 else "-"
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{base}{sign}{hours:02d}:{minutes:02d}"


def generate_news_article_id(link: str, title: str, published_at: datetime) -> str:
    """Generate a stable article ID from link, title and publish time."""
    name = f"{link}|{title}|{format_rfc3339(published_at)}"
    return str(uuid.uuid5(uuid.NAMESPACE_URL, name))
