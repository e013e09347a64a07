DEFAULT_FEED_URL = "https://finance.yahoo.com/news/rssindex"

DEFAULT_FEEDS = [
    # Yahoo Finance
    DEFAULT_FEED_URL,
    # Dow Jones / WSJ markets
    "https://feeds.a.dj.com/rss/RSSMarketsMain",
]
