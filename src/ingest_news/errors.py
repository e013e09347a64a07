"""Error taxonomy for news ingestion."""


class IngestError(Exception):
    """Base class for news ingestion errors."""


class InvalidArgument(IngestError, ValueError):
    """A refresh was requested with bad parameters."""


class FetchFailure(IngestError):
    """A single feed could not be fetched or parsed."""

    def __init__(self, feed_url: str, reason: str):
        super().__init__(f"{feed_url}: {reason}")
        self.feed_url = feed_url
        self.reason = reason


class NoData(IngestError):
    """No articles were obtained from any configured feed."""


class PersistFailure(IngestError):
    """A single article record could not be written to the store."""

    def __init__(self, article_id: str, reason: str):
        super().__init__(f"{article_id}: {reason}")
        self.article_id = article_id
        self.reason = reason
