"""Periodic refresh driver for the news ingestor."""

import logging
import threading

from ingest_news.context import RefreshContext
from ingest_news.errors import IngestError
from ingest_news.ingest_news import NewsIngestor
from ingest_news.models import RefreshSummary

logger = logging.getLogger(__name__)


class RefreshScheduler:
    """Runs a refresh at start and then every `interval` seconds.

    The next tick is only scheduled once the previous refresh has returned.
    `stop()` ends the loop and cancels the refresh in flight.
    """

    def __init__(
        self,
        ingestor: NewsIngestor,
        max_articles: int,
        interval: float,
        timeout: float | None = None,
    ):
        self.ingestor = ingestor
        self.max_articles = max_articles
        self.interval = interval
        self.timeout = timeout
        self._stop = threading.Event()

    def run_once(self, label: str = "scheduled") -> RefreshSummary | None:
        """Run one refresh, logging instead of raising on failure."""
        context = RefreshContext.with_timeout(self.timeout, cancel_event=self._stop)
        try:
            return self.ingestor.refresh(self.max_articles, context)
        except IngestError as e:
            logger.warning("%s news ingest failed: err=%s", label.capitalize(), e)
        except Exception:
            logger.exception("%s news ingest crashed", label.capitalize())
        return None

    def run(self) -> None:
        """Block until stop() is called."""
        self.run_once("initial")
        while not self._stop.wait(self.interval):
            self.run_once("scheduled")
        logger.info("News refresh scheduler stopped")

    def stop(self) -> None:
        self._stop.set()

    @property
    def stopped(self) -> bool:
        return self._stop.is_set()
