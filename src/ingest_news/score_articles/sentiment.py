"""Sentiment scoring and trend labels."""

from typing import Protocol

from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer

BULLISH_THRESHOLD = 0.2
BEARISH_THRESHOLD = -0.2


class SentimentScorer(Protocol):
    def score(self, text: str) -> float:
        ...


class VaderSentimentScorer:
    """Compound polarity score in [-1, 1] from VADER."""

    def __init__(self, analyzer: SentimentIntensityAnalyzer | None = None):
        self._analyzer = analyzer or SentimentIntensityAnalyzer()

    def score(self, text: str) -> float:
        return float(self._analyzer.polarity_scores(text)["compound"])


def trend_label(score: float) -> str:
    """Map a sentiment score to bullish, bearish or neutral.

    Both thresholds are strict, so exactly 0.2 and -0.2 are neutral.
    """
    if score > BULLISH_THRESHOLD:
        return "bullish"
    if score < BEARISH_THRESHOLD:
        return "bearish"
    return "neutral"
