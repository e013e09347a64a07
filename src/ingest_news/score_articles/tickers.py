"""Ticker symbol recognition."""

import re
from typing import Iterable, Protocol

DEFAULT_FALLBACK_TICKER = "SPY"

DEFAULT_TICKER_LEXICON = frozenset({
    "AAPL", "GOOGL", "META", "MSFT", "NVDA", "AMZN",
    "TSLA", "SPY", "QQQ", "LMT", "XOM", "NFLX",
    "ORCL", "AMD", "INTC", "AVGO", "JPM", "BAC",
})

MIN_TICKER_LENGTH = 2
MAX_TICKER_LENGTH = 5

_TOKEN_SEPARATORS = re.compile(r"[\s,.;:()\"'?!]+")


class TickerRecognizer(Protocol):
    def extract(self, text: str) -> list[str]:
        ...


def tokenize(text: str) -> list[str]:
    """Split text on whitespace and common punctuation."""
    return [token for token in _TOKEN_SEPARATORS.split(text) if token]


class LexiconTickerRecognizer:
    """Matches tokens against a closed set of known symbols.

    Returns symbols in first-seen order without duplicates, or the
    fallback symbol alone when nothing matches.
    """

    def __init__(
        self,
        lexicon: Iterable[str] = DEFAULT_TICKER_LEXICON,
        fallback: str = DEFAULT_FALLBACK_TICKER,
    ):
        self.lexicon = frozenset(symbol.strip().upper() for symbol in lexicon if symbol.strip())
        self.fallback = fallback.upper()

    def extract(self, text: str) -> list[str]:
        seen = set()
        tickers = []
        for token in tokenize(text):
            upper = token.upper()
            if not MIN_TICKER_LENGTH <= len(upper) <= MAX_TICKER_LENGTH:
                continue
            if upper not in self.lexicon or upper in seen:
                continue
            seen.add(upper)
            tickers.append(upper)

        return tickers or [self.fallback]


def join_tickers(tickers: list[str]) -> str:
    return ", ".join(tickers)


def split_tickers(raw: str) -> list[str]:
    """Split a stored ticker string back into upper-cased symbols."""
    return [token.strip().upper() for token in raw.split(",") if token.strip()]
