"""Data models for synthetic candles, symbol configuration and news sentiment.

Values are plain floats: the series are synthetic and rounded to cents at
generation time, and every downstream statistic is an approximation.
All models are frozen so the market context can be shared read-only.
"""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Candle:
    """One trading day's OHLCV summary.

    Invariant: low <= min(open, close) <= max(open, close) <= high, volume >= 0.
    """

    date: date
    open: float
    high: float
    low: float
    close: float
    volume: int

    def to_dict(self) -> dict:
        """Serialize to dict for JSON output (date as ISO string)."""
        return {
            "date": self.date.isoformat(),
            "open": self.open,
            "high": self.high,
            "low": self.low,
            "close": self.close,
            "volume": self.volume,
        }


@dataclass(frozen=True)
class SeriesConfig:
    """Static generation parameters and metadata for one symbol."""

    name: str
    sector: str
    beta: float
    base_price: float
    volatility: float  # daily volatility factor, e.g. 0.018


@dataclass(frozen=True)
class MarketSeries:
    """A symbol's metadata plus its generated candle history (oldest first)."""

    symbol: str
    name: str
    sector: str
    beta: float
    historical: tuple[Candle, ...]

    def describe(self) -> dict:
        """Return the symbol listing entry: symbol, name and sector."""
        return {"symbol": self.symbol, "name": self.name, "sector": self.sector}


@dataclass(frozen=True)
class SentimentItem:
    """A hand-authored news item with a precomputed sentiment score.

    Attributes:
        score: -1 (bearish) to 1 (bullish).
        relevance: 0 to 1.
    """

    id: str
    symbol: str
    headline: str
    summary: str
    source: str
    score: float
    relevance: float
    date: date

    def to_dict(self) -> dict:
        """Serialize to dict for JSON output (date as ISO string)."""
        return {
            "id": self.id,
            "symbol": self.symbol,
            "headline": self.headline,
            "summary": self.summary,
            "source": self.source,
            "score": self.score,
            "relevance": self.relevance,
            "date": self.date.isoformat(),
        }
