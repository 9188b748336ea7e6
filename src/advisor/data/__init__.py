"""Synthetic market data package.

Provides the seeded random stream, the synthetic OHLCV series generator,
the static sentiment table, and the immutable MarketContext that holds
everything built at process start.
"""

from advisor.data.generator import generate_historical_series
from advisor.data.market import MarketContext, build_market_context
from advisor.data.models import Candle, MarketSeries, SentimentItem, SeriesConfig
from advisor.data.rng import Mulberry32, SeededRandom, string_to_seed

__all__ = [
    "Candle",
    "MarketContext",
    "MarketSeries",
    "Mulberry32",
    "SeededRandom",
    "SentimentItem",
    "SeriesConfig",
    "build_market_context",
    "generate_historical_series",
    "string_to_seed",
]
