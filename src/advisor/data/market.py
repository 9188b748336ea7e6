"""Immutable market context built once at startup.

build_market_context() is the single initialization step: it generates every
configured series and resolves the sentiment table against one reference
date. Query functions receive the context explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from advisor.config import MarketSettings
from advisor.data.generator import generate_historical_series
from advisor.data.models import MarketSeries, SentimentItem, SeriesConfig
from advisor.data.sentiment import build_news_sentiment
from advisor.data.universe import SERIES_CONFIG
from advisor.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class MarketContext:
    """Read-only market state shared by all queries.

    Attributes:
        series: Generated series in configuration order.
        news: Sentiment items for all symbols.
        reference_date: The "today" used for generation and news dates.
    """

    series: tuple[MarketSeries, ...]
    news: tuple[SentimentItem, ...]
    reference_date: date

    @property
    def symbols(self) -> list[str]:
        """Configured symbols in order."""
        return [s.symbol for s in self.series]

    def get_series(self, symbol: str) -> MarketSeries | None:
        """Return the series for symbol, or None if it is not configured."""
        for series in self.series:
            if series.symbol == symbol:
                return series
        return None

    def news_for(self, symbol: str) -> list[SentimentItem]:
        """Return sentiment items for symbol in table order."""
        return [item for item in self.news if item.symbol == symbol]


def build_market_context(
    settings: MarketSettings | None = None,
    today: date | None = None,
    universe: dict[str, SeriesConfig] | None = None,
) -> MarketContext:
    """Generate all series and sentiment items into a MarketContext.

    Args:
        settings: History length and optional fixed reference date.
        today: Overrides settings.reference_date when given.
        universe: Symbol configuration. Defaults to SERIES_CONFIG.

    Returns:
        Frozen MarketContext.
    """
    if settings is None:
        settings = MarketSettings()
    if universe is None:
        universe = SERIES_CONFIG
    reference_date = today or settings.reference_date or date.today()

    series = tuple(
        MarketSeries(
            symbol=symbol,
            name=config.name,
            sector=config.sector,
            beta=config.beta,
            historical=generate_historical_series(
                symbol, config, days=settings.history_days, today=reference_date
            ),
        )
        for symbol, config in universe.items()
    )
    news = build_news_sentiment(reference_date)

    logger.info(
        "market_context_built",
        symbols=len(series),
        history_days=settings.history_days,
        reference_date=reference_date.isoformat(),
        news_items=len(news),
    )
    return MarketContext(series=series, news=news, reference_date=reference_date)
