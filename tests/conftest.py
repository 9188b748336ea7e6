"""Shared test fixtures for the investment advisor."""

from collections.abc import Callable
from datetime import date, timedelta

import pytest

from advisor.config import MarketSettings
from advisor.data.market import MarketContext, build_market_context
from advisor.data.models import Candle
from advisor.snapshot import SnapshotAssembler

#: A Friday, so the generated series ends on a trading day.
REFERENCE_DATE = date(2025, 6, 13)


def make_candles(closes: list[float], start: date = date(2025, 1, 6)) -> list[Candle]:
    """Build weekday candles with the given closes.

    open = close, high = close + 0.1, low = close - 0.1, volume = 1_000_000.
    """
    candles: list[Candle] = []
    day = start
    for close in closes:
        while day.weekday() >= 5:
            day += timedelta(days=1)
        candles.append(
            Candle(
                date=day,
                open=close,
                high=round(close + 0.1, 2),
                low=round(close - 0.1, 2),
                close=close,
                volume=1_000_000,
            )
        )
        day += timedelta(days=1)
    return candles


@pytest.fixture
def candle_factory() -> Callable[..., list[Candle]]:
    """Return the make_candles helper."""
    return make_candles


@pytest.fixture(scope="session")
def market_context() -> MarketContext:
    """MarketContext generated against a fixed reference date."""
    return build_market_context(MarketSettings(history_days=390), today=REFERENCE_DATE)


@pytest.fixture
def assembler(market_context: MarketContext) -> SnapshotAssembler:
    """SnapshotAssembler with default settings over the shared context."""
    return SnapshotAssembler(market_context)
