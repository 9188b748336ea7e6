"""Deterministic synthetic OHLCV series generation.

Each symbol's series is a pure function of (symbol, days, today): the random
stream is seeded from a hash of the symbol plus the requested day count, so
repeated calls reproduce identical candles.
"""

import math
from collections.abc import Callable
from datetime import date, timedelta

from advisor.data.models import Candle, SeriesConfig
from advisor.data.rng import Mulberry32, SeededRandom, string_to_seed

#: Prices never fall below this floor.
PRICE_FLOOR = 5.0

DEFAULT_HISTORY_DAYS = 390

_SATURDAY = 5


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def generate_historical_series(
    symbol: str,
    config: SeriesConfig,
    days: int = DEFAULT_HISTORY_DAYS,
    today: date | None = None,
    rng_factory: Callable[[int], SeededRandom] = Mulberry32,
) -> tuple[Candle, ...]:
    """Generate a deterministic daily candle series for a symbol.

    Walks backward ``days`` calendar days from ``today`` (inclusive), skipping
    weekends. For each trading day four uniform draws perturb the previous
    close into a new close (drift) and open (gap) and widen them into a
    high/low range; a fifth draw sets the volume.

    Args:
        symbol: Ticker symbol; part of the seed.
        config: Base price and volatility factor for the symbol.
        days: Number of calendar days to cover. Zero or negative yields ().
        today: Last calendar day of the series. Defaults to date.today().
        rng_factory: Builds the random stream from the integer seed.

    Returns:
        Tuple of Candle ordered oldest to newest.
    """
    if days <= 0:
        return ()
    if today is None:
        today = date.today()

    rng = rng_factory(string_to_seed(symbol) + days)
    volatility = config.volatility
    previous_close = config.base_price
    series: list[Candle] = []

    for offset in range(days - 1, -1, -1):
        day = today - timedelta(days=offset)
        if day.weekday() >= _SATURDAY:
            continue

        drift = (rng() - 0.48) * volatility * 1.6
        gap = (rng() - 0.5) * volatility
        close = max(PRICE_FLOOR, previous_close * (1 + drift))
        open_ = max(PRICE_FLOOR, previous_close * (1 + gap))
        high = max(open_, close) * (1 + rng() * volatility * 0.9)
        low = min(open_, close) * (1 - rng() * volatility * 0.9 * 0.8)
        volume = _round_half_up(800_000 + rng() * 1_200_000) * (1 + volatility * 4)

        previous_close = close
        series.append(
            Candle(
                date=day,
                open=round(open_, 2),
                high=round(high, 2),
                low=round(low, 2),
                close=round(close, 2),
                volume=_round_half_up(volume),
            )
        )

    return tuple(series)
