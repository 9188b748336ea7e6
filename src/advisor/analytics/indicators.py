"""Technical indicators used by the strategy simulator.

All indicators return a list aligned with the input (same length) so the
simulator can index them by bar.
"""

from collections.abc import Sequence

from advisor.analytics.metrics import mean
from advisor.data.models import Candle

#: RSI value emitted before the smoothing formula activates.
RSI_WARMUP_VALUE = 50.0


def sma(values: Sequence[float], period: int) -> list[float]:
    """Simple moving average over a trailing window.

    Positions with fewer than ``period`` values available carry the raw
    value itself rather than a partial average.
    """
    result: list[float] = []
    for i, value in enumerate(values):
        if i + 1 < period:
            result.append(value)
            continue
        result.append(mean(values[i - period + 1 : i + 1]))
    return result


def rsi(values: Sequence[float], period: int = 14) -> list[float]:
    """Relative strength index with a simplified running average.

    During warm-up (the first ``period`` changes) raw gains and losses are
    summed and 50 is emitted. After that each step applies
    ``avg = (prev * (period - 1) + current) / period`` to the running values,
    seeded with those sums rather than Wilder's initial averages.
    The output is front-padded with 50 to match the input length.

    Args:
        values: Closing prices, oldest first.
        period: Smoothing period.

    Returns:
        RSI values in [0, 100], one per input value.
    """
    result: list[float] = []
    gains = 0.0
    losses = 0.0
    for i in range(1, len(values)):
        change = values[i] - values[i - 1]
        if i <= period:
            if change >= 0:
                gains += change
            else:
                losses -= change
            result.append(RSI_WARMUP_VALUE)
            continue

        avg_gain = (gains * (period - 1) + max(change, 0.0)) / period
        avg_loss = (losses * (period - 1) + max(-change, 0.0)) / period
        gains = avg_gain
        losses = avg_loss
        if avg_loss == 0:
            result.append(100.0)
        else:
            rs = avg_gain / avg_loss
            result.append(100 - 100 / (1 + rs))

    padding = [RSI_WARMUP_VALUE] * (len(values) - len(result))
    return padding + result


def highest_high(candles: Sequence[Candle], period: int, index: int) -> float:
    """Highest high over the ``period`` bars ending at ``index`` (inclusive).

    Returns -inf when the window is empty (index < 0).
    """
    start = max(0, index - period + 1)
    return max((c.high for c in candles[start : index + 1]), default=float("-inf"))
