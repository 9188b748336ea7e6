"""Return, volatility and risk statistics over a candle slice.

Pure float analytics: daily_returns, mean, standard_deviation,
max_drawdown, value_at_risk, sharpe_ratio, and compute_risk_metrics which
bundles them into RiskMetrics. Every function degrades to 0 on empty or
too-short input instead of raising.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from advisor.data.models import Candle

TRADING_DAYS = 252
RISK_FREE_RATE = 0.02
VAR_CONFIDENCE = 0.95


@dataclass(frozen=True)
class RiskMetrics:
    """Scalar risk statistics for one candle window. Computed fresh per query."""

    annual_return: float
    annual_volatility: float
    sharpe_ratio: float
    max_drawdown: float
    value_at_risk: float
    beta: float
    average_daily_return: float
    best_day: float
    worst_day: float

    def to_dict(self) -> dict:
        """Serialize to dict for JSON output."""
        return {
            "annual_return": self.annual_return,
            "annual_volatility": self.annual_volatility,
            "sharpe_ratio": self.sharpe_ratio,
            "max_drawdown": self.max_drawdown,
            "value_at_risk": self.value_at_risk,
            "beta": self.beta,
            "average_daily_return": self.average_daily_return,
            "best_day": self.best_day,
            "worst_day": self.worst_day,
        }


def daily_returns(candles: Sequence[Candle]) -> list[float]:
    """Close-to-close simple returns; empty when fewer than 2 candles."""
    return [
        current.close / previous.close - 1
        for previous, current in zip(candles, candles[1:])
    ]


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean, 0 for an empty sequence."""
    if not values:
        return 0.0
    return sum(values) / len(values)


def standard_deviation(values: Sequence[float]) -> float:
    """Sample standard deviation (N-1 denominator); 0 with fewer than 2 values."""
    if len(values) < 2:
        return 0.0
    avg = mean(values)
    variance = sum((v - avg) ** 2 for v in values) / (len(values) - 1)
    return math.sqrt(variance)


def annualized_return(mean_daily_return: float, trading_days: int = TRADING_DAYS) -> float:
    """Compound the mean daily return over a trading year."""
    return (1 + mean_daily_return) ** trading_days - 1


def annualized_volatility(std_daily_return: float, trading_days: int = TRADING_DAYS) -> float:
    """Scale daily volatility by sqrt(trading_days)."""
    return std_daily_return * math.sqrt(trading_days)


def sharpe_ratio(
    annual_return: float,
    annual_volatility: float,
    risk_free_rate: float = RISK_FREE_RATE,
) -> float:
    """Excess annual return per unit of annual volatility.

    Returns 0 when volatility is 0. That is a division guard, not a Sharpe
    ratio of zero.
    """
    if annual_volatility == 0:
        return 0.0
    return (annual_return - risk_free_rate) / annual_volatility


def max_drawdown(path: Iterable[Candle] | Iterable[float]) -> float:
    """Largest running peak-to-trough decline as a fraction of the peak.

    Args:
        path: Candles (their close prices are used) or plain values such as
            an equity curve, in chronological order.

    Returns:
        Drawdown in [0, 1]; 0 for an empty path.
    """
    values = [p.close if isinstance(p, Candle) else p for p in path]
    if not values:
        return 0.0

    peak = values[0]
    max_dd = 0.0
    for value in values:
        peak = max(peak, value)
        if peak > 0:
            max_dd = max(max_dd, (peak - value) / peak)
    return max_dd


def value_at_risk(returns: Sequence[float], confidence: float = VAR_CONFIDENCE) -> float:
    """Historical one-period VaR as a positive loss magnitude.

    Takes the return at position floor((1 - confidence) * n) of the
    ascending-sorted returns.

    Args:
        returns: Period returns.
        confidence: Confidence level, default 95%.

    Returns:
        Absolute value of the selected return; 0 for no returns.
    """
    if not returns:
        return 0.0
    ordered = sorted(returns)
    index = math.floor((1 - confidence) * len(ordered))
    if not 0 <= index < len(ordered):
        return 0.0
    return abs(ordered[index])


def compute_risk_metrics(
    candles: Sequence[Candle],
    beta: float,
    trading_days: int = TRADING_DAYS,
    risk_free_rate: float = RISK_FREE_RATE,
    var_confidence: float = VAR_CONFIDENCE,
) -> RiskMetrics:
    """Compute all RiskMetrics for a candle window.

    Args:
        candles: Chronological candle window.
        beta: The symbol's configured market beta (passed through).
        trading_days: Periods per year for annualization.
        risk_free_rate: Annual risk-free rate for the Sharpe ratio.
        var_confidence: Confidence level for value at risk.

    Returns:
        RiskMetrics. An empty or single-candle window yields zeros.
    """
    returns = daily_returns(candles)
    avg_daily = mean(returns)
    annual_ret = annualized_return(avg_daily, trading_days)
    annual_vol = annualized_volatility(standard_deviation(returns), trading_days)

    return RiskMetrics(
        annual_return=annual_ret,
        annual_volatility=annual_vol,
        sharpe_ratio=sharpe_ratio(annual_ret, annual_vol, risk_free_rate),
        max_drawdown=max_drawdown(candles),
        value_at_risk=value_at_risk(returns, var_confidence),
        beta=beta,
        average_daily_return=avg_daily,
        best_day=max([*returns, 0.0]),
        worst_day=min([*returns, 0.0]),
    )
