"""Capital projection and allocation advice for a risk budget.

Scales the portion of capital put at risk by the window's annual return and
value at risk. VaR is a one-day figure, scaled to the horizon by the square
root of horizon months (22 trading days each).

Formulas:
  exposure        = capital * risk_tolerance / 100
  expected        = exposure * (1 + annual_return)
  downside        = exposure * (1 - VaR * sqrt(horizon_days / 22))
  momentum_payoff = exposure * (annual_return + 0.08)
  expected_value  = exposure * period_performance_pct / 100

The trade plan is anchored to the latest close: target at +12%, stop at -5%.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from advisor.analytics.metrics import RiskMetrics
from advisor.exceptions import UnknownTimeRangeError

TRADING_DAYS_PER_MONTH = 22

#: Horizon presets offered by the dashboard, label -> trading days.
TIME_RANGES: dict[str, int] = {
    "1M": 22,
    "3M": 66,
    "6M": 132,
    "9M": 198,
    "1Y": 252,
}

CAPITAL_OPTIONS: tuple[int, ...] = (10_000, 25_000, 50_000, 100_000, 250_000)

#: Extra annual return assumed when the trend persists.
MOMENTUM_PREMIUM = 0.08
TARGET_MULTIPLE = 1.12
STOP_MULTIPLE = 0.95

#: Volatility (in percent) may exceed the risk tolerance by this much before
#: the advice switches to staggered entries.
_TOLERANCE_HEADROOM = 25

_OVER_BUDGET_TEXT = (
    "Current volatility exceeds risk budget; stagger entries and cap single-position "
    "exposure at 3-4% of portfolio."
)
_WITHIN_BUDGET_TEXT = (
    "Volatility profile aligns with risk appetite; scale into positions in 2-3 tranches."
)


@dataclass(frozen=True)
class TradePlan:
    """Entry, target and stop levels anchored to the latest close."""

    entry_price: float
    target_price: float
    stop_price: float

    def to_dict(self) -> dict:
        """Serialize to dict for JSON output."""
        return {
            "entry_price": self.entry_price,
            "target_price": self.target_price,
            "stop_price": self.stop_price,
        }


@dataclass(frozen=True)
class CapitalProjection:
    """Projected outcomes of the exposed capital over a horizon.

    expected, momentum_payoff and downside are the neutral, momentum and
    stress scenarios. expected_value scales exposure by the window's
    first-to-last close performance.
    """

    capital: float
    risk_tolerance: int
    horizon_days: int
    exposure: float
    expected: float
    downside: float
    momentum_payoff: float
    expected_value: float
    trade_plan: TradePlan
    allocation_advice: str

    def to_dict(self) -> dict:
        """Serialize to dict for JSON output."""
        return {
            "capital": self.capital,
            "risk_tolerance": self.risk_tolerance,
            "horizon_days": self.horizon_days,
            "exposure": self.exposure,
            "expected": self.expected,
            "downside": self.downside,
            "momentum_payoff": self.momentum_payoff,
            "expected_value": self.expected_value,
            "trade_plan": self.trade_plan.to_dict(),
            "allocation_advice": self.allocation_advice,
        }


def resolve_time_range(label: str) -> int:
    """Return trading days for a horizon label such as "6M".

    Raises:
        UnknownTimeRangeError: If label is not one of TIME_RANGES.
    """
    try:
        return TIME_RANGES[label.upper()]
    except KeyError:
        raise UnknownTimeRangeError(
            f"Unknown time range {label!r}; expected one of {', '.join(TIME_RANGES)}"
        ) from None


def allocation_advice(annual_volatility: float, risk_tolerance: int) -> str:
    """Advice text comparing annualized volatility against the risk tolerance."""
    if annual_volatility * 100 > risk_tolerance + _TOLERANCE_HEADROOM:
        return _OVER_BUDGET_TEXT
    return _WITHIN_BUDGET_TEXT


def build_trade_plan(latest_close: float) -> TradePlan:
    return TradePlan(
        entry_price=latest_close,
        target_price=latest_close * TARGET_MULTIPLE,
        stop_price=latest_close * STOP_MULTIPLE,
    )


def project_capital(
    capital: float,
    risk_tolerance: int,
    metrics: RiskMetrics,
    horizon_days: int,
    latest_close: float = 0.0,
    period_performance_pct: float = 0.0,
) -> CapitalProjection:
    """Project capital outcomes for the exposed share of capital.

    Args:
        capital: Total capital.
        risk_tolerance: Percent of capital exposed, 0-100.
        metrics: Risk metrics of the analyzed window.
        horizon_days: Projection horizon in trading days.
        latest_close: Last close of the window; anchors the trade plan.
        period_performance_pct: First-to-last close change of the window,
            in percent.

    Returns:
        CapitalProjection with scenarios, trade plan and allocation advice.
    """
    exposure = capital * (risk_tolerance / 100)
    expected = exposure * (1 + metrics.annual_return)
    horizon_months = max(horizon_days, 0) / TRADING_DAYS_PER_MONTH
    downside = exposure * (1 - metrics.value_at_risk * math.sqrt(horizon_months))

    return CapitalProjection(
        capital=capital,
        risk_tolerance=risk_tolerance,
        horizon_days=horizon_days,
        exposure=exposure,
        expected=expected,
        downside=downside,
        momentum_payoff=exposure * (metrics.annual_return + MOMENTUM_PREMIUM),
        expected_value=exposure * (period_performance_pct / 100),
        trade_plan=build_trade_plan(latest_close),
        allocation_advice=allocation_advice(metrics.annual_volatility, risk_tolerance),
    )
