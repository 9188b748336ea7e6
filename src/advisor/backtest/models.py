"""Data models for strategy backtests.

Defines the strategy identity/configuration, per-trade records (Trade), and
the per-run summary (StrategyEvaluation). Percent fields are expressed in
percent units (12.5 means 12.5%) and rounded to 2 decimals, matching what
the dashboard displays.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum


class StrategyId(str, Enum):
    """Identifiers of the built-in strategies."""

    MOMENTUM = "momentum"
    MEAN_REVERSION = "meanReversion"
    BREAKOUT = "breakout"


class RiskLabel(str, Enum):
    """Sizing posture suggested for a strategy."""

    CONSERVATIVE = "Conservative"
    BALANCED = "Balanced"
    AGGRESSIVE = "Aggressive"


@dataclass(frozen=True)
class StrategyConfig:
    """Static description of one rule-based strategy."""

    id: StrategyId
    name: str
    description: str
    risk_label: RiskLabel

    def to_dict(self) -> dict:
        """Serialize to dict for JSON output."""
        return {
            "id": self.id.value,
            "name": self.name,
            "description": self.description,
            "risk_label": self.risk_label.value,
        }


@dataclass(frozen=True)
class Trade:
    """One closed long position.

    Attributes:
        entry_price: Close of the entry bar, rounded to cents.
        exit_price: Close of the exit bar, rounded to cents.
        return_pct: Trade return in percent, rounded to 2 decimals.
        holding_days: Bars from entry to exit, both inclusive.
    """

    entry_date: date
    exit_date: date
    entry_price: float
    exit_price: float
    return_pct: float
    holding_days: int

    @property
    def is_win(self) -> bool:
        return self.return_pct > 0

    def to_dict(self) -> dict:
        """Serialize to dict for JSON output (dates as ISO strings)."""
        return {
            "entry_date": self.entry_date.isoformat(),
            "exit_date": self.exit_date.isoformat(),
            "entry_price": self.entry_price,
            "exit_price": self.exit_price,
            "return_pct": self.return_pct,
            "holding_days": self.holding_days,
        }


@dataclass
class StrategyEvaluation:
    """Result of simulating one strategy over one candle window.

    total_return_pct, cagr, max_drawdown and win_rate are in percent units.
    confidence is a trade-count heuristic in [0, 1], not a statistical
    confidence level.
    """

    id: StrategyId
    name: str
    description: str
    risk_label: RiskLabel
    total_return_pct: float
    cagr: float
    max_drawdown: float
    win_rate: float
    recommendation: str
    confidence: float
    trades: list[Trade] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Serialize to dict for JSON output.

        Returns:
            Dict with strategy identity, summary statistics and trades.
        """
        return {
            "id": self.id.value,
            "name": self.name,
            "description": self.description,
            "risk_label": self.risk_label.value,
            "trades": [t.to_dict() for t in self.trades],
            "total_return_pct": self.total_return_pct,
            "cagr": self.cagr,
            "max_drawdown": self.max_drawdown,
            "win_rate": self.win_rate,
            "recommendation": self.recommendation,
            "confidence": self.confidence,
        }
