"""Strategy backtest package.

Runs the three built-in rule-based strategies over a candle window and
summarizes each run as a StrategyEvaluation.
"""

from advisor.backtest.engine import (
    StrategySimulator,
    run_all_strategies,
    run_strategy_simulation,
)
from advisor.backtest.models import (
    RiskLabel,
    StrategyConfig,
    StrategyEvaluation,
    StrategyId,
    Trade,
)
from advisor.backtest.presets import STRATEGIES, get_strategy

__all__ = [
    "RiskLabel",
    "STRATEGIES",
    "StrategyConfig",
    "StrategyEvaluation",
    "StrategyId",
    "StrategySimulator",
    "Trade",
    "get_strategy",
    "run_all_strategies",
    "run_strategy_simulation",
]
