"""Built-in strategy configurations.

Three fixed strategies, one per risk posture:
- Momentum Crossover: Balanced, 10/40 SMA crossovers.
- RSI Mean Reversion: Conservative, buys RSI dips below 40.
- Volatility Breakout: Aggressive, 20-day breakouts with SMA10 exits.

Order matters: it is the order strategies are evaluated and reported in.
"""

from advisor.backtest.models import RiskLabel, StrategyConfig, StrategyId
from advisor.exceptions import UnknownStrategyError

STRATEGIES: tuple[StrategyConfig, ...] = (
    StrategyConfig(
        id=StrategyId.MOMENTUM,
        name="Momentum Crossover",
        description="Tracks 10/40 day momentum crossovers to follow primary trend strength.",
        risk_label=RiskLabel.BALANCED,
    ),
    StrategyConfig(
        id=StrategyId.MEAN_REVERSION,
        name="RSI Mean Reversion",
        description="Seeks oversold opportunities when relative strength dips below 40.",
        risk_label=RiskLabel.CONSERVATIVE,
    ),
    StrategyConfig(
        id=StrategyId.BREAKOUT,
        name="Volatility Breakout",
        description="Targets 20-day closing breakouts with disciplined trailing exits.",
        risk_label=RiskLabel.AGGRESSIVE,
    ),
)


def get_strategy(strategy_id: str | StrategyId) -> StrategyConfig:
    """Look up a built-in strategy by id.

    Args:
        strategy_id: A StrategyId or its string value (e.g. "meanReversion").

    Returns:
        The matching StrategyConfig.

    Raises:
        UnknownStrategyError: If no strategy has that id.
    """
    for config in STRATEGIES:
        if config.id == strategy_id:
            return config
    raise UnknownStrategyError(f"Unknown strategy: {strategy_id!r}")
