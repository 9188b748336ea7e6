"""Single-pass long-only strategy simulator over a candle window.

Walks the candles chronologically from the second bar, evaluating one
strategy's entry/exit rule per bar against a single FLAT/LONG position.
Each closed trade compounds equity by exit/entry; there are no fees,
slippage or position sizing. An open position at the final bar is closed
at that bar's close.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from advisor.analytics.indicators import highest_high, rsi, sma
from advisor.analytics.metrics import TRADING_DAYS, max_drawdown
from advisor.backtest.models import StrategyConfig, StrategyEvaluation, StrategyId, Trade
from advisor.backtest.presets import STRATEGIES
from advisor.data.models import Candle
from advisor.logging import get_logger

logger = get_logger(__name__)

MIN_CANDLES = 30
MIN_CAPITAL = 1.0

FAST_SMA_PERIOD = 10
SLOW_SMA_PERIOD = 40
RSI_PERIOD = 14
RSI_ENTRY_BELOW = 40.0
RSI_EXIT_ABOVE = 55.0
BREAKOUT_LOOKBACK = 20

INSUFFICIENT_DATA_TEXT = "Insufficient data to evaluate strategy."
INSUFFICIENT_DATA_CONFIDENCE = 0.2

_OUTPERFORM_TEXT = (
    "Outperformed buy-and-hold over the period with attractive risk-adjusted returns."
)
_PROFITABLE_TEXT = (
    "Moderately profitable, best paired with tight risk controls and diversification."
)
_UNDERPERFORM_TEXT = (
    "Underperformed benchmark, deploy cautiously or wait for stronger signal confirmation."
)


def recommendation_for(total_return_pct: float) -> str:
    """Pick the fixed recommendation text for a total return in percent."""
    if total_return_pct > 12:
        return _OUTPERFORM_TEXT
    if total_return_pct > 0:
        return _PROFITABLE_TEXT
    return _UNDERPERFORM_TEXT


def confidence_for(trade_count: int) -> float:
    """Heuristic confidence bucketed by number of trades."""
    if trade_count >= 6:
        return 0.82
    if trade_count >= 3:
        return 0.64
    return 0.42


class StrategySimulator:
    """Replays one strategy over a candle window.

    Args:
        config: Strategy to simulate.
        candles: Chronological candle window.
        capital: Starting equity, floored at MIN_CAPITAL. Only ratios are
            reported, so any positive value gives the same percentages.
        trading_days: Periods per year for CAGR.
        min_candles: Windows shorter than this are not simulated.
    """

    def __init__(
        self,
        config: StrategyConfig,
        candles: Sequence[Candle],
        capital: float,
        trading_days: int = TRADING_DAYS,
        min_candles: int = MIN_CANDLES,
    ) -> None:
        self._config = config
        self._candles = candles
        self._capital = max(capital, MIN_CAPITAL)
        self._trading_days = trading_days
        self._min_candles = min_candles

        self._closes = [c.close for c in candles]
        self._sma_fast: list[float] = []
        self._sma_slow: list[float] = []
        self._rsi: list[float] = []
        self._reset()

    def _reset(self) -> None:
        """Start from FLAT with the initial capital and no trades."""
        # Position state: FLAT when entry index is None
        self._entry_index: int | None = None
        self._entry_price = 0.0

        self._equity = self._capital
        self._equity_curve: list[float] = [self._capital]
        self._trades: list[Trade] = []

    def run(self) -> StrategyEvaluation:
        """Execute the simulation and summarize it.

        Each call replays the window from scratch, so repeated calls return
        equal evaluations.

        Returns:
            StrategyEvaluation. Windows below min_candles get a zero-trade
            evaluation with confidence 0.2.
        """
        if len(self._candles) < self._min_candles:
            logger.debug(
                "strategy_insufficient_data",
                strategy=self._config.id.value,
                candles=len(self._candles),
                min_candles=self._min_candles,
            )
            return self._insufficient_result()

        self._reset()
        self._sma_fast = sma(self._closes, FAST_SMA_PERIOD)
        self._sma_slow = sma(self._closes, SLOW_SMA_PERIOD)
        self._rsi = rsi(self._closes, RSI_PERIOD)

        last_index = len(self._candles) - 1
        for i in range(1, len(self._candles)):
            self._equity_curve.append(self._equity)
            enter, exit_ = self._signals(i)
            if self._entry_index is None:
                # A position opened on the final bar could never close later
                if enter and i < last_index:
                    self._entry_index = i
                    self._entry_price = self._candles[i].close
            elif exit_:
                self._close_position(i)

        if self._entry_index is not None:
            self._close_position(last_index)

        return self._summarize()

    def _signals(self, i: int) -> tuple[bool, bool]:
        """Return (entry, exit) conditions for bar i under the configured strategy."""
        close = self._candles[i].close
        strategy_id = self._config.id

        if strategy_id is StrategyId.MOMENTUM:
            fast_prev, fast = self._sma_fast[i - 1], self._sma_fast[i]
            slow_prev, slow = self._sma_slow[i - 1], self._sma_slow[i]
            cross_up = fast_prev <= slow_prev and fast > slow
            cross_down = fast_prev >= slow_prev and fast < slow
            return cross_up, cross_down

        if strategy_id is StrategyId.MEAN_REVERSION:
            return self._rsi[i] < RSI_ENTRY_BELOW, self._rsi[i] > RSI_EXIT_ABOVE

        if strategy_id is StrategyId.BREAKOUT:
            breakout = close > highest_high(self._candles, BREAKOUT_LOOKBACK, i - 1)
            breakdown = close < self._sma_fast[i]
            return breakout, breakdown

        return False, False

    def _close_position(self, exit_index: int) -> None:
        """Record a trade for the open position and compound equity."""
        entry_index = self._entry_index
        if entry_index is None:
            return

        exit_price = self._candles[exit_index].close
        trade_return = exit_price / self._entry_price - 1
        self._equity *= 1 + trade_return

        self._trades.append(
            Trade(
                entry_date=self._candles[entry_index].date,
                exit_date=self._candles[exit_index].date,
                entry_price=round(self._entry_price, 2),
                exit_price=round(exit_price, 2),
                return_pct=round(trade_return * 100, 2),
                holding_days=exit_index - entry_index + 1,
            )
        )
        self._entry_index = None
        self._entry_price = 0.0

    def _summarize(self) -> StrategyEvaluation:
        growth = self._equity / self._capital
        total_return_pct = (growth - 1) * 100
        if not math.isfinite(total_return_pct):
            total_return_pct = 0.0

        years = max(1 / self._trading_days, len(self._candles) / self._trading_days)
        cagr = (growth ** (1 / years) - 1) * 100

        wins = sum(1 for t in self._trades if t.is_win)
        win_rate = wins / len(self._trades) * 100 if self._trades else 0.0

        drawdown = max_drawdown(self._equity_curve)

        return StrategyEvaluation(
            id=self._config.id,
            name=self._config.name,
            description=self._config.description,
            risk_label=self._config.risk_label,
            trades=list(self._trades),
            total_return_pct=round(total_return_pct, 2),
            cagr=round(cagr, 2),
            max_drawdown=round(drawdown * 100, 2),
            win_rate=round(win_rate, 2),
            recommendation=recommendation_for(total_return_pct),
            confidence=confidence_for(len(self._trades)),
        )

    def _insufficient_result(self) -> StrategyEvaluation:
        return StrategyEvaluation(
            id=self._config.id,
            name=self._config.name,
            description=self._config.description,
            risk_label=self._config.risk_label,
            trades=[],
            total_return_pct=0.0,
            cagr=0.0,
            max_drawdown=0.0,
            win_rate=0.0,
            recommendation=INSUFFICIENT_DATA_TEXT,
            confidence=INSUFFICIENT_DATA_CONFIDENCE,
        )


def run_strategy_simulation(
    config: StrategyConfig,
    candles: Sequence[Candle],
    capital: float,
    trading_days: int = TRADING_DAYS,
    min_candles: int = MIN_CANDLES,
) -> StrategyEvaluation:
    """Simulate one strategy over candles starting from capital."""
    return StrategySimulator(
        config, candles, capital, trading_days=trading_days, min_candles=min_candles
    ).run()


def run_all_strategies(
    candles: Sequence[Candle],
    capital: float,
    trading_days: int = TRADING_DAYS,
    min_candles: int = MIN_CANDLES,
) -> list[StrategyEvaluation]:
    """Simulate every built-in strategy, in configuration order."""
    return [
        run_strategy_simulation(
            config, candles, capital, trading_days=trading_days, min_candles=min_candles
        )
        for config in STRATEGIES
    ]
