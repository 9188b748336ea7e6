"""Tests for the strategy simulator.

Covers the insufficient-data policy, each strategy's entry/exit rule on
hand-built price paths, the force-close rule, summary statistics, and
trade invariants on generated market data.
"""

import pytest

from advisor.backtest.engine import (
    INSUFFICIENT_DATA_TEXT,
    StrategySimulator,
    confidence_for,
    recommendation_for,
    run_all_strategies,
    run_strategy_simulation,
)
from advisor.backtest.models import RiskLabel, StrategyId
from advisor.backtest.presets import STRATEGIES, get_strategy
from advisor.data.market import MarketContext
from advisor.exceptions import UnknownStrategyError

CAPITAL = 25_000.0


# ===========================================================================
# Insufficient data
# ===========================================================================


class TestInsufficientData:
    """Fewer than 30 candles skips simulation entirely."""

    @pytest.mark.parametrize("strategy_id", list(StrategyId))
    def test_29_candles(self, candle_factory, strategy_id: StrategyId) -> None:
        candles = candle_factory([100.0 + i for i in range(29)])
        result = run_strategy_simulation(get_strategy(strategy_id), candles, CAPITAL)

        assert result.trades == []
        assert result.confidence == 0.2
        assert result.recommendation == INSUFFICIENT_DATA_TEXT
        assert result.total_return_pct == 0.0
        assert result.cagr == 0.0
        assert result.max_drawdown == 0.0
        assert result.win_rate == 0.0

    def test_empty_window(self) -> None:
        for result in run_all_strategies([], CAPITAL):
            assert result.trades == []
            assert result.confidence == 0.2

    def test_30_candles_are_simulated(self, candle_factory) -> None:
        candles = candle_factory([100.0 + i for i in range(30)])
        result = run_strategy_simulation(get_strategy("breakout"), candles, CAPITAL)
        assert result.recommendation != INSUFFICIENT_DATA_TEXT
        assert result.confidence == 0.42

    def test_custom_min_candles(self, candle_factory) -> None:
        candles = candle_factory([100.0 + i for i in range(30)])
        result = run_strategy_simulation(
            get_strategy("breakout"), candles, CAPITAL, min_candles=50
        )
        assert result.recommendation == INSUFFICIENT_DATA_TEXT


# ===========================================================================
# Volatility breakout
# ===========================================================================


class TestBreakout:
    """Enter above the trailing 20-bar high, exit below SMA10."""

    def test_rising_path_force_closed_at_last_candle(self, candle_factory) -> None:
        """Entry at bar 1 (101 > 100.1), never breaks down, closed at bar 39."""
        candles = candle_factory([100.0 + i for i in range(40)])
        result = run_strategy_simulation(get_strategy("breakout"), candles, CAPITAL)

        assert len(result.trades) == 1
        trade = result.trades[0]
        assert trade.entry_date == candles[1].date
        assert trade.exit_date == candles[-1].date
        assert trade.entry_price == 101.0
        assert trade.exit_price == 139.0
        assert trade.holding_days == 39
        assert trade.return_pct == round((139 / 101 - 1) * 100, 2)

    def test_rising_path_summary(self, candle_factory) -> None:
        candles = candle_factory([100.0 + i for i in range(40)])
        result = run_strategy_simulation(get_strategy("breakout"), candles, CAPITAL)

        growth = 139 / 101
        assert result.total_return_pct == pytest.approx((growth - 1) * 100, abs=0.01)
        assert result.cagr == pytest.approx((growth ** (252 / 40) - 1) * 100, abs=0.01)
        assert result.win_rate == 100.0
        assert result.max_drawdown == 0.0
        assert result.confidence == 0.42
        assert result.recommendation == recommendation_for(result.total_return_pct)
        assert result.recommendation.startswith("Outperformed")

    def test_exit_when_close_drops_below_sma10(self, candle_factory) -> None:
        """Rises to 119, then falls by 2/bar; bar 21 closes at 115 < SMA10 115.6."""
        closes = [100.0 + i for i in range(20)] + [119.0 - 2 * j for j in range(1, 21)]
        candles = candle_factory(closes)
        result = run_strategy_simulation(get_strategy("breakout"), candles, CAPITAL)

        assert len(result.trades) == 1
        trade = result.trades[0]
        assert trade.entry_date == candles[1].date
        assert trade.exit_date == candles[21].date
        assert trade.exit_price == 115.0
        assert trade.holding_days == 21


# ===========================================================================
# Momentum crossover
# ===========================================================================


class TestMomentum:
    """Enter when SMA10 crosses above SMA40, exit on the reverse cross."""

    def test_cross_up_then_force_close(self, candle_factory) -> None:
        """SMA40 is warm at bar 39 where SMA10 first exceeds it."""
        candles = candle_factory([100.0 + i for i in range(60)])
        result = run_strategy_simulation(get_strategy("momentum"), candles, CAPITAL)

        assert len(result.trades) == 1
        trade = result.trades[0]
        assert trade.entry_date == candles[39].date
        assert trade.exit_date == candles[59].date
        assert trade.holding_days == 21

    def test_no_entry_on_final_candle(self, candle_factory) -> None:
        """With 40 candles the only cross is on the last bar, which is not traded."""
        candles = candle_factory([100.0 + i for i in range(40)])
        result = run_strategy_simulation(get_strategy("momentum"), candles, CAPITAL)

        assert result.trades == []
        assert result.total_return_pct == 0.0
        assert result.cagr == 0.0
        assert result.recommendation.startswith("Underperformed")

    def test_exit_on_reverse_cross(self, candle_factory) -> None:
        """Rises to 159 over 60 bars, then falls by 3/bar until SMA10 drops below SMA40."""
        closes = [100.0 + i for i in range(60)] + [159.0 - 3 * k for k in range(1, 41)]
        candles = candle_factory(closes)
        result = run_strategy_simulation(get_strategy("momentum"), candles, CAPITAL)

        assert len(result.trades) == 1
        trade = result.trades[0]
        assert trade.entry_date == candles[39].date
        assert trade.exit_date == candles[69].date
        assert trade.entry_price == 139.0
        assert trade.exit_price == 129.0
        assert trade.return_pct == -7.19

    def test_losing_trade_sets_drawdown(self, candle_factory) -> None:
        """Equity stays below its peak for the 30 bars after the losing exit."""
        closes = [100.0 + i for i in range(60)] + [159.0 - 3 * k for k in range(1, 41)]
        result = run_strategy_simulation(get_strategy("momentum"), candle_factory(closes), CAPITAL)

        assert result.total_return_pct == -7.19
        assert result.max_drawdown == 7.19
        assert result.win_rate == 0.0

    def test_flat_path_never_trades(self, candle_factory) -> None:
        candles = candle_factory([100.0] * 60)
        result = run_strategy_simulation(get_strategy("momentum"), candles, CAPITAL)
        assert result.trades == []


# ===========================================================================
# RSI mean reversion
# ===========================================================================


class TestMeanReversion:
    """Enter when RSI14 < 40, exit when RSI14 > 55."""

    def test_falling_path_enters_after_warmup(self, candle_factory) -> None:
        """RSI is the 50 placeholder through bar 14, then 0 on a steady decline."""
        candles = candle_factory([200.0 - i for i in range(40)])
        result = run_strategy_simulation(get_strategy("meanReversion"), candles, CAPITAL)

        assert len(result.trades) == 1
        trade = result.trades[0]
        assert trade.entry_date == candles[15].date
        assert trade.exit_date == candles[-1].date
        assert trade.return_pct < 0
        assert result.win_rate == 0.0
        assert result.total_return_pct < 0
        assert result.recommendation.startswith("Underperformed")

    def test_exit_when_rsi_recovers_above_55(self, candle_factory) -> None:
        """Falls 1/bar for 30 bars, then rallies 5/bar; RSI crosses 55 at bar 41."""
        closes = [200.0 - i for i in range(30)] + [171.0 + 5 * k for k in range(1, 16)]
        candles = candle_factory(closes)
        result = run_strategy_simulation(get_strategy("meanReversion"), candles, CAPITAL)

        assert len(result.trades) == 1
        trade = result.trades[0]
        assert trade.entry_date == candles[15].date
        assert trade.exit_date == candles[41].date
        assert trade.exit_date < candles[-1].date
        assert trade.entry_price == 185.0
        assert trade.exit_price == 231.0
        assert trade.return_pct == 24.86
        assert result.win_rate == 100.0

    def test_rising_path_never_enters(self, candle_factory) -> None:
        candles = candle_factory([100.0 + i for i in range(40)])
        result = run_strategy_simulation(get_strategy("meanReversion"), candles, CAPITAL)
        assert result.trades == []


# ===========================================================================
# Summary helpers and lookup
# ===========================================================================


class TestSummaryRules:
    """Tests for recommendation_for, confidence_for and get_strategy."""

    @pytest.mark.parametrize(
        ("total_return", "prefix"),
        [
            (12.01, "Outperformed"),
            (12.0, "Moderately"),
            (0.01, "Moderately"),
            (0.0, "Underperformed"),
            (-5.0, "Underperformed"),
        ],
    )
    def test_recommendation_thresholds(self, total_return: float, prefix: str) -> None:
        assert recommendation_for(total_return).startswith(prefix)

    @pytest.mark.parametrize(
        ("trades", "expected"),
        [(0, 0.42), (2, 0.42), (3, 0.64), (5, 0.64), (6, 0.82), (20, 0.82)],
    )
    def test_confidence_buckets(self, trades: int, expected: float) -> None:
        assert confidence_for(trades) == expected

    def test_get_strategy_by_string(self) -> None:
        config = get_strategy("meanReversion")
        assert config.name == "RSI Mean Reversion"
        assert config.risk_label is RiskLabel.CONSERVATIVE

    def test_get_strategy_unknown_raises(self) -> None:
        with pytest.raises(UnknownStrategyError):
            get_strategy("pairsTrading")

    def test_run_all_in_configuration_order(self, candle_factory) -> None:
        candles = candle_factory([100.0 + i for i in range(40)])
        results = run_all_strategies(candles, CAPITAL)
        assert [r.id for r in results] == [c.id for c in STRATEGIES]

    def test_non_positive_capital_is_floored(self, candle_factory) -> None:
        candles = candle_factory([100.0 + i for i in range(40)])
        floored = StrategySimulator(get_strategy("breakout"), candles, 0.0).run()
        normal = StrategySimulator(get_strategy("breakout"), candles, CAPITAL).run()
        assert floored.total_return_pct == normal.total_return_pct

    def test_evaluation_to_dict(self, candle_factory) -> None:
        candles = candle_factory([100.0 + i for i in range(40)])
        data = run_strategy_simulation(get_strategy("breakout"), candles, CAPITAL).to_dict()
        assert data["id"] == "breakout"
        assert data["risk_label"] == "Aggressive"
        assert data["trades"][0]["entry_date"] == candles[1].date.isoformat()
        assert data["trades"][0]["holding_days"] == 39


# ===========================================================================
# Invariants on generated data
# ===========================================================================


class TestGeneratedDataInvariants:
    """Trade invariants across every symbol, strategy and a few windows."""

    @pytest.mark.parametrize("lookback", [60, 180, 252])
    def test_trade_invariants(self, market_context: MarketContext, lookback: int) -> None:
        for series in market_context.series:
            candles = list(series.historical[-lookback:])
            last_date = candles[-1].date
            for result in run_all_strategies(candles, CAPITAL):
                for trade in result.trades:
                    assert trade.exit_date > trade.entry_date
                    assert trade.holding_days >= 1
                    assert trade.exit_date <= last_date
                closing_at_last = [t for t in result.trades if t.exit_date == last_date]
                assert len(closing_at_last) <= 1
                # Trades never overlap
                for prev, nxt in zip(result.trades, result.trades[1:]):
                    assert prev.exit_date <= nxt.entry_date

    def test_summary_ranges(self, market_context: MarketContext) -> None:
        for series in market_context.series:
            for result in run_all_strategies(list(series.historical[-180:]), CAPITAL):
                assert 0.0 <= result.win_rate <= 100.0
                assert 0.0 <= result.max_drawdown <= 100.0
                assert result.confidence in (0.42, 0.64, 0.82)


class TestSimulatorReuse:
    """A simulator instance can be run more than once."""

    def test_run_twice_returns_equal_results(self, candle_factory) -> None:
        candles = candle_factory([100.0 + i for i in range(40)])
        simulator = StrategySimulator(get_strategy("breakout"), candles, CAPITAL)

        first = simulator.run()
        second = simulator.run()

        assert len(first.trades) == 1
        assert first.total_return_pct == 37.62
        assert second.to_dict() == first.to_dict()

    def test_returned_trades_are_not_shared(self, candle_factory) -> None:
        candles = candle_factory([100.0 + i for i in range(40)])
        simulator = StrategySimulator(get_strategy("breakout"), candles, CAPITAL)

        first = simulator.run()
        simulator.run()

        assert len(first.trades) == 1
