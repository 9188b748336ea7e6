"""Snapshot assembly: one combined analytics view per symbol query.

Slices the symbol's generated series to the trailing lookback window, runs
the metrics calculator and all built-in strategies over it, aggregates the
symbol's news sentiment, and derives short recommendation strings.

Core rules:
  sentiment label = Bullish if mean score > 0.25, Bearish if < -0.25
  high volatility = annualized volatility > 35%
  best strategy   = highest total return (first wins ties)
"""

from __future__ import annotations

from dataclasses import dataclass, field

from advisor.analytics.metrics import RiskMetrics, compute_risk_metrics
from advisor.backtest.engine import MIN_CAPITAL, run_all_strategies
from advisor.backtest.models import StrategyEvaluation
from advisor.config import AnalyticsSettings, SnapshotSettings
from advisor.data.market import MarketContext
from advisor.data.models import Candle, MarketSeries
from advisor.formatters import format_number
from advisor.logging import get_logger
from advisor.sentiment.aggregator import SentimentLabel, SentimentSummary, summarize_sentiment

logger = get_logger(__name__)

_BEARISH_TEXT = (
    "Elevate hedging and tighten stops; consider reducing gross exposure by 15-20% "
    "until news tone improves."
)
_NEUTRAL_TEXT = "Maintain neutral exposure and monitor technical signals for fresh confirmation."


@dataclass
class AdvisorSnapshot:
    """Everything the dashboard shows for one symbol and query window."""

    symbol: str
    name: str
    sector: str
    candles: list[Candle]
    metrics: RiskMetrics
    sentiment: SentimentSummary
    strategies: list[StrategyEvaluation]
    recommendations: list[str] = field(default_factory=list)
    period_performance_pct: float = 0.0

    def to_dict(self) -> dict:
        """Serialize to dict for JSON output.

        Returns:
            Dict with candles, metrics, sentiment, strategies and
            recommendations sub-structures.
        """
        return {
            "symbol": self.symbol,
            "name": self.name,
            "sector": self.sector,
            "candles": [c.to_dict() for c in self.candles],
            "metrics": self.metrics.to_dict(),
            "sentiment": self.sentiment.to_dict(),
            "strategies": [s.to_dict() for s in self.strategies],
            "recommendations": list(self.recommendations),
            "period_performance_pct": self.period_performance_pct,
        }


def period_performance(candles: list[Candle]) -> float:
    """Percent change from the first to the last close; 0 for an empty window."""
    if not candles or candles[0].close == 0:
        return 0.0
    return (candles[-1].close / candles[0].close - 1) * 100


def build_recommendations(
    sentiment: SentimentSummary,
    metrics: RiskMetrics,
    strategies: list[StrategyEvaluation],
    high_volatility_threshold: float = 0.35,
) -> list[str]:
    """Derive natural-language recommendations for a snapshot.

    Args:
        sentiment: Aggregated news sentiment.
        metrics: Risk metrics of the window.
        strategies: Strategy evaluations of the window.
        high_volatility_threshold: Annualized volatility above which a
            staggered-entry warning is added.

    Returns:
        At least one recommendation string.
    """
    recommendations: list[str] = []

    if sentiment.label is SentimentLabel.BULLISH and metrics.annual_return > 0:
        recommendations.append(
            "Bias positioning slightly overweight relative benchmark given "
            f"{sentiment.score * 100:.0f}% positive news skew."
        )
    elif sentiment.label is SentimentLabel.BEARISH:
        recommendations.append(_BEARISH_TEXT)

    if metrics.annual_volatility > high_volatility_threshold:
        recommendations.append(
            f"Volatility exceeds {high_volatility_threshold * 100:.0f}% annualized; "
            "layer in staggered entries or use option spreads to cap downside."
        )

    if strategies:
        best = max(strategies, key=lambda s: s.total_return_pct)
        if best.total_return_pct > 0:
            recommendations.append(
                f"{best.name} delivered {format_number(best.total_return_pct)}% "
                "gross return; allocate pilot capital with "
                f"{best.risk_label.value.lower()} sizing."
            )

    if not recommendations:
        recommendations.append(_NEUTRAL_TEXT)
    return recommendations


class SnapshotAssembler:
    """Builds AdvisorSnapshot objects from an immutable MarketContext.

    Args:
        context: Market data built at startup.
        analytics_settings: Trading-year, risk-free and VaR constants.
        snapshot_settings: Default lookback/capital and volatility threshold.
    """

    def __init__(
        self,
        context: MarketContext,
        analytics_settings: AnalyticsSettings | None = None,
        snapshot_settings: SnapshotSettings | None = None,
    ) -> None:
        self._context = context
        self._analytics = analytics_settings or AnalyticsSettings()
        self._settings = snapshot_settings or SnapshotSettings()

    @property
    def context(self) -> MarketContext:
        return self._context

    @property
    def settings(self) -> SnapshotSettings:
        return self._settings

    def list_symbols(self) -> list[dict]:
        """Return [{symbol, name, sector}] in configuration order."""
        return [series.describe() for series in self._context.series]

    def resolve_series(self, symbol: str) -> MarketSeries:
        """Return the symbol's series, falling back to the first configured one."""
        series = self._context.get_series(symbol)
        if series is None:
            series = self._context.series[0]
            logger.debug("symbol_fallback", requested=symbol, fallback=series.symbol)
        return series

    def window(self, symbol: str, lookback_days: int | None = None) -> tuple[MarketSeries, list[Candle]]:
        """Return the resolved series and its trailing lookback window."""
        if lookback_days is None:
            lookback_days = self._settings.default_lookback_days
        series = self.resolve_series(symbol)
        if lookback_days <= 0:
            return series, []
        return series, list(series.historical[-lookback_days:])

    def get_snapshot(
        self,
        symbol: str,
        lookback_days: int | None = None,
        capital: float | None = None,
    ) -> AdvisorSnapshot:
        """Assemble the snapshot for a symbol.

        Args:
            symbol: Ticker symbol. Unknown symbols fall back to the first
                configured symbol.
            lookback_days: Trailing trading days to analyze. Zero or
                negative yields an empty window.
            capital: Starting capital for strategy simulations.

        Returns:
            AdvisorSnapshot with metrics, sentiment, strategies and
            recommendations.
        """
        if capital is None:
            capital = self._settings.default_capital
        capital = max(capital, MIN_CAPITAL)

        series, candles = self.window(symbol, lookback_days)

        metrics = compute_risk_metrics(
            candles,
            beta=series.beta,
            trading_days=self._analytics.trading_days,
            risk_free_rate=self._analytics.risk_free_rate,
            var_confidence=self._analytics.var_confidence,
        )
        strategies = run_all_strategies(
            candles,
            capital,
            trading_days=self._analytics.trading_days,
            min_candles=self._analytics.min_candles,
        )
        sentiment = summarize_sentiment(self._context.news_for(series.symbol))
        recommendations = build_recommendations(
            sentiment,
            metrics,
            strategies,
            high_volatility_threshold=self._settings.high_volatility_threshold,
        )

        logger.debug(
            "snapshot_assembled",
            symbol=series.symbol,
            candles=len(candles),
            sentiment=sentiment.label.value,
            trades=sum(len(s.trades) for s in strategies),
        )

        return AdvisorSnapshot(
            symbol=series.symbol,
            name=series.name,
            sector=series.sector,
            candles=candles,
            metrics=metrics,
            sentiment=sentiment,
            strategies=strategies,
            recommendations=recommendations,
            period_performance_pct=period_performance(candles),
        )


def get_snapshot(
    context: MarketContext,
    symbol: str,
    lookback_days: int | None = None,
    capital: float | None = None,
) -> AdvisorSnapshot:
    """Assemble a snapshot with default settings."""
    return SnapshotAssembler(context).get_snapshot(
        symbol, lookback_days=lookback_days, capital=capital
    )


def list_symbols(context: MarketContext) -> list[dict]:
    """Return [{symbol, name, sector}] for every configured symbol."""
    return SnapshotAssembler(context).list_symbols()
