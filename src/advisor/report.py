"""Console report for an advisor snapshot.

Usage:
    advisor-report NVDA
    advisor-report TSLA --lookback 252 --capital 50000
    advisor-report --list
"""

from __future__ import annotations

import argparse

from advisor.config import AppSettings
from advisor.data.market import build_market_context
from advisor.formatters import format_currency, format_percent, format_percent_direct
from advisor.logging import setup_logging
from advisor.snapshot import AdvisorSnapshot, SnapshotAssembler


def format_snapshot_report(snapshot: AdvisorSnapshot, capital: float | None = None) -> str:
    """Format a text summary of a snapshot.

    Args:
        snapshot: The assembled snapshot.
        capital: Starting capital shown in the header, if known.

    Returns:
        Formatted string suitable for console output.
    """
    m = snapshot.metrics
    lines: list[str] = []
    lines.append("=" * 80)
    lines.append(f"{snapshot.symbol} - {snapshot.name} ({snapshot.sector})")
    lines.append("=" * 80)
    if snapshot.candles:
        lines.append(
            f"Window: {snapshot.candles[0].date.isoformat()} to "
            f"{snapshot.candles[-1].date.isoformat()} ({len(snapshot.candles)} candles)"
        )
        lines.append(f"Last close: {format_currency(snapshot.candles[-1].close)}")
    else:
        lines.append("Window: no candles")
    if capital is not None:
        lines.append(f"Capital: {format_currency(capital)}")
    lines.append(f"Period performance: {format_percent_direct(snapshot.period_performance_pct)}")
    lines.append("")

    lines.append("RISK METRICS")
    lines.append("-" * 40)
    lines.append(f"{'Annual return':<24s}{format_percent(m.annual_return):>16s}")
    lines.append(f"{'Annual volatility':<24s}{format_percent(m.annual_volatility):>16s}")
    lines.append(f"{'Sharpe ratio':<24s}{m.sharpe_ratio:>16.2f}")
    lines.append(f"{'Max drawdown':<24s}{format_percent(m.max_drawdown):>16s}")
    lines.append(f"{'VaR (95%)':<24s}{format_percent(m.value_at_risk):>16s}")
    lines.append(f"{'Beta':<24s}{m.beta:>16.2f}")
    lines.append(f"{'Best day':<24s}{format_percent(m.best_day):>16s}")
    lines.append(f"{'Worst day':<24s}{format_percent(m.worst_day):>16s}")
    lines.append("")

    header = " | ".join(
        [
            f"{'Strategy':<20s}",
            f"{'Return':>9s}",
            f"{'CAGR':>9s}",
            f"{'Max DD':>8s}",
            f"{'Win Rate':>9s}",
            f"{'Trades':>6s}",
            f"{'Conf':>5s}",
        ]
    )
    lines.append("STRATEGIES")
    lines.append(header)
    lines.append("-" * len(header))
    for s in snapshot.strategies:
        row = " | ".join(
            [
                f"{s.name:<20s}",
                f"{format_percent_direct(s.total_return_pct):>9s}",
                f"{format_percent_direct(s.cagr):>9s}",
                f"{format_percent_direct(s.max_drawdown):>8s}",
                f"{format_percent_direct(s.win_rate):>9s}",
                f"{len(s.trades):>6d}",
                f"{s.confidence:>5.2f}",
            ]
        )
        lines.append(row)
    lines.append("")

    sentiment = snapshot.sentiment
    lines.append(
        f"SENTIMENT: {sentiment.label.value} (score {sentiment.score:+.2f}, "
        f"{sentiment.positive} positive / {sentiment.negative} negative)"
    )
    lines.append(f"Catalyst: {sentiment.catalyst}")
    lines.append("")

    lines.append("RECOMMENDATIONS")
    for i, text in enumerate(snapshot.recommendations, start=1):
        lines.append(f"  {i}. {text}")
    lines.append("=" * 80)

    return "\n".join(lines)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Print the advisor snapshot for a symbol",
    )
    parser.add_argument("symbol", nargs="?", default=None, help="Ticker symbol, e.g. NVDA")
    parser.add_argument(
        "--lookback",
        type=int,
        default=None,
        help="Trailing trading days to analyze (default: SNAPSHOT_DEFAULT_LOOKBACK_DAYS)",
    )
    parser.add_argument(
        "--capital",
        type=float,
        default=None,
        help="Starting capital for strategy simulations",
    )
    parser.add_argument("--list", action="store_true", help="List available symbols")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    args = parse_args(argv)
    settings = AppSettings()
    setup_logging(settings.log_level, settings.log_format)

    context = build_market_context(settings.market)
    assembler = SnapshotAssembler(context, settings.analytics, settings.snapshot)

    if args.list or args.symbol is None:
        for entry in assembler.list_symbols():
            print(f"{entry['symbol']:<6s} {entry['name']:<28s} {entry['sector']}")
        return

    capital = args.capital if args.capital is not None else settings.snapshot.default_capital
    snapshot = assembler.get_snapshot(args.symbol.upper(), lookback_days=args.lookback, capital=capital)
    print(format_snapshot_report(snapshot, capital=capital))


if __name__ == "__main__":
    main()
