"""Static symbol universe used to seed the synthetic market.

Order matters: the first symbol is the fallback for unknown lookups.
"""

from advisor.data.models import SeriesConfig

SERIES_CONFIG: dict[str, SeriesConfig] = {
    "AAPL": SeriesConfig(
        name="Apple Inc.",
        sector="Technology",
        beta=1.18,
        base_price=187.0,
        volatility=0.018,
    ),
    "MSFT": SeriesConfig(
        name="Microsoft Corporation",
        sector="Technology",
        beta=1.05,
        base_price=410.0,
        volatility=0.015,
    ),
    "NVDA": SeriesConfig(
        name="NVIDIA Corporation",
        sector="Semiconductors",
        beta=1.42,
        base_price=880.0,
        volatility=0.022,
    ),
    "TSLA": SeriesConfig(
        name="Tesla Inc.",
        sector="Consumer Discretionary",
        beta=1.92,
        base_price=198.0,
        volatility=0.032,
    ),
    "AMZN": SeriesConfig(
        name="Amazon.com Inc.",
        sector="Consumer Discretionary",
        beta=1.26,
        base_price=178.0,
        volatility=0.02,
    ),
    "JPM": SeriesConfig(
        name="JPMorgan Chase & Co.",
        sector="Financials",
        beta=1.09,
        base_price=204.0,
        volatility=0.012,
    ),
}
