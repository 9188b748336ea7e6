"""Static, hand-authored news sentiment table.

Item dates are stored as day offsets and resolved against a fixed reference
date when the table is built, so recency is stable for the process lifetime.
"""

from datetime import date, timedelta

from advisor.data.models import SentimentItem

# (id, symbol, headline, summary, source, score, relevance, days_ago)
_NEWS_TABLE: tuple[tuple[str, str, str, str, str, float, float, int], ...] = (
    (
        "aapl-1",
        "AAPL",
        "Apple advances AI-on-device roadmap with new neural cores",
        "Upcoming hardware updates highlight investments in on-device inference, "
        "boosting expectations for refresh cycle demand.",
        "TechWire",
        0.72,
        0.88,
        1,
    ),
    (
        "aapl-2",
        "AAPL",
        "Regulators question App Store pricing practices in EU probe",
        "European regulators reopened discussions on platform fees, creating "
        "headline risk but limited near-term financial impact.",
        "GlobalMarkets",
        -0.34,
        0.42,
        3,
    ),
    (
        "msft-1",
        "MSFT",
        "Microsoft expands Azure OpenAI availability to enterprise suite",
        "Broader access to AI services positions Microsoft to capture "
        "incremental cloud workloads with resilient margins.",
        "CloudDaily",
        0.61,
        0.76,
        2,
    ),
    (
        "nvda-1",
        "NVDA",
        "NVIDIA reports record data center backlog and new Blackwell demand",
        "Stronger-than-expected demand from hyperscalers drives guidance "
        "revision, extending visibility into 2026.",
        "SemiTrends",
        0.82,
        0.93,
        1,
    ),
    (
        "nvda-2",
        "NVDA",
        "Competition intensifies as custom silicon gains traction",
        "Cloud providers continue exploring custom AI accelerators, but "
        "execution risk remains elevated for challengers.",
        "AI Week",
        -0.18,
        0.58,
        4,
    ),
    (
        "tsla-1",
        "TSLA",
        "Tesla announces subscription model for autonomous features",
        "Software-first monetization shift diversifies revenue streams but "
        "requires regulatory clarity for rollout.",
        "EV Pulse",
        0.37,
        0.71,
        1,
    ),
    (
        "tsla-2",
        "TSLA",
        "Battery suppliers flag constraints for next-gen platform",
        "Supply chain bottlenecks could delay production ramp, pressuring "
        "near-term gross margins.",
        "EnergyGrid",
        -0.52,
        0.64,
        5,
    ),
    (
        "amzn-1",
        "AMZN",
        "AWS unveils AI-native developer tooling suite",
        "New services strengthen AWS moat and cross-sell opportunities across "
        "enterprise workloads.",
        "CloudDaily",
        0.55,
        0.69,
        2,
    ),
    (
        "jpm-1",
        "JPM",
        "JPMorgan beats earnings on net interest income resilience",
        "Higher for longer rate narrative supports credit expansion, though "
        "provisions inch higher.",
        "FinanceBeat",
        0.41,
        0.65,
        1,
    ),
)


def build_news_sentiment(reference_date: date) -> tuple[SentimentItem, ...]:
    """Materialize the news table with dates relative to reference_date."""
    return tuple(
        SentimentItem(
            id=item_id,
            symbol=symbol,
            headline=headline,
            summary=summary,
            source=source,
            score=score,
            relevance=relevance,
            date=reference_date - timedelta(days=days_ago),
        )
        for item_id, symbol, headline, summary, source, score, relevance, days_ago in _NEWS_TABLE
    )
