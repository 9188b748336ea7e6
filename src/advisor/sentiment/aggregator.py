"""News sentiment aggregation for a single symbol.

Averages precomputed item scores into a Bullish/Neutral/Bearish label and
picks one headline as the catalyst.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from advisor.analytics.metrics import mean
from advisor.data.models import SentimentItem

BULLISH_THRESHOLD = 0.25
BEARISH_THRESHOLD = -0.25
CATALYST_SCORE = 0.5
NO_CATALYST_TEXT = "No high conviction catalyst detected."


class SentimentLabel(str, Enum):
    """Overall news tone for a symbol."""

    BULLISH = "Bullish"
    NEUTRAL = "Neutral"
    BEARISH = "Bearish"


@dataclass
class SentimentSummary:
    """Aggregated sentiment for one symbol.

    Attributes:
        score: Mean item score (0 when there are no items).
        positive: Number of items with score > 0.
        negative: Number of items with score < 0.
    """

    score: float
    label: SentimentLabel
    catalyst: str
    positive: int
    negative: int
    items: list[SentimentItem] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Serialize to dict for JSON output."""
        return {
            "score": self.score,
            "label": self.label.value,
            "catalyst": self.catalyst,
            "positive": self.positive,
            "negative": self.negative,
            "items": [item.to_dict() for item in self.items],
        }


def classify_sentiment(score: float) -> SentimentLabel:
    """Map a mean score to a label. Both thresholds are exclusive."""
    if score > BULLISH_THRESHOLD:
        return SentimentLabel.BULLISH
    if score < BEARISH_THRESHOLD:
        return SentimentLabel.BEARISH
    return SentimentLabel.NEUTRAL


def select_catalyst(items: Sequence[SentimentItem]) -> str:
    """First strongly positive headline, else first strongly negative, else a fallback."""
    for item in items:
        if item.score > CATALYST_SCORE:
            return item.headline
    for item in items:
        if item.score < -CATALYST_SCORE:
            return item.headline
    return NO_CATALYST_TEXT


def summarize_sentiment(items: Sequence[SentimentItem]) -> SentimentSummary:
    """Aggregate one symbol's sentiment items.

    Args:
        items: Items for a single symbol, in table order.

    Returns:
        SentimentSummary; a Neutral zero-score summary when items is empty.
    """
    score = mean([item.score for item in items])
    return SentimentSummary(
        score=score,
        label=classify_sentiment(score),
        catalyst=select_catalyst(items),
        positive=sum(1 for item in items if item.score > 0),
        negative=sum(1 for item in items if item.score < 0),
        items=list(items),
    )
