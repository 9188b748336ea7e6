"""Custom exceptions for the investment advisor.

The analytics core degrades instead of raising on short or empty data.
These cover lookups against fixed configuration tables only.
"""


class AdvisorError(Exception):
    """Base exception for all advisor errors."""


class UnknownStrategyError(AdvisorError):
    """Raised when a strategy id is not one of the configured strategies."""


class UnknownTimeRangeError(AdvisorError):
    """Raised when a projection horizon label is not a known time range."""
