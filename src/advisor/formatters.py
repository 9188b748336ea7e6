"""Display formatting helpers for percentages and currency."""


def format_percent(value: float, fraction_digits: int = 2) -> str:
    """Format a fraction as a percentage, e.g. 0.1234 -> '12.34%'."""
    return f"{value * 100:.{fraction_digits}f}%"


def format_percent_direct(value: float, fraction_digits: int = 2) -> str:
    """Format a value already in percent units, e.g. 12.34 -> '12.34%'."""
    return f"{value:.{fraction_digits}f}%"


def format_currency(value: float, symbol: str = "$", fraction_digits: int = 2) -> str:
    """Format a USD-style amount with thousands separators, e.g. '-$1,234.50'."""
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.{fraction_digits}f}"


def format_number(value: float) -> str:
    """Shortest round-trip text for a number, without a trailing '.0', e.g. 15.2 -> '15.2'."""
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text
