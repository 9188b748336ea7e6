"""Deterministic pseudo-random streams for reproducible synthetic data.

Mulberry32 is a 32-bit multiply-xorshift generator. All arithmetic is done
on unsigned 32-bit values, which yields the same bit pattern as the signed
int32 formulation, so a given seed reproduces the exact same stream.
"""

from typing import Protocol

_MASK_32 = 0xFFFFFFFF
_TWO_POW_32 = 4294967296.0


class SeededRandom(Protocol):
    """A seeded source of uniform floats in [0, 1)."""

    def __call__(self) -> float: ...


def _imul(a: int, b: int) -> int:
    """32-bit integer multiply keeping the low 32 bits."""
    return ((a & _MASK_32) * (b & _MASK_32)) & _MASK_32


def _to_int32(value: int) -> int:
    value &= _MASK_32
    return value - 0x100000000 if value & 0x80000000 else value


def string_to_seed(value: str) -> int:
    """Hash a string to a non-negative seed.

    Uses the classic ``hash * 31 + char`` rolling hash over UTF-16 code units,
    wrapped to signed 32 bits, then takes the absolute value.

    Args:
        value: Input string, typically a ticker symbol.

    Returns:
        Non-negative integer seed (at most 2**31).
    """
    hash_value = 0
    encoded = value.encode("utf-16-le")
    for i in range(0, len(encoded), 2):
        code_unit = encoded[i] | (encoded[i + 1] << 8)
        hash_value = _to_int32((hash_value << 5) - hash_value + code_unit)
    return abs(hash_value)


class Mulberry32:
    """Mulberry32 pseudo-random generator.

    Calling the instance advances the state and returns a float in [0, 1).

    Args:
        seed: Any integer; wrapped to 32 bits.
    """

    def __init__(self, seed: int) -> None:
        self._state = seed & _MASK_32

    def __call__(self) -> float:
        self._state = (self._state + 0x6D2B79F5) & _MASK_32
        t = self._state
        t = _imul(t ^ (t >> 15), t | 1)
        t = ((t + _imul(t ^ (t >> 7), t | 61)) & _MASK_32) ^ t
        return ((t ^ (t >> 14)) & _MASK_32) / _TWO_POW_32
