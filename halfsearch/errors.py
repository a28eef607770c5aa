"""Exception hierarchy shared by the search, registry and configuration layers."""
from __future__ import annotations


class HalfSearchError(Exception):
    """Base class for all errors raised by halfsearch."""


class SearchRangeError(HalfSearchError, ValueError):
    """Raised in strict mode when a ``[lo, hi)`` range is invalid for a sequence."""

    def __init__(self, lo: int, hi: int, length: int) -> None:
        self.lo = lo
        self.hi = hi
        self.length = length
        super().__init__(f"invalid search range [{lo}, {hi}) for sequence of length {length}")


class UnknownAlgorithmError(HalfSearchError, KeyError):
    """Raised when a search algorithm name is not registered."""


class ConfigError(HalfSearchError):
    """Raised when a configuration file cannot be read or validated."""
