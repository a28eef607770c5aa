"""Half-open interval binary search."""
from .errors import ConfigError, HalfSearchError, SearchRangeError, UnknownAlgorithmError
from .searching.basic.binary_search import (
    NOT_FOUND,
    BoundedBinarySearch,
    bounded_search,
    bounded_search_recursive,
    midpoint,
    search,
)
from .searching.basic.classic_search import ClassicBinarySearch, classic_search

__version__ = "0.1.0"
