from .binary_search import (
    NOT_FOUND,
    BoundedBinarySearch,
    bounded_search,
    bounded_search_recursive,
    checked_range,
    midpoint,
    search,
)
from .classic_search import ClassicBinarySearch, classic_search
