import pytest

from halfsearch.errors import SearchRangeError
from halfsearch.searching.basic.binary_search import NOT_FOUND, search
from halfsearch.searching.basic.classic_search import classic_search
from halfsearch.utils import ProbeCounter


def test_agrees_with_bounded_search():
    data = [1, 4, 9, 16, 25, 36, 49, 64, 81]
    for lo in range(len(data)):
        for hi in range(lo, len(data) + 1):
            for key in range(0, 85):
                assert classic_search(key, data, lo, hi) == search(key, data, lo, hi)


def test_exits_early_on_midpoint_hit():
    data = ProbeCounter([10, 20, 30, 40, 50])
    assert classic_search(30, data) == 2
    assert data.indices == [2]


def test_bounded_search_defers_equality_test():
    data = ProbeCounter([10, 20, 30, 40, 50])
    assert search(30, data) == 2
    assert data.probes > 1


def test_guard_shared_with_bounded_search():
    assert classic_search(3, [1, 2, 3], -1, 3) == NOT_FOUND
    with pytest.raises(SearchRangeError):
        classic_search(3, [1, 2, 3], 0, 4, strict=True)
