"""常见写法的二分搜索，作为紧凑变体的对照基线。"""
from typing import Any, Optional, Sequence

from ...base import Algorithm
from .binary_search import NOT_FOUND, checked_range, midpoint


def classic_search(
    key: Any,
    sequence: Sequence[Any],
    lo: int = 0,
    hi: Optional[int] = None,
    *,
    strict: bool = False,
) -> int:
    """在 ``sequence[lo:hi]`` 中查找 ``key``，每一步都先检查中点是否相等。

    命中中点时提前返回；目标不在序列中时，每一步要付出两次比较。
    区间参数与 :func:`~halfsearch.searching.basic.binary_search.search` 一致。

    时间复杂度: O(log n)
    空间复杂度: O(1)
    """
    bounds = checked_range(sequence, lo, hi, strict=strict)
    if bounds is None:
        return NOT_FOUND
    low, high = bounds[0], bounds[1] - 1  # 闭区间 [low, high]

    while low <= high:
        mid = midpoint(low, high + 1)
        value = sequence[mid]
        if value == key:
            return mid
        elif value < key:
            low = mid + 1
        else:
            high = mid - 1

    return NOT_FOUND


class ClassicBinarySearch(Algorithm):
    """使用常见的三路比较二分搜索在已排序列表中查找元素。

    算法原理：
        1. 比较中间元素与目标值
        2. 如果相等，返回索引
        3. 如果中间元素小于目标值，搜索右半部分
        4. 如果中间元素大于目标值，搜索左半部分
        5. 重复直到找到目标或搜索区间为空
    """

    name = "classic_binary_search"

    def execute(
        self,
        data: Sequence[Any],
        target: Any,
        lo: int = 0,
        hi: Optional[int] = None,
    ) -> int:
        """在已排序的数据中查找目标值的索引，未找到返回 -1。

        示例:
            >>> ClassicBinarySearch().execute([1, 3, 5, 7, 9], 5)
            2
            >>> ClassicBinarySearch().execute([1, 3, 5, 7, 9], 6)
            -1
        """
        return classic_search(target, data, lo, hi, strict=self.config.strict)
