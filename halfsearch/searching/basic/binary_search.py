"""半开区间二分搜索（紧凑变体）实现。

与常见写法不同，这里只在区间缩小到单个元素时才与目标值做一次相等比较，
其余每一步只做一次 ``<`` 比较。区间约定为 ``[lo, hi)``：包含 ``lo``，
不包含 ``hi``，区间长度就是 ``hi - lo``，对半分割时无需 ±1 调整。
"""
import logging
import operator
from typing import Any, Optional, Sequence, Tuple

from ...base import Algorithm
from ...errors import SearchRangeError

logger = logging.getLogger(__name__)

NOT_FOUND = -1


def midpoint(lo: int, hi: int) -> int:
    """返回 ``[lo, hi)`` 的中点。

    使用 ``lo + (hi - lo) // 2`` 而不是 ``(lo + hi) // 2``，
    这样在定宽整数（如 ``numpy.int64``）下两端都很大时也不会溢出。
    当 ``hi - lo >= 2`` 时保证 ``lo < mid < hi``。
    """
    return lo + (hi - lo) // 2


def bounded_search(key: Any, sequence: Sequence[Any], lo: int, hi: int) -> int:
    """在 ``sequence[lo:hi]`` 中查找 ``key``，返回其下标或 ``NOT_FOUND``。

    这是算法核心，不做任何参数检查。调用方必须保证 ``hi > lo >= 0``
    且 ``hi <= len(sequence)``；违反前置条件的行为未定义，参数校验由
    :func:`search` 负责。

    循环不变式：如果 ``key`` 在序列中，它一定位于当前区间 ``[lo, hi)`` 内。
    初始区间非空时，子区间永远不会为空。

    参数:
        key: 要查找的值，需支持 ``<`` 与 ``==``
        sequence: 严格升序、可随机访问的序列，只读
        lo: 区间下界（包含）
        hi: 区间上界（不包含）

    返回:
        int: ``key`` 所在下标，未找到时返回 ``NOT_FOUND``

    时间复杂度: O(log n)
    空间复杂度: O(1)

    注意:
        序列含重复元素时结果不作保证（目前会落在相等段的最右端）。

    示例:
        >>> bounded_search(30, [5, 10, 15, 20, 25, 30], 0, 6)
        5
        >>> bounded_search(12, [5, 10, 15, 20, 25, 30], 0, 6)
        -1
    """
    while hi - lo > 1:
        mid = midpoint(lo, hi)
        if key < sequence[mid]:
            hi = mid
        else:
            lo = mid
    if sequence[lo] == key:
        return lo
    return NOT_FOUND


def bounded_search_recursive(key: Any, sequence: Sequence[Any], lo: int, hi: int) -> int:
    """:func:`bounded_search` 的尾递归写法，结果与循环版本完全一致。

    递归深度为 O(log n)，生产代码请使用循环版本。
    """
    if hi - lo == 1:
        if sequence[lo] == key:
            return lo
        return NOT_FOUND
    mid = midpoint(lo, hi)
    if key < sequence[mid]:
        return bounded_search_recursive(key, sequence, lo, mid)
    return bounded_search_recursive(key, sequence, mid, hi)


def search(
    key: Any,
    sequence: Sequence[Any],
    lo: int = 0,
    hi: Optional[int] = None,
    *,
    strict: bool = False,
    recursive: bool = False,
) -> int:
    """校验区间后调用核心算法。

    参数:
        key: 要查找的值
        sequence: 严格升序的序列
        lo: 区间下界（包含），默认 0
        hi: 区间上界（不包含），默认 ``len(sequence)``
        strict: 为 True 时非法区间抛出 :class:`SearchRangeError`，
            否则返回 ``NOT_FOUND``
        recursive: 为 True 时使用递归版本的核心算法

    返回:
        int: 下标或 ``NOT_FOUND``

    异常:
        TypeError: ``lo``/``hi`` 不是整数
        SearchRangeError: ``strict`` 模式下下标为负或 ``hi`` 越界

    空区间（``hi <= lo``，包括空序列）不是错误，直接返回 ``NOT_FOUND``。
    """
    bounds = checked_range(sequence, lo, hi, strict=strict)
    if bounds is None:
        return NOT_FOUND
    core = bounded_search_recursive if recursive else bounded_search
    return core(key, sequence, *bounds)


def checked_range(
    sequence: Sequence[Any],
    lo: int = 0,
    hi: Optional[int] = None,
    *,
    strict: bool = False,
) -> Optional[Tuple[int, int]]:
    """把 ``lo``/``hi`` 规范化为整数区间，无需搜索时返回 None。

    返回 None 的情况：区间为空或倒置；非 ``strict`` 模式下下标为负或越界。
    """
    length = len(sequence)
    lo = operator.index(lo)
    hi = length if hi is None else operator.index(hi)

    if lo < 0 or hi < 0 or hi > length:
        if strict:
            raise SearchRangeError(lo, hi, length)
        logger.debug("Rejecting range [%d, %d) for sequence of length %d", lo, hi, length)
        return None
    if hi <= lo:
        return None
    return lo, hi


class BoundedBinarySearch(Algorithm):
    """半开区间二分搜索。

    把 :func:`search` 包装成算法管理器可以调度的 :class:`Algorithm`。

    ``config.strict`` 控制非法区间是否抛出异常，``config.recursive``
    选择递归版本的核心算法。
    """

    name = "bounded_binary_search"

    def execute(
        self,
        data: Sequence[Any],
        target: Any,
        lo: int = 0,
        hi: Optional[int] = None,
    ) -> int:
        """在已排序的 ``data[lo:hi]`` 中查找 ``target`` 的下标。

        示例:
            >>> BoundedBinarySearch().execute([1, 3, 5, 7, 9], 5)
            2
            >>> BoundedBinarySearch().execute([1, 3, 5, 7, 9], 6)
            -1
        """
        index = search(target, data, lo, hi, strict=self.config.strict, recursive=self.config.recursive)
        logger.debug("bounded search for %r in [%s, %s) -> %d", target, lo, hi, index)
        return index
