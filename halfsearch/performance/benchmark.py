"""
查找算法对比基准

统计紧凑二分搜索与常见二分搜索在命中与未命中两种情况下的
元素读取次数（探测次数）和耗时，用于比较两种写法的实际开销。
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional

import numpy as np

from ..searching.basic.binary_search import search
from ..searching.basic.classic_search import classic_search
from ..utils import ProbeCounter

logger = logging.getLogger(__name__)

SearchFunc = Callable[..., int]

VARIANTS: Dict[str, SearchFunc] = {
    "bounded": search,
    "classic": classic_search,
}


@dataclass
class VariantStats:
    """单个算法在单个输入规模上的统计结果"""
    variant: str
    size: int
    trials: int
    mean_probes: float
    max_probes: int
    hit_mean_probes: Optional[float]
    miss_mean_probes: Optional[float]
    mean_time: float


def probe_bound(size: int) -> int:
    """紧凑变体在长度为 ``size`` 的区间上的最大探测次数：ceil(log2 n) + 1。"""
    if size < 1:
        return 0
    return (size - 1).bit_length() + 1


class DataGenerator:
    """测试数据生成器"""

    @staticmethod
    def sorted_even(size: int) -> List[int]:
        """生成 0, 2, 4, ... 的有序列表，奇数一定不在其中。"""
        return np.arange(0, 2 * size, 2, dtype=np.int64).tolist()

    @staticmethod
    def keys(size: int, trials: int, hit_ratio: float, rng: np.random.Generator) -> List[tuple]:
        """生成 ``(key, present)`` 序列，命中比例约为 ``hit_ratio``。"""
        hits = rng.random(trials) < hit_ratio
        positions = rng.integers(0, size, trials)
        # 未命中的键取奇数，-1 覆盖比最小值还小的情况
        misses = 2 * rng.integers(-1, size, trials) + 1
        keys = np.where(hits, 2 * positions, misses)
        return [(int(k), bool(h)) for k, h in zip(keys, hits)]


def _measure(func: SearchFunc, data: List[int], keys: List[tuple]) -> Dict[str, Any]:
    counter = ProbeCounter(data)
    probes = np.empty(len(keys), dtype=np.int64)
    hits = np.empty(len(keys), dtype=bool)

    start = time.perf_counter()
    for i, (key, present) in enumerate(keys):
        counter.reset()
        index = func(key, counter)
        if present and (index < 0 or data[index] != key):
            raise RuntimeError(f"{func.__name__} 未找到已存在的键 {key}")
        probes[i] = counter.probes
        hits[i] = present
    elapsed = time.perf_counter() - start

    return {
        "mean_probes": float(probes.mean()),
        "max_probes": int(probes.max()),
        "hit_mean_probes": float(probes[hits].mean()) if hits.any() else None,
        "miss_mean_probes": float(probes[~hits].mean()) if (~hits).any() else None,
        "mean_time": elapsed / len(keys),
    }


def compare_variants(
    sizes: Iterable[int],
    *,
    trials: int = 200,
    hit_ratio: float = 0.5,
    seed: Optional[int] = 0,
    variants: Optional[Dict[str, SearchFunc]] = None,
) -> List[VariantStats]:
    """
    在多个输入规模上比较各查找实现

    Args:
        sizes: 输入规模列表，必须为正整数
        trials: 每个规模的查找次数
        hit_ratio: 键存在于数据中的比例，取值 [0, 1]
        seed: 随机种子，None 表示不固定
        variants: 名称到查找函数的映射，默认比较紧凑与常见两种写法

    Returns:
        按规模、算法排列的统计列表

    Raises:
        ValueError: 参数取值无效
    """
    if trials < 1:
        raise ValueError("trials 必须大于 0")
    if not 0.0 <= hit_ratio <= 1.0:
        raise ValueError("hit_ratio 必须在 [0, 1] 之间")
    variants = variants or VARIANTS

    rng = np.random.default_rng(seed)
    results: List[VariantStats] = []
    for size in sizes:
        if size < 1:
            raise ValueError(f"输入规模必须为正整数，得到: {size}")
        data = DataGenerator.sorted_even(size)
        keys = DataGenerator.keys(size, trials, hit_ratio, rng)
        for name, func in variants.items():
            measured = _measure(func, data, keys)
            results.append(VariantStats(variant=name, size=size, trials=trials, **measured))
            logger.debug("size=%d variant=%s mean_probes=%.2f", size, name, measured["mean_probes"])
    return results


def format_report(stats: Iterable[VariantStats]) -> str:
    """把统计结果渲染成文本表格。"""
    def fmt(value: Optional[float]) -> str:
        return "-" if value is None else f"{value:.2f}"

    header = f"{'size':>8}  {'variant':<8}  {'mean':>6}  {'max':>4}  {'hit':>6}  {'miss':>6}  {'us/op':>8}"
    lines = [header, "-" * len(header)]
    for s in stats:
        lines.append(
            f"{s.size:>8}  {s.variant:<8}  {s.mean_probes:>6.2f}  {s.max_probes:>4}  "
            f"{fmt(s.hit_mean_probes):>6}  {fmt(s.miss_mean_probes):>6}  {s.mean_time * 1e6:>8.2f}"
        )
    return "\n".join(lines)
