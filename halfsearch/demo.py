"""演示程序：在十二个 5 的倍数中查找 30 和 12。"""
from typing import List

from .searching.basic.binary_search import search

SAMPLE = tuple(range(5, 65, 5))
DEMO_KEYS = (30, 12)


def demo_lines() -> List[str]:
    """返回演示输出的各行文本。"""
    lines = [f"Number of elements is {len(SAMPLE)}"]
    for number, key in enumerate(DEMO_KEYS, start=1):
        lines.append(f"Test {number}: {search(key, SAMPLE, 0, len(SAMPLE))}")
    return lines
