"""查找算法的辅助数据结构。"""
from collections.abc import Sequence
from typing import Any, List


class ProbeCounter(Sequence):
    """只读序列包装器，记录算法读取了哪些元素。

    每次按下标读取元素都会计入 ``probes``，读取的下标按顺序保存在
    ``indices`` 中，用来统计比较次数或验证访问模式。切片读取不计数。

    属性:
        data: 被包装的序列
        indices: 按读取顺序记录的下标列表

    示例:
        >>> seq = ProbeCounter([1, 2, 3])
        >>> seq[1]
        2
        >>> seq.probes
        1
    """

    def __init__(self, data: Sequence[Any]) -> None:
        self.data = data
        self.indices: List[int] = []

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self.data[index]
        self.indices.append(index)
        return self.data[index]

    def __len__(self) -> int:
        return len(self.data)

    @property
    def probes(self) -> int:
        return len(self.indices)

    def reset(self) -> None:
        """清空读取记录。"""
        self.indices.clear()
