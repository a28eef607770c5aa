from abc import ABC, abstractmethod
from typing import Any, Optional

from .config import SearchConfig


class Algorithm(ABC):
    """所有查找算法的基类。

    定义统一的构造与执行接口，算法管理器按名称实例化时统一传入
    ``config``，子类从 ``self.config`` 读取 ``strict``、``recursive`` 等选项。

    子类必须实现:
        execute: 执行算法并返回结果的抽象方法
    """

    #: 注册表中使用的默认名称
    name: str = ""

    def __init__(self, config: Optional[SearchConfig] = None) -> None:
        self.config = config or SearchConfig()

    @abstractmethod
    def execute(self, *args, **kwargs) -> Any:
        """执行算法并返回结果。

        参数:
            *args: 位置参数，具体参数取决于算法实现
            **kwargs: 关键字参数，具体参数取决于算法实现

        返回:
            Any: 算法执行的结果，类型取决于具体算法
        """
        raise NotImplementedError
