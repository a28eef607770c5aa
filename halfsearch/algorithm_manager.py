"""
查找算法管理器

按名称注册、实例化并执行查找算法，记录每次执行的耗时与结果。
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Type

from .base import Algorithm
from .config import SearchConfig
from .errors import UnknownAlgorithmError
from .searching.basic.binary_search import BoundedBinarySearch
from .searching.basic.classic_search import ClassicBinarySearch


@dataclass
class AlgorithmMetrics:
    """算法执行指标"""
    execution_time: float
    success: bool = True
    error_message: Optional[str] = None
    input_size: Optional[int] = None


class AlgorithmRegistry:
    """算法注册表"""

    def __init__(self):
        self._algorithms: Dict[str, Type[Algorithm]] = {}
        self.register(BoundedBinarySearch.name, BoundedBinarySearch)
        self.register(ClassicBinarySearch.name, ClassicBinarySearch)

    def register(self, name: str, algorithm_class: Type[Algorithm]) -> None:
        """
        注册算法

        Args:
            name: 算法名称
            algorithm_class: 算法类

        Raises:
            TypeError: 算法类没有继承 Algorithm
        """
        if not (isinstance(algorithm_class, type) and issubclass(algorithm_class, Algorithm)):
            raise TypeError(f"算法类 {algorithm_class!r} 必须继承自 Algorithm")
        self._algorithms[name] = algorithm_class

    def get_algorithm(self, name: str) -> Type[Algorithm]:
        """获取算法类"""
        if name not in self._algorithms:
            raise UnknownAlgorithmError(name)
        return self._algorithms[name]

    def list_algorithms(self) -> List[str]:
        """列出算法"""
        return list(self._algorithms.keys())


class AlgorithmManager:
    """
    算法管理器

    使用 ``SearchConfig`` 构造算法实例，执行并记录指标。
    """

    max_history = 1000

    def __init__(self, config: Optional[SearchConfig] = None):
        self.logger = logging.getLogger(__name__)
        self.config = config or SearchConfig()
        self.registry = AlgorithmRegistry()
        self._metrics_history: Dict[str, List[AlgorithmMetrics]] = {}

    def create(self, algorithm_name: Optional[str] = None) -> Algorithm:
        """按名称创建算法实例，未指定名称时使用配置中的默认算法。"""
        name = algorithm_name or self.config.default_algorithm
        return self.registry.get_algorithm(name)(config=self.config)

    def execute_algorithm(self, algorithm_name: Optional[str], *args, **kwargs) -> Any:
        """
        执行算法

        Args:
            algorithm_name: 算法名称，None 表示默认算法
            *args: 算法参数
            **kwargs: 算法关键字参数

        Returns:
            算法执行结果

        Raises:
            UnknownAlgorithmError: 算法不存在
            Exception: 算法执行错误，原样抛出
        """
        name = algorithm_name or self.config.default_algorithm
        algorithm = self.create(name)
        input_size = self._estimate_input_size(args, kwargs)

        start_time = time.perf_counter()
        try:
            result = algorithm.execute(*args, **kwargs)
        except Exception as e:
            execution_time = time.perf_counter() - start_time
            self._record_metrics(name, AlgorithmMetrics(
                execution_time=execution_time,
                success=False,
                error_message=str(e),
                input_size=input_size,
            ))
            self.logger.error("算法 %s 执行失败: %s", name, e)
            raise

        execution_time = time.perf_counter() - start_time
        self._record_metrics(name, AlgorithmMetrics(
            execution_time=execution_time,
            input_size=input_size,
        ))
        self.logger.info("算法 %s 执行成功，耗时: %.6fs", name, execution_time)
        return result

    def get_metrics(self, algorithm_name: str) -> List[AlgorithmMetrics]:
        """获取算法执行指标"""
        return self._metrics_history.get(algorithm_name, [])

    def get_performance_summary(self, algorithm_name: str) -> Dict[str, Any]:
        """
        获取算法性能摘要

        Args:
            algorithm_name: 算法名称

        Returns:
            性能摘要字典，没有执行记录时为空字典
        """
        metrics = self.get_metrics(algorithm_name)
        if not metrics:
            return {}

        successful_metrics = [m for m in metrics if m.success]
        if not successful_metrics:
            return {"total_executions": len(metrics), "success_rate": 0.0}

        execution_times = [m.execution_time for m in successful_metrics]

        return {
            "total_executions": len(metrics),
            "successful_executions": len(successful_metrics),
            "success_rate": len(successful_metrics) / len(metrics),
            "avg_execution_time": sum(execution_times) / len(execution_times),
            "min_execution_time": min(execution_times),
            "max_execution_time": max(execution_times),
            "total_execution_time": sum(execution_times),
        }

    def _estimate_input_size(self, args: tuple, kwargs: dict) -> Optional[int]:
        """估算输入数据大小（取第一个有长度的参数）"""
        for value in list(args) + list(kwargs.values()):
            if hasattr(value, '__len__') and not isinstance(value, (str, bytes)):
                return len(value)
        return None

    def _record_metrics(self, algorithm_name: str, metrics: AlgorithmMetrics) -> None:
        """记录算法执行指标"""
        history = self._metrics_history.setdefault(algorithm_name, [])
        history.append(metrics)

        # 限制历史记录数量
        if len(history) > self.max_history:
            del history[:-self.max_history]
