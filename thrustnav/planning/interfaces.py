from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class IPlannerObserver(ABC):
    """
    观察者接口
    RRT 规划器、PathManager 和 Navigator 共用，把记录、调试、作图从算法里剥离。
    实现见 thrustnav.visualization.observers：
    - EfficientObserver: 默认，空实现
    - ExperimentObserver: 保存树和每周期快照，用于作图/回放
    - DebugObserver: 额外写带时间戳的日志文件
    """

    @abstractmethod
    def record_sample(self, point: Any):
        """记录 RRT 的采样点"""
        pass

    @abstractmethod
    def record_current_expansion(self, node: Any):
        """记录新加入树的节点"""
        pass

    @abstractmethod
    def record_edge(self, start_node: Any, end_node: Any):
        """记录树的一条边"""
        pass

    @abstractmethod
    def set_map_info(self, map_info: Any):
        """设置地图信息 (用于可视化背景等)"""
        pass

    @abstractmethod
    def record_tick(self, snapshot: Any):
        """记录一个控制周期的快照 (航点、瞄准点、代价分解等)"""
        pass

    @abstractmethod
    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        """
        结构化日志记录
        :param message: 日志消息
        :param level: 日志级别 'INFO', 'WARN', 'ERROR', 'DEBUG'
        :param payload: 额外的结构化数据 (如状态详情、配置参数等)
        """
        pass
