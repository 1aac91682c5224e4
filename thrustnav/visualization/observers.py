# thrustnav/visualization/observers.py
import logging
from collections import deque
import time
import os
from typing import Any, Deque, Dict, List, Optional, Tuple

from thrustnav.types import Point
from thrustnav.planning.interfaces import IPlannerObserver

# observer.log 使用的级别名 -> logging 级别
LOG_LEVELS = {
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'WARN': logging.WARNING,
    'ERROR': logging.ERROR,
}


class EfficientObserver(IPlannerObserver):
    """
    高效运行模式 (Null Object)
    规划器和控制循环的默认观察者，什么都不记录，只把 ERROR 打到控制台。
    """
    def record_sample(self, point: Point): pass
    def record_current_expansion(self, node: Point): pass
    def record_edge(self, start_node: Point, end_node: Point): pass
    def set_map_info(self, map_info: Any): pass
    def record_tick(self, snapshot: Any): pass

    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        if level == 'ERROR':
            print(f"[ERROR] {message}")


class ExperimentObserver(IPlannerObserver):
    """
    实验模式
    保留 RRT 的采样点、树节点、树枝，以及每个控制周期的 TickSnapshot，
    供 ScenePlotter 作图或离线回放。log 只留在内存里。
    ticks 只保留最近 max_ticks 个快照 (None 表示不限)。
    """
    def __init__(self, max_ticks: Optional[int] = 10000):
        self.samples: List[Point] = []
        self.expanded_nodes: List[Point] = []
        self.edges: List[Tuple[Point, Point]] = []
        self.ticks: Deque[Any] = deque(maxlen=max_ticks)
        # (level, message) 按时间顺序
        self.messages: List[Tuple[str, str]] = []
        self.map_info = None

    def record_sample(self, point: Point):
        self.samples.append(point)

    def record_current_expansion(self, node: Point):
        self.expanded_nodes.append(node)

    def record_edge(self, start_node: Point, end_node: Point):
        self.edges.append((start_node, end_node))

    def set_map_info(self, map_info: Any):
        self.map_info = map_info

    def record_tick(self, snapshot: Any):
        self.ticks.append(snapshot)

    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        self.messages.append((level, message))

    def messages_at(self, level: str) -> List[str]:
        return [m for lvl, m in self.messages if lvl == level]


class DebugObserver(ExperimentObserver):
    """
    Debug 模式
    在实验模式的全部记录之外，把过程写进带时间戳的日志文件，
    用于分析一次导航为什么撞墙、绕圈或规划失败。

    控制周期是 60 Hz，tick_log_interval 控制多少个周期写一次代价分解。
    """
    def __init__(self, log_dir: str = "logs/planning_debug", tick_log_interval: int = 1,
                 max_ticks: Optional[int] = 10000):
        super().__init__(max_ticks)
        self.tick_log_interval = max(1, tick_log_interval)

        self.log_dir = log_dir
        os.makedirs(self.log_dir, exist_ok=True)

        timestamp = time.strftime("%Y%m%d_%H%M%S")
        self.log_file = os.path.join(self.log_dir, f"nav_debug_{timestamp}_{id(self):x}.log")

        # 每个实例一个独立 logger，不向根 logger 传播
        self.logger = logging.getLogger(f"thrustnav.debug.{timestamp}.{id(self):x}")
        self.logger.setLevel(logging.DEBUG)
        self.logger.propagate = False

        if not self.logger.handlers:
            fh = logging.FileHandler(self.log_file, encoding='utf-8')
            fh.setLevel(logging.DEBUG)
            fh.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
            self.logger.addHandler(fh)

        self.logger.info("=== Debug Session Started ===")

    def record_current_expansion(self, node: Point):
        super().record_current_expansion(node)
        self.logger.debug(f"Expanding: ({node.x:.1f}, {node.y:.1f})")

    def set_map_info(self, map_info: Any):
        super().set_map_info(map_info)
        obstacles = getattr(map_info, 'obstacles', ())
        self.logger.info(f"Arena {getattr(map_info, 'width', '?')}x{getattr(map_info, 'height', '?')}, "
                         f"{len(obstacles)} obstacles")

    def record_tick(self, snapshot: Any):
        super().record_tick(snapshot)
        if snapshot.tick % self.tick_log_interval:
            return
        pos = snapshot.state.position
        aim = snapshot.interpolated_target
        costs = ", ".join(f"{k}={v:.2f}" for k, v in snapshot.costs.as_dict().items() if v)
        self.logger.debug(f"Tick {snapshot.tick}: pos=({pos.x:.1f}, {pos.y:.1f}) "
                          f"aim=({aim.x:.1f}, {aim.y:.1f}) "
                          f"thrust={snapshot.control.thrust:.2f} torque={snapshot.control.torque:.2f} "
                          f"fuel={snapshot.state.fuel:.1f} costs[{costs}]")

    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        super().log(message, level, payload)
        if payload:
            message = f"{message} | Payload: {payload}"
        self.logger.log(LOG_LEVELS.get(level, logging.INFO), message)

    def close(self):
        """释放文件句柄 (测试清理临时目录前调用)"""
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
