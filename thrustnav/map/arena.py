# thrustnav/map/arena.py
from dataclasses import dataclass, replace
from typing import Iterable, Tuple

from thrustnav.types import Obstacle, Point


@dataclass(frozen=True)
class Arena:
    """
    有界二维竞技场：边界 + 障碍物集合
    障碍物整体替换，不做原地修改，持有旧引用的读者看到的是一致的旧快照。
    """
    width: float
    height: float
    obstacles: Tuple[Obstacle, ...] = ()

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Arena dimensions must be positive")
        # 允许传入 list，统一存为 tuple
        object.__setattr__(self, "obstacles", tuple(self.obstacles))

    def with_obstacles(self, obstacles: Iterable[Obstacle]) -> "Arena":
        return replace(self, obstacles=tuple(obstacles))

    def is_inside(self, p: Point, margin: float = 0.0) -> bool:
        """检查点是否在 (向内收缩 margin 后的) 边界内"""
        return (margin <= p.x <= self.width - margin and
                margin <= p.y <= self.height - margin)
