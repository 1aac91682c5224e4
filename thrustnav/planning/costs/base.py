# thrustnav/planning/costs/base.py
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Tuple

from thrustnav.types import Obstacle, Point, VehicleState
from thrustnav.map.arena import Arena
from thrustnav.collision.geometry import effective_obstacles


@dataclass(frozen=True)
class CostContext:
    """
    单次代价评估的静态上下文
    在一个控制周期内不变：目标点、航点、竞技场、车辆半径
    """
    target: Point
    arena: Arena
    vehicle_radius: float = 15.0
    waypoints: Tuple[Point, ...] = ()

    @property
    def inflated_obstacles(self) -> Tuple[Obstacle, ...]:
        return effective_obstacles(self.arena.obstacles, self.vehicle_radius)


class CostFunction(ABC):
    """
    代价项基类 (Strategy Interface)
    每一项独立加权；权重为 0 时必须严格返回 0.0，不论状态如何。
    """
    def __init__(self, weight: float):
        self.weight = weight

    @property
    def enabled(self) -> bool:
        return self.weight != 0

    @abstractmethod
    def calculate(self, state: VehicleState, context: CostContext) -> float:
        """
        计算给定状态的代价
        :param state: 飞行器状态 (只读)
        :param context: 本周期的静态上下文
        :return: 代价数值
        """
        pass
