# thrustnav/collision/config.py
from dataclasses import dataclass


@dataclass
class CollisionConfig:
    # 车辆碰撞半径：障碍物按此膨胀，规划出的路径可直接飞行
    vehicle_radius: float = 15.0
    # 边界安全余量：离竞技场边界小于该距离视为碰撞
    boundary_margin: float = 20.0

    def __post_init__(self):
        if self.vehicle_radius < 0 or self.boundary_margin < 0:
            raise ValueError("Collision radius and boundary margin must be non-negative")
