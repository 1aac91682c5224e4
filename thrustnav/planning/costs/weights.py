# thrustnav/planning/costs/weights.py
from dataclasses import dataclass


@dataclass(frozen=True)
class CostWeights:
    """
    代价权重 (不可变)
    修改权重 = 用 dataclasses.replace 构造新对象，再重建控制器。
    默认值为 "目标追踪" 配置；路径跟随见 path_following()。
    """
    position: float = 15.0
    velocity: float = 1.0
    angular_velocity: float = 0.1
    boundary: float = 9.0
    boundary_margin: float = 50.0
    obstacle: float = 0.0
    obstacle_margin: float = 0.0
    collision_course: float = 25.0
    collision_time_horizon: float = 5.0   # [s]
    waypoints_distance: float = 0.0
    waypoints_velocity: float = 0.0

    def __post_init__(self):
        if self.boundary_margin < 0 or self.obstacle_margin < 0:
            raise ValueError("Cost margins must be non-negative")
        if self.collision_time_horizon < 0:
            raise ValueError("collision_time_horizon must be non-negative")

    @classmethod
    def path_following(cls) -> "CostWeights":
        """关闭目标位置项，由航点跟随项负责牵引"""
        return cls(position=0.0, waypoints_distance=1.0, waypoints_velocity=1.0)
