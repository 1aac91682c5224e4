# thrustnav/types.py
import math
from dataclasses import dataclass, field, fields, replace
from typing import Dict, Tuple


@dataclass(frozen=True)
class Point:
    """
    二维坐标 (竞技场坐标系, y 轴向下)
    不可变值类型，全局通用
    """
    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, k: float) -> "Point":
        return Point(self.x * k, self.y * k)

    __rmul__ = __mul__

    def norm(self) -> float:
        return math.hypot(self.x, self.y)

    def dot(self, other: "Point") -> float:
        return self.x * other.x + self.y * other.y

    def distance_to(self, other: "Point") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Obstacle:
    """轴对齐矩形障碍物 (左上角 + 宽高)"""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float: return self.x + self.width

    @property
    def bottom(self) -> float: return self.y + self.height

    def inflate(self, margin: float) -> "Obstacle":
        """
        [关键] 唯一的障碍物膨胀入口
        规划器碰撞检测、碰撞航向代价都通过这里得到 "有效障碍物"，
        保证车辆半径只在一处生效。
        """
        if margin == 0:
            return self
        return Obstacle(self.x - margin, self.y - margin,
                        self.width + 2 * margin, self.height + 2 * margin)

    def contains(self, p: Point) -> bool:
        """点是否在矩形内 (含边界)"""
        return self.x <= p.x <= self.right and self.y <= p.y <= self.bottom

    def closest_point(self, p: Point) -> Point:
        return Point(min(max(p.x, self.x), self.right),
                     min(max(p.y, self.y), self.bottom))

    def edges(self) -> Tuple[Tuple[Point, Point], ...]:
        """四条边：上 -> 右 -> 下 -> 左"""
        tl = Point(self.x, self.y)
        tr = Point(self.right, self.y)
        br = Point(self.right, self.bottom)
        bl = Point(self.x, self.bottom)
        return ((tl, tr), (tr, br), (br, bl), (bl, tl))


@dataclass
class VehicleState:
    """
    统一的飞行器状态定义
    每个仿真周期由积分器原地修改一次
    """
    position: Point
    velocity: Point = Point(0.0, 0.0)
    angle: float = 0.0              # [rad] 归一化到 [-pi, pi)
    angular_velocity: float = 0.0   # [rad/s]
    thrust: float = 0.0             # 上一次施加的推力
    fuel: float = 1000.0
    collided: bool = False

    def copy(self) -> "VehicleState":
        # Point 不可变，浅拷贝即可得到独立快照
        return replace(self)

    @property
    def speed(self) -> float:
        return self.velocity.norm()


@dataclass(frozen=True)
class Control:
    """控制指令：推力 [0, thrust_max]，力矩 [-torque_max, torque_max]"""
    thrust: float = 0.0
    torque: float = 0.0

    @classmethod
    def zero(cls) -> "Control":
        return cls(0.0, 0.0)


@dataclass(frozen=True)
class CostComponents:
    """
    代价分解报告 (只读)
    total 始终等于其余七项之和
    """
    position: float = 0.0
    velocity: float = 0.0
    angular_velocity: float = 0.0
    obstacle: float = 0.0
    boundary: float = 0.0
    collision_course: float = 0.0
    waypoints: float = 0.0
    total: float = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "total", (
            self.position + self.velocity + self.angular_velocity +
            self.obstacle + self.boundary + self.collision_course +
            self.waypoints))

    @classmethod
    def zero(cls) -> "CostComponents":
        return cls()

    def as_dict(self) -> Dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self)}
