# thrustnav/planning/costs/total_cost.py
from typing import Optional, Sequence

from thrustnav.types import CostComponents, Point, VehicleState
from thrustnav.map.arena import Arena
from .base import CostContext
from .weights import CostWeights
from .position_cost import PositionCost
from .velocity_cost import VelocityCost
from .angular_velocity_cost import AngularVelocityCost
from .boundary_cost import BoundaryCost
from .obstacle_cost import ObstacleCost
from .collision_course_cost import CollisionCourseCost
from .waypoints_cost import WaypointsCost


class CostModel:
    """
    七项代价的组合器
    纯函数：evaluate 不修改任何输入，结果只依赖 (state, target, waypoints)。
    """
    def __init__(self, arena: Arena, vehicle_radius: float = 15.0,
                 weights: Optional[CostWeights] = None):
        self.arena = arena
        self.vehicle_radius = vehicle_radius
        self.weights = weights if weights is not None else CostWeights()

        w = self.weights
        self.position_cost = PositionCost(w.position)
        self.velocity_cost = VelocityCost(w.velocity)
        self.angular_velocity_cost = AngularVelocityCost(w.angular_velocity)
        self.boundary_cost = BoundaryCost(w.boundary, w.boundary_margin)
        self.obstacle_cost = ObstacleCost(w.obstacle, w.obstacle_margin)
        self.collision_course_cost = CollisionCourseCost(w.collision_course, w.collision_time_horizon)
        self.waypoints_cost = WaypointsCost(w.waypoints_distance, w.waypoints_velocity)

    def make_context(self, target: Point, waypoints: Sequence[Point] = ()) -> CostContext:
        return CostContext(target=target, arena=self.arena,
                           vehicle_radius=self.vehicle_radius,
                           waypoints=tuple(waypoints))

    def evaluate(self, state: VehicleState, target: Point,
                 waypoints: Sequence[Point] = ()) -> CostComponents:
        return self.evaluate_in(state, self.make_context(target, waypoints))

    def evaluate_in(self, state: VehicleState, context: CostContext) -> CostComponents:
        """在已构造好的上下文中评估 (控制器 rollout 内复用同一个上下文)"""
        return CostComponents(
            position=self.position_cost.calculate(state, context),
            velocity=self.velocity_cost.calculate(state, context),
            angular_velocity=self.angular_velocity_cost.calculate(state, context),
            obstacle=self.obstacle_cost.calculate(state, context),
            boundary=self.boundary_cost.calculate(state, context),
            collision_course=self.collision_course_cost.calculate(state, context),
            waypoints=self.waypoints_cost.calculate(state, context),
        )

    def total(self, state: VehicleState, target: Point, waypoints: Sequence[Point] = ()) -> float:
        return self.evaluate(state, target, waypoints).total
