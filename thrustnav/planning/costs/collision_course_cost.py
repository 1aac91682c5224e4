# thrustnav/planning/costs/collision_course_cost.py
from thrustnav.types import Point, VehicleState
from thrustnav.collision.geometry import ray_rect_distance
from .base import CostContext, CostFunction


class CollisionCourseCost(CostFunction):
    """
    碰撞航向代价
    沿当前速度方向做射线检测 (障碍物按车辆半径膨胀)，
    预计在 time_horizon 秒内撞上时，距离越近代价越高。
    速度背离所有障碍物时严格为 0。
    """
    MIN_SPEED = 0.1

    def __init__(self, weight: float, time_horizon: float = 5.0):
        super().__init__(weight)
        self.time_horizon = time_horizon

    def calculate(self, state: VehicleState, context: CostContext) -> float:
        if not self.enabled or not context.arena.obstacles:
            return 0.0

        speed = state.speed
        if speed < self.MIN_SPEED:
            return 0.0

        direction = Point(state.velocity.x / speed, state.velocity.y / speed)
        effective_margin = max(10.0 * context.vehicle_radius, self.time_horizon * speed / 2.0)

        cost = 0.0
        for rect in context.inflated_obstacles:
            hit_distance = ray_rect_distance(state.position, direction, rect)
            if hit_distance is None:
                continue

            time_to_collision = hit_distance / speed
            if time_to_collision >= self.time_horizon:
                continue

            # 恒速假设下的碰撞距离
            distance = time_to_collision * speed
            factor = min(effective_margin, max(0.0, effective_margin - distance))
            cost += self.weight * factor * factor
        return cost
