# thrustnav/planning/costs/obstacle_cost.py
from thrustnav.types import VehicleState
from thrustnav.collision.geometry import rect_distance
from .base import CostContext, CostFunction


class ObstacleCost(CostFunction):
    """
    障碍物软约束：到矩形最近点的距离小于 margin 时计费
    使用原始 (未膨胀) 障碍物，margin 本身就是安全距离。
    """
    def __init__(self, weight: float, margin: float = 0.0):
        super().__init__(weight)
        self.margin = margin

    def calculate(self, state: VehicleState, context: CostContext) -> float:
        if not self.enabled:
            return 0.0

        cost = 0.0
        for obstacle in context.arena.obstacles:
            dist = rect_distance(state.position, obstacle)
            if dist < self.margin:
                penetration = self.margin - dist
                cost += self.weight * penetration * penetration
        return cost
