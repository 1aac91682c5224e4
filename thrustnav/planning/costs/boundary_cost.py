# thrustnav/planning/costs/boundary_cost.py
from thrustnav.types import VehicleState
from .base import CostContext, CostFunction


class BoundaryCost(CostFunction):
    """
    边界软约束：距离四条边小于 margin 时按穿透深度的平方计费
    与位置代价同为二次量纲，权重可直接比较。
    """
    def __init__(self, weight: float, margin: float = 50.0):
        super().__init__(weight)
        self.margin = margin

    def calculate(self, state: VehicleState, context: CostContext) -> float:
        if not self.enabled:
            return 0.0

        p = state.position
        arena = context.arena
        # 左, 右, 上, 下
        distances = (p.x, arena.width - p.x, p.y, arena.height - p.y)

        cost = 0.0
        for dist in distances:
            if dist < self.margin:
                penetration = self.margin - dist
                cost += self.weight * penetration * penetration
        return cost
