# thrustnav/planning/costs/position_cost.py
from thrustnav.types import VehicleState
from .base import CostContext, CostFunction


class PositionCost(CostFunction):
    """
    目标距离代价
    Cost = weight * |position - target|^2
    """
    def calculate(self, state: VehicleState, context: CostContext) -> float:
        if not self.enabled:
            return 0.0
        dx = state.position.x - context.target.x
        dy = state.position.y - context.target.y
        return self.weight * (dx * dx + dy * dy)
