# thrustnav/planning/costs/velocity_cost.py
from thrustnav.types import VehicleState
from .base import CostContext, CostFunction


class VelocityCost(CostFunction):
    """速度惩罚：(w * vx)^2 + (w * vy)^2"""
    def calculate(self, state: VehicleState, context: CostContext) -> float:
        if not self.enabled:
            return 0.0
        wx = self.weight * state.velocity.x
        wy = self.weight * state.velocity.y
        return wx * wx + wy * wy
