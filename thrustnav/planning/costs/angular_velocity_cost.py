# thrustnav/planning/costs/angular_velocity_cost.py
from thrustnav.types import VehicleState
from .base import CostContext, CostFunction


class AngularVelocityCost(CostFunction):
    def calculate(self, state: VehicleState, context: CostContext) -> float:
        if not self.enabled:
            return 0.0
        w_omega = self.weight * state.angular_velocity
        return w_omega * w_omega
