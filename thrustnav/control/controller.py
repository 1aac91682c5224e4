# thrustnav/control/controller.py
import math
import numpy as np
from typing import Optional, Sequence

from thrustnav.types import Control, CostComponents, Point, VehicleState
from thrustnav.vehicles import ThrustVehicle
from thrustnav.planning.costs import CostModel
from .config import ControllerConfig


class TrajectoryController:
    """
    滚动时域随机打靶控制器 (Random Shooting)

    每个周期从零开始：
    1. 采样 iterations 个恒定控制 (thrust ~ U[0, thrust_max], torque ~ U[-torque_max, torque_max])
    2. 每个候选从状态副本出发前向仿真 horizon 步，累加每步的代价
    3. 取累计代价最小的控制

    这是零阶采样搜索，不是基于梯度的 DDP。
    """
    def __init__(self,
                 vehicle: ThrustVehicle,
                 cost_model: CostModel,
                 config: Optional[ControllerConfig] = None,
                 rng: Optional[np.random.Generator] = None,
                 seed: Optional[int] = None):
        self.vehicle = vehicle
        self.cost_model = cost_model
        self.config = config if config is not None else ControllerConfig()
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self._last_costs = CostComponents.zero()

    def compute_control(self,
                        state: VehicleState,
                        target: Optional[Point] = None,
                        waypoints: Sequence[Point] = ()) -> Control:
        """
        :param state: 当前状态 (不会被修改)
        :param target: 瞄准点；缺省时用当前位置 (只剩稳定类代价)
        :param waypoints: 航点折线，供航点跟随代价使用
        """
        if target is None:
            target = state.position
        context = self.cost_model.make_context(target, waypoints or ())

        cfg = self.config
        thrust_max = self.vehicle.config.thrust_max
        torque_max = self.vehicle.config.torque_max

        best_cost = math.inf
        best_control = Control.zero()
        best_costs = None

        for _ in range(cfg.iterations):
            candidate = Control(float(self.rng.uniform(0.0, thrust_max)),
                                float(self.rng.uniform(-torque_max, torque_max)))

            cumulative, final_costs = self._rollout(state, candidate, context)
            if cumulative < best_cost:
                best_cost = cumulative
                best_control = candidate
                best_costs = final_costs

        if best_costs is not None:
            self._last_costs = best_costs
        return best_control

    def _rollout(self, state: VehicleState, control: Control, context):
        sim_state = state.copy()
        cumulative = 0.0
        costs = CostComponents.zero()
        for _ in range(self.config.horizon):
            self.vehicle.step(sim_state, control, self.config.dt)
            costs = self.cost_model.evaluate_in(sim_state, context)
            cumulative += costs.total
        return cumulative, costs

    def get_last_costs(self) -> CostComponents:
        """最近一次评估中获胜候选在最后一个仿真步的代价分解"""
        return self._last_costs
