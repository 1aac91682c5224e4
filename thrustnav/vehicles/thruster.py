# thrustnav/vehicles/thruster.py
import math

from .base import VehicleBase
from .config import ThrusterConfig
from thrustnav.types import Control, Point, VehicleState


class ThrustVehicle(VehicleBase):
    """
    推力矢量飞行器 (双积分器玩具模型)

    特点：
    1. 推力沿机体轴，方向由 angle 决定；力矩直接改变角速度。
    2. 重力恒定，y 轴向下为正。
    3. 半隐式欧拉：先用旧速度更新位置，再更新速度。
    """

    def __init__(self, config: ThrusterConfig):
        super().__init__(config)
        self.config: ThrusterConfig = config

    def clamp_control(self, control: Control) -> Control:
        thrust = min(max(control.thrust, 0.0), self.config.thrust_max)
        torque = self.clamp(control.torque, self.config.torque_max)
        return Control(thrust, torque)

    def step(self, state: VehicleState, control: Control, dt: float) -> VehicleState:
        cfg = self.config

        # 1. 数值安全阀：病态候选控制可能让速度发散
        vx = self.clamp(state.velocity.x, cfg.max_rate)
        vy = self.clamp(state.velocity.y, cfg.max_rate)
        omega = self.clamp(state.angular_velocity, cfg.max_rate)

        cos_a = math.cos(state.angle)
        sin_a = math.sin(state.angle)

        # 2. 半隐式欧拉积分
        state.position = Point(state.position.x + vx * dt, state.position.y + vy * dt)
        state.velocity = Point(vx + control.thrust * sin_a * dt,
                               vy + (-control.thrust * cos_a + cfg.gravity) * dt)
        state.angle = self.normalize_angle(state.angle + omega * dt)
        state.angular_velocity = omega + control.torque * dt
        state.thrust = control.thrust

        # 3. 燃料 (单调递减，钳制到 0)
        if cfg.track_fuel:
            state.fuel = max(0.0, state.fuel - control.thrust * dt)

        return state
