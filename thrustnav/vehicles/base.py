import math
from abc import ABC, abstractmethod

from .config import VehicleConfig
from thrustnav.types import Control, VehicleState


class VehicleBase(ABC):
    """
    车辆接口基类
    """
    def __init__(self, config: VehicleConfig):
        self.config = config

    @abstractmethod
    def step(self, state: VehicleState, control: Control, dt: float) -> VehicleState:
        """
        核心物理推演，留给子类实现
        原地修改 state 并返回它 (每个仿真周期只调用一次)
        """
        pass

    def propagate(self, state: VehicleState, control: Control, dt: float) -> VehicleState:
        """不修改输入，返回推演一步后的新状态"""
        return self.step(state.copy(), control, dt)

    @staticmethod
    def normalize_angle(angle: float) -> float:
        """工具函数：基类提供通用数学计算"""
        return (angle + math.pi) % (2 * math.pi) - math.pi

    @staticmethod
    def clamp(value: float, limit: float) -> float:
        return max(-limit, min(limit, value))
