# [入口] 负责暴露类，让外部调用更简洁

# thrustnav/vehicles/__init__.py

from .base import VehicleBase
from .config import VehicleConfig, ThrusterConfig
from .thruster import ThrustVehicle

# 定义对外暴露的列表
__all__ = ["VehicleBase", "VehicleConfig", "ThrusterConfig", "ThrustVehicle"]
