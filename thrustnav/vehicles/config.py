# [配置] 该模块独有的配置数据类
from dataclasses import dataclass


@dataclass
class VehicleConfig:
    """所有车辆通用的配置"""
    # 积分前对速度/角速度的钳制上限，只是数值安全阀，不是物理约束
    max_rate: float = 1000.0


@dataclass
class ThrusterConfig(VehicleConfig):
    """
    推力矢量飞行器参数
    坐标系 y 轴向下：重力为正，angle = 0 时推力竖直向上
    """
    gravity: float = 9.81        # 竖直方向加速度
    thrust_max: float = 15.0     # 最大推力 (加速度量纲)
    torque_max: float = 5.0      # 最大力矩 (角加速度量纲)
    fuel_max: float = 1000.0
    track_fuel: bool = True      # 关闭后燃料不再消耗

    def __post_init__(self):
        if self.thrust_max < 0 or self.torque_max < 0:
            raise ValueError("thrust_max and torque_max must be non-negative")
        if self.max_rate <= 0:
            raise ValueError("max_rate must be positive")
