# thrustnav/control/config.py
from dataclasses import dataclass


@dataclass
class ControllerConfig:
    """随机打靶控制器参数"""
    iterations: int = 30          # 每个周期采样的候选控制数
    horizon: int = 60             # 每个候选的前向仿真步数
    dt: float = 1.0 / 60.0        # 前向仿真步长 [s]

    def __post_init__(self):
        if self.iterations < 0:
            raise ValueError("iterations must be non-negative")
        if self.horizon < 1:
            raise ValueError("horizon must be at least 1")
        if self.dt <= 0:
            raise ValueError("dt must be positive")
