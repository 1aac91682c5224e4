# [关键] 全局配置定义

# thrustnav/config.py
from dataclasses import dataclass, field


@dataclass
class GlobalConfig:
    arena_width: float = 800.0    # 竞技场宽度 (与渲染画布同单位)
    arena_height: float = 600.0
    tick_rate_hz: float = 60.0    # 固定仿真频率
    debug_mode: bool = False

    dt: float = field(init=False)

    def __post_init__(self):
        if self.arena_width <= 0 or self.arena_height <= 0:
            raise ValueError("Arena dimensions must be positive")
        if self.tick_rate_hz <= 0:
            raise ValueError("tick_rate_hz must be positive")
        self.dt = 1.0 / self.tick_rate_hz
