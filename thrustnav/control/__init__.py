# thrustnav/control/__init__.py

from .config import ControllerConfig
from .controller import TrajectoryController

__all__ = [
    "ControllerConfig",
    "TrajectoryController",
]
