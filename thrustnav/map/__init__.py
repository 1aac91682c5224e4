from .base import ObstacleSource
from .arena import Arena

__all__ = ["ObstacleSource", "Arena"]
