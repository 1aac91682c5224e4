# thrustnav/planning/planners/__init__.py

from .base import PlannerBase
from .rrt import RRTPathPlanner, RRTTree


__all__ = [
    "PlannerBase",
    "RRTPathPlanner",
    "RRTTree",
]
