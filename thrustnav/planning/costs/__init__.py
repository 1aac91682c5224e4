# thrustnav/planning/costs/__init__.py

from .base import CostContext, CostFunction
from .position_cost import PositionCost
from .velocity_cost import VelocityCost
from .angular_velocity_cost import AngularVelocityCost
from .boundary_cost import BoundaryCost
from .obstacle_cost import ObstacleCost
from .collision_course_cost import CollisionCourseCost
from .waypoints_cost import WaypointsCost
from .weights import CostWeights
from .total_cost import CostModel

__all__ = ['CostContext', 'CostFunction', 'PositionCost', 'VelocityCost',
           'AngularVelocityCost', 'BoundaryCost', 'ObstacleCost',
           'CollisionCourseCost', 'WaypointsCost', 'CostWeights', 'CostModel']
