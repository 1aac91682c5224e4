# thrustnav/planning/costs/waypoints_cost.py
import math

from thrustnav.types import VehicleState
from thrustnav.collision.geometry import shortest_line_to_path
from .base import CostContext, CostFunction


class WaypointsCost(CostFunction):
    """
    航点跟随代价 (路径吸引 + 速度塑形)

    Cost = w_dist * d^2 + shaping
    shaping 全部由对齐点积的连续函数构成，没有分支跳变，
    避免随机打靶控制器钻代价曲面的空子：
      a = v_hat . seg_perp              (沿路径方向的对齐度)
          seg_perp = seg_hat - (seg_hat . to_path_hat) to_path_hat
      r = tanh(speed / v_exp)           v_exp = clip(seg_len / 10, 1, 15)
      forward = w_vel * (1 - a * r) + w_vel * (speed / 5) * (1 - a) / 2
      back    = -w_vel * b * min(1, d / 50) * (1 + r)
                b = v_hat . to_path_hat (偏离路径时才有意义)

    同一偏离位置、同样速度下，朝向路径一定比背离路径便宜；
    逆向速度越大代价越高。
    """
    DEGENERATE_EPS = 1e-3

    def __init__(self, distance_weight: float, velocity_weight: float):
        # 总开关：两项权重都为 0 时整项严格为 0
        super().__init__(max(abs(distance_weight), abs(velocity_weight)))
        self.distance_weight = distance_weight
        self.velocity_weight = velocity_weight

    def calculate(self, state: VehicleState, context: CostContext) -> float:
        waypoints = context.waypoints
        if not self.enabled or len(waypoints) < 2:
            return 0.0

        projection = shortest_line_to_path(waypoints, state.position)
        d = projection.shortest_distance

        cost = self.distance_weight * d * d
        if self.velocity_weight == 0:
            return cost
        return cost + self._velocity_shaping(state, projection)

    def _velocity_shaping(self, state: VehicleState, projection) -> float:
        eps = self.DEGENERATE_EPS
        w = self.velocity_weight

        speed = state.speed
        seg_x = projection.segment_end.x - projection.segment_start.x
        seg_y = projection.segment_end.y - projection.segment_start.y
        seg_len = math.hypot(seg_x, seg_y)

        # 静止或重复航点产生的零长线段：跳过塑形
        if speed < eps or seg_len < eps:
            return 0.0

        vx = state.velocity.x / speed
        vy = state.velocity.y / speed
        sx = seg_x / seg_len
        sy = seg_y / seg_len

        d = projection.shortest_distance
        to_path_x = to_path_y = 0.0
        if d > eps:
            to_path_x = (projection.cross_section_point.x - state.position.x) / d
            to_path_y = (projection.cross_section_point.y - state.position.y) / d
            # 垂足落在线段端点 (越过终点、拐角外侧) 时 seg_hat 与 to_path_hat 不垂直，
            # 去掉 seg_hat 在 to_path_hat 上的分量，朝向/背离路径只由回归项区分
            along = sx * to_path_x + sy * to_path_y
            sx -= along * to_path_x
            sy -= along * to_path_y

        # 1. 沿路径前进
        alignment = vx * sx + vy * sy
        expected_speed = min(15.0, max(1.0, seg_len / 10.0))
        ratio = math.tanh(speed / expected_speed)

        shaping = w * (1.0 - alignment * ratio)
        shaping += w * (speed / 5.0) * (1.0 - alignment) / 2.0

        # 2. 偏离路径时奖励回归方向
        if d > eps:
            back_alignment = vx * to_path_x + vy * to_path_y
            shaping -= w * back_alignment * min(1.0, d / 50.0) * (1.0 + ratio)

        return shaping
