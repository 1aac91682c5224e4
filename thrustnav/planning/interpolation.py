# thrustnav/planning/interpolation.py
from typing import Sequence

from thrustnav.types import Point
from thrustnav.collision.geometry import EPS, distance_between, shortest_line_to_path


class PathInterpolator:
    """
    前视点插值器 (Pure Pursuit 风格)
    把 "当前位置 + 航点折线" 转换成一个瞄准点，同时负责偏航检测。

    规则：
    1. 没有航点时直接返回最终目标。
    2. 前视距离 L = min(lookahead, 到最后一个航点的距离)，不越过已知路径终点。
    3. 离路径近 (d < L)：从垂足沿折线向前走 L - d。
    4. 离路径远 (d >= L)：沿 "当前位置 -> 垂足" 的直线走 L，先回到路径上。
    """
    def __init__(self, lookahead_distance: float = 75.0, max_distance_to_path: float = 300.0):
        if lookahead_distance <= 0:
            raise ValueError("lookahead_distance must be positive")
        if max_distance_to_path <= 0:
            raise ValueError("max_distance_to_path must be positive")
        self._lookahead_distance = lookahead_distance
        self._max_distance_to_path = max_distance_to_path

    @property
    def lookahead_distance(self) -> float:
        return self._lookahead_distance

    @property
    def max_distance_to_path(self) -> float:
        return self._max_distance_to_path

    def get_interpolated_target(self,
                                position: Point,
                                waypoints: Sequence[Point],
                                final_target: Point) -> Point:
        if not waypoints:
            return final_target

        projection = shortest_line_to_path(waypoints, position)
        d = projection.shortest_distance
        cross_point = projection.cross_section_point

        lookahead = min(self._lookahead_distance, distance_between(position, waypoints[-1]))

        # 偏离路径：直接朝垂足方向前进 L
        if d >= lookahead:
            return self._move_towards(position, cross_point, lookahead)

        # 贴近路径：从垂足沿折线向前走剩余弧长
        remaining = lookahead - d
        index = projection.segment_index
        current = cross_point
        last = len(waypoints) - 1

        while index < last:
            next_waypoint = waypoints[index + 1]
            to_next = distance_between(current, next_waypoint)
            if remaining > to_next:
                remaining -= to_next
                index += 1
                current = next_waypoint
            else:
                return self._move_towards(current, next_waypoint, remaining)

        # 走完整条折线仍有剩余
        return final_target

    def needs_replanning(self, position: Point, waypoints: Sequence[Point]) -> bool:
        """垂距超过 max_distance_to_path 时需要全量重规划；空路径永远不需要"""
        if not waypoints:
            return False
        return shortest_line_to_path(waypoints, position).shortest_distance > self._max_distance_to_path

    @staticmethod
    def _move_towards(origin: Point, towards: Point, length: float) -> Point:
        dx = towards.x - origin.x
        dy = towards.y - origin.y
        norm = (dx * dx + dy * dy) ** 0.5
        if norm < EPS:
            return origin
        return Point(origin.x + dx * length / norm, origin.y + dy * length / norm)
