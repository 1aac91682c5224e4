# thrustnav/collision/geometry.py
import math
from functools import lru_cache
from typing import NamedTuple, Optional, Sequence, Tuple

from thrustnav.types import Obstacle, Point

EPS = 1e-9


def distance_between(p1: Point, p2: Point) -> float:
    """两点欧氏距离"""
    return math.hypot(p2.x - p1.x, p2.y - p1.y)


def closest_point_on_segment(p: Point, a: Point, b: Point) -> Point:
    """
    点到线段的最近点 (投影参数钳制到 [0, 1]，是线段钳制而非直线钳制)
    退化线段 (a == b) 直接返回 a
    """
    vx = b.x - a.x
    vy = b.y - a.y
    len_sq = vx * vx + vy * vy
    if len_sq < EPS * EPS:
        return a

    t = ((p.x - a.x) * vx + (p.y - a.y) * vy) / len_sq
    if t < 0:
        return a
    if t > 1:
        return b
    return Point(a.x + t * vx, a.y + t * vy)


def segments_intersect(a: Point, b: Point, c: Point, d: Point) -> bool:
    """
    参数法判断线段 ab 与 cd 是否相交
    平行/共线视为不相交 (共线重叠由端点在矩形内检查兜底)
    """
    rx, ry = b.x - a.x, b.y - a.y
    sx, sy = d.x - c.x, d.y - c.y

    denominator = rx * sy - ry * sx
    if abs(denominator) < 1e-10:
        return False

    t = ((c.x - a.x) * sy - (c.y - a.y) * sx) / denominator
    u = ((c.x - a.x) * ry - (c.y - a.y) * rx) / denominator
    return 0 <= t <= 1 and 0 <= u <= 1


def segment_intersects_rect(a: Point, b: Point, rect: Obstacle) -> bool:
    """线段与矩形相交：任一端点在矩形内，或与四条边之一相交"""
    if rect.contains(a) or rect.contains(b):
        return True
    for e1, e2 in rect.edges():
        if segments_intersect(a, b, e1, e2):
            return True
    return False


def rect_distance(p: Point, rect: Obstacle) -> float:
    """点到矩形的最短距离，点在矩形内时为 0"""
    dx = max(rect.x - p.x, 0.0, p.x - rect.right)
    dy = max(rect.y - p.y, 0.0, p.y - rect.bottom)
    return math.hypot(dx, dy)


def ray_rect_distance(origin: Point, direction: Point, rect: Obstacle) -> Optional[float]:
    """
    射线与矩形四条边求交
    :param direction: 单位方向向量
    :return: 沿射线方向最近的严格正向交点距离；无交点返回 None
    """
    vx, vy = direction.x, direction.y
    best = math.inf

    for p1, p2 in rect.edges():
        x1, y1 = p1.x - origin.x, p1.y - origin.y
        x2, y2 = p2.x - origin.x, p2.y - origin.y

        # 叉积异号 -> 边的两端点位于射线所在直线两侧
        cross1 = x1 * vy - y1 * vx
        cross2 = x2 * vy - y2 * vx
        if cross1 * cross2 > 0:
            continue

        dx, dy = x2 - x1, y2 - y1
        denom = dy * vx - dx * vy
        if abs(denom) < 1e-6:
            continue

        t = (x1 * vy - y1 * vx) / denom
        if t < 0 or t > 1:
            continue

        # 沿射线的有符号距离，只保留前方的交点
        s = (x1 + t * dx) * vx + (y1 + t * dy) * vy
        if 0 < s < best:
            best = s

    return best if best < math.inf else None


class PathProjection(NamedTuple):
    """折线最短连线查询结果"""
    shortest_distance: float
    cross_section_point: Optional[Point]
    segment_index: int                    # 所属线段起点下标，-1 表示空路径
    segment_start: Optional[Point]
    segment_end: Optional[Point]


def shortest_line_to_path(path: Sequence[Point], p: Point) -> PathProjection:
    """
    点到折线的最短连线
    逐段投影并钳制，只有严格更小的距离才替换 (平局保留下标更小的线段)。
    插值器和航点代价共用此函数，必须保持精确。
    """
    if not path:
        return PathProjection(math.inf, None, -1, None, None)
    if len(path) == 1:
        only = path[0]
        return PathProjection(distance_between(p, only), only, 0, only, only)

    best = PathProjection(math.inf, None, -1, None, None)
    for i in range(len(path) - 1):
        a, b = path[i], path[i + 1]
        q = closest_point_on_segment(p, a, b)
        dist = math.hypot(q.x - p.x, q.y - p.y)
        if dist < best.shortest_distance:
            best = PathProjection(dist, q, i, a, b)
    return best


@lru_cache(maxsize=16)
def effective_obstacles(obstacles: Tuple[Obstacle, ...], radius: float) -> Tuple[Obstacle, ...]:
    """按车辆半径膨胀后的障碍物集合 (结果缓存，障碍物集合不可变)"""
    return tuple(o.inflate(radius) for o in obstacles)
