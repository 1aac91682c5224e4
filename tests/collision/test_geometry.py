import sys
import os
import math
import pytest

sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from thrustnav.types import Obstacle, Point
from thrustnav.collision.geometry import (
    closest_point_on_segment,
    distance_between,
    effective_obstacles,
    ray_rect_distance,
    rect_distance,
    segment_intersects_rect,
    segments_intersect,
    shortest_line_to_path,
)

L_PATH = [Point(0, 0), Point(10, 0), Point(10, 10)]


@pytest.mark.parametrize("query, cross, dist", [
    (Point(0, 10), Point(0, 0), 10.0),
    (Point(1, 5), Point(1, 0), 5.0),
    (Point(1, -5), Point(1, 0), 5.0),
    (Point(-1, -1), Point(0, 0), math.sqrt(2)),
    (Point(11, 0), Point(10, 0), 1.0),
    (Point(11, -1), Point(10, 0), math.sqrt(2)),
    (Point(9, 1), Point(9, 0), 1.0),
])
def test_shortest_line_to_path(query, cross, dist):
    result = shortest_line_to_path(L_PATH, query)
    assert result.shortest_distance == pytest.approx(dist)
    assert result.cross_section_point.x == pytest.approx(cross.x)
    assert result.cross_section_point.y == pytest.approx(cross.y)


def test_shortest_line_tie_keeps_earliest_segment():
    # (10, 0) 同时是两段的端点，距离都为 0
    result = shortest_line_to_path(L_PATH, Point(10, 0))
    assert result.shortest_distance == 0.0
    assert result.segment_index == 0
    assert result.segment_start == Point(0, 0)
    assert result.segment_end == Point(10, 0)


def test_shortest_line_degenerate_paths():
    empty = shortest_line_to_path([], Point(3, 4))
    assert empty.shortest_distance == math.inf
    assert empty.cross_section_point is None
    assert empty.segment_index == -1

    single = shortest_line_to_path([Point(0, 0)], Point(3, 4))
    assert single.shortest_distance == pytest.approx(5.0)
    assert single.cross_section_point == Point(0, 0)


def test_closest_point_on_segment_clamps():
    a, b = Point(0, 0), Point(10, 0)
    assert closest_point_on_segment(Point(-5, 3), a, b) == a
    assert closest_point_on_segment(Point(15, 3), a, b) == b
    assert closest_point_on_segment(Point(4, 3), a, b) == Point(4, 0)
    # 退化线段
    assert closest_point_on_segment(Point(4, 3), a, a) == a


def test_segments_intersect():
    assert segments_intersect(Point(0, 0), Point(10, 10), Point(0, 10), Point(10, 0))
    assert not segments_intersect(Point(0, 0), Point(10, 0), Point(0, 5), Point(10, 5))  # 平行
    assert not segments_intersect(Point(0, 0), Point(10, 0), Point(5, 0), Point(15, 0))  # 共线
    assert not segments_intersect(Point(0, 0), Point(4, 4), Point(0, 10), Point(10, 0))


def test_segment_intersects_rect():
    rect = Obstacle(10, 10, 20, 20)
    assert segment_intersects_rect(Point(0, 20), Point(40, 20), rect)      # 穿过
    assert segment_intersects_rect(Point(15, 15), Point(20, 20), rect)     # 完全在内部
    assert not segment_intersects_rect(Point(0, 0), Point(40, 0), rect)    # 从上方经过


def test_rect_distance():
    rect = Obstacle(10, 10, 20, 20)
    assert rect_distance(Point(20, 20), rect) == 0.0
    assert rect_distance(Point(0, 20), rect) == pytest.approx(10.0)
    assert rect_distance(Point(33, 34), rect) == pytest.approx(5.0)
    assert distance_between(Point(0, 0), Point(3, 4)) == pytest.approx(5.0)


def test_ray_rect_distance_forward_only():
    rect = Obstacle(100, 0, 20, 20)
    origin = Point(0, 10)

    # 朝向障碍物：左边 x = 100
    assert ray_rect_distance(origin, Point(1, 0), rect) == pytest.approx(100.0)
    # 背离障碍物：没有前方交点
    assert ray_rect_distance(origin, Point(-1, 0), rect) is None
    # 平行错开
    assert ray_rect_distance(Point(0, 50), Point(1, 0), rect) is None


def test_effective_obstacles_inflates_once():
    obstacles = (Obstacle(10, 10, 20, 20),)
    inflated = effective_obstacles(obstacles, 5.0)
    assert inflated == (Obstacle(5, 5, 30, 30),)
    assert effective_obstacles(obstacles, 0.0) == obstacles
