import sys
import os
import pytest

sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from thrustnav.types import Point
from thrustnav.planning.interpolation import PathInterpolator

STRAIGHT = [Point(0, 0), Point(50, 0), Point(150, 0)]
SLOPE = [Point(0, 0), Point(50, 0), Point(150, 150)]
FINAL = Point(300, 0)


@pytest.fixture
def interpolator():
    return PathInterpolator(lookahead_distance=100, max_distance_to_path=200)


@pytest.mark.parametrize("position, expected", [
    (Point(24, 27), Point(97, 0)),
    (Point(-1, 0), Point(99, 0)),
    (Point(0, 0), Point(100, 0)),
    (Point(50, 0), Point(150, 0)),       # 正好到达终点航点，不越过
    (Point(-1000, 0), Point(-900, 0)),   # 远离路径：直线回到路径
])
def test_straight_path(interpolator, position, expected):
    result = interpolator.get_interpolated_target(position, STRAIGHT, FINAL)
    assert result.x == pytest.approx(expected.x)
    assert result.y == pytest.approx(expected.y)


def test_exact_values_for_waypoint_and_steer_back(interpolator):
    assert interpolator.get_interpolated_target(Point(50, 0), STRAIGHT, FINAL) == Point(150, 0)
    assert interpolator.get_interpolated_target(Point(-1000, 0), STRAIGHT, FINAL) == Point(-900, 0)


@pytest.mark.parametrize("position, expected", [
    (Point(49, 10), Point(106, 84)),
    (Point(60, 10), Point(112, 92)),
])
def test_slope_path(interpolator, position, expected):
    result = interpolator.get_interpolated_target(position, SLOPE, FINAL)
    assert result.x == pytest.approx(expected.x, abs=1.0)
    assert result.y == pytest.approx(expected.y, abs=1.0)


@pytest.mark.parametrize("position", [Point(0, 0), Point(123, -45), Point(-7, 999)])
def test_no_waypoints_passthrough(interpolator, position):
    target = Point(42, 17)
    assert interpolator.get_interpolated_target(position, [], target) is target


def test_lookahead_clamped_to_last_waypoint(interpolator):
    # 距离终点航点只有 30，前视距离被截断为 30
    result = interpolator.get_interpolated_target(Point(120, 0), STRAIGHT, FINAL)
    assert result == Point(150, 0)


def test_needs_replanning(interpolator):
    assert not interpolator.needs_replanning(Point(50, 150), STRAIGHT)
    assert interpolator.needs_replanning(Point(50, 250), STRAIGHT)
    assert not interpolator.needs_replanning(Point(50, 250), [])


def test_accessors_and_validation():
    interp = PathInterpolator()
    assert interp.lookahead_distance == 75
    assert interp.max_distance_to_path == 300
    with pytest.raises(ValueError):
        PathInterpolator(lookahead_distance=0)
