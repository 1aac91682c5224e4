import unittest
import sys
import os

sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from thrustnav.types import Obstacle, Point
from thrustnav.map import Arena
from thrustnav.collision import CollisionChecker, CollisionConfig


class TestCollisionChecker(unittest.TestCase):
    def setUp(self):
        self.arena = Arena(800, 600, [Obstacle(300, 200, 100, 100)])
        self.checker = CollisionChecker(CollisionConfig(vehicle_radius=15.0, boundary_margin=20.0))

    def test_segment_through_obstacle_collides(self):
        self.assertTrue(self.checker.segment_collides(Point(100, 250), Point(500, 250), self.arena))

    def test_segment_within_inflation_collides(self):
        # 贴着障碍物上边 10px 经过，小于车辆半径
        self.assertTrue(self.checker.segment_collides(Point(100, 190), Point(500, 190), self.arena))

    def test_clear_segment(self):
        self.assertFalse(self.checker.segment_collides(Point(100, 100), Point(500, 100), self.arena))

    def test_segment_outside_boundary_margin_collides(self):
        self.assertTrue(self.checker.segment_collides(Point(10, 100), Point(100, 100), self.arena))
        self.assertTrue(self.checker.segment_collides(Point(100, 100), Point(100, 590), self.arena))

    def test_check_position(self):
        self.assertFalse(self.checker.check_position(Point(100, 100), self.arena))
        self.assertTrue(self.checker.check_position(Point(290, 250), self.arena))   # 距离 10 < 15
        self.assertFalse(self.checker.check_position(Point(280, 250), self.arena))  # 距离 20
        self.assertTrue(self.checker.check_position(Point(5, 100), self.arena))     # 边界

    def test_invalid_config(self):
        with self.assertRaises(ValueError):
            CollisionConfig(vehicle_radius=-1.0)


if __name__ == '__main__':
    unittest.main()
