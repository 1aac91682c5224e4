# thrustnav/collision/checker.py
from typing import Optional

from thrustnav.map.arena import Arena
from thrustnav.types import Point
from .config import CollisionConfig
from .geometry import effective_obstacles, rect_distance, segment_intersects_rect


class CollisionChecker:
    def __init__(self, config: Optional[CollisionConfig] = None):
        if config is None:
            self.config = CollisionConfig()
        else:
            self.config = config

    @property
    def vehicle_radius(self) -> float:
        return self.config.vehicle_radius

    def segment_collides(self, start: Point, end: Point, arena: Arena) -> bool:
        """
        规划层入口：检查直线段 start -> end 是否碰撞
        :return: True 表示碰撞 (不安全), False 表示安全
        """
        # --- Phase 1: 边界 (O(1)) ---
        margin = self.config.boundary_margin
        if not arena.is_inside(start, margin) or not arena.is_inside(end, margin):
            return True

        # --- Phase 2: 膨胀障碍物 (四条边求交 + 端点在内) ---
        for rect in effective_obstacles(arena.obstacles, self.config.vehicle_radius):
            if segment_intersects_rect(start, end, rect):
                return True
        return False

    def check_position(self, position: Point, arena: Arena) -> bool:
        """
        仿真层入口：飞行器在 position 处是否与边界或障碍物接触
        只做几何检测，碰撞响应 (反弹) 由外部负责
        """
        if not arena.is_inside(position, self.config.boundary_margin):
            return True

        radius = self.config.vehicle_radius
        for obstacle in arena.obstacles:
            if rect_distance(position, obstacle) < radius:
                return True
        return False
