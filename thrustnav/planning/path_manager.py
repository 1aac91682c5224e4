# thrustnav/planning/path_manager.py
import numpy as np
from typing import Iterable, Optional, Tuple

from thrustnav.types import Obstacle, Point
from thrustnav.map.arena import Arena
from thrustnav.collision import CollisionChecker
from thrustnav.planning.interfaces import IPlannerObserver
from thrustnav.planning.interpolation import PathInterpolator
from thrustnav.planning.planners import RRTPathPlanner
from thrustnav.visualization.observers import EfficientObserver


class PathManager:
    """
    路径管理 (编排层)
    持有当前航点、规划器和插值器；偏航过大时整条路径重规划 (不做局部修补)。

    规划器只在构造时绑定竞技场，"更新障碍物" 就是重新构造规划器。
    航点列表整体替换为新的 tuple，持有旧引用的读者看到的是一致的旧快照。
    """
    def __init__(self,
                 arena: Arena,
                 collision_checker: Optional[CollisionChecker] = None,
                 lookahead_distance: float = 75.0,
                 max_distance_to_path: float = 300.0,
                 waypoint_threshold: float = 70.0,
                 rng: Optional[np.random.Generator] = None,
                 seed: Optional[int] = None,
                 observer: Optional[IPlannerObserver] = None,
                 **planner_params):
        self.arena = arena
        self.collision_checker = collision_checker if collision_checker is not None else CollisionChecker()
        self.waypoint_threshold = waypoint_threshold
        self.observer = observer if observer is not None else EfficientObserver()

        # 规划器重建时共享同一个随机源，保证整段仿真可复现
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.planner_params = planner_params

        self.planner = self._build_planner()
        self.interpolator = PathInterpolator(lookahead_distance, max_distance_to_path)

        self.waypoints: Tuple[Point, ...] = ()
        self.current_waypoint_index = 0
        self.replan_count = 0
        # update_waypoints 最近一次算出的瞄准点 (供渲染读取)
        self.last_interpolated_target: Optional[Point] = None

    def _build_planner(self) -> RRTPathPlanner:
        return RRTPathPlanner(self.arena, self.collision_checker, rng=self.rng, **self.planner_params)

    # --- 规划 ---

    def plan_path(self, position: Point, target: Point) -> Tuple[Point, ...]:
        path = self.planner.find_path(position, target, observer=self.observer)

        self.waypoints = tuple(path)
        self.current_waypoint_index = 0

        if path:
            self.observer.log(f"Path planned with {len(path)} waypoints", level='INFO',
                              payload={'start': position, 'target': target})
        else:
            # 规划失败不是错误：调用方退回直接瞄准目标，稍后重试
            self.observer.log("No path found, falling back to the final target", level='WARN',
                              payload={'start': position, 'target': target})
        return self.waypoints

    def replan_path(self, position: Point, target: Point) -> Tuple[Point, ...]:
        self.replan_count += 1
        return self.plan_path(position, target)

    def update_waypoints(self, position: Point, target: Point) -> None:
        """每周期调用：推进当前航点下标，偏航过大时全量重规划"""
        if not self.waypoints:
            return

        last = len(self.waypoints) - 1
        while (self.current_waypoint_index < last and
               position.distance_to(self.waypoints[self.current_waypoint_index]) < self.waypoint_threshold):
            self.current_waypoint_index += 1

        self.last_interpolated_target = self.get_interpolated_target(position, target)

        if self.interpolator.needs_replanning(position, self.waypoints):
            self.observer.log("Deviation from path detected, replanning...", level='INFO',
                              payload={'position': position,
                                       'max_distance': self.interpolator.max_distance_to_path})
            self.replan_path(position, target)

    # --- 查询 ---

    def get_interpolated_target(self, position: Point, target: Point) -> Point:
        return self.interpolator.get_interpolated_target(position, self.waypoints, target)

    def needs_replanning(self, position: Point) -> bool:
        return self.interpolator.needs_replanning(position, self.waypoints)

    def get_waypoints(self) -> Tuple[Point, ...]:
        return self.waypoints

    def get_current_waypoint_index(self) -> int:
        return self.current_waypoint_index

    @property
    def lookahead_distance(self) -> float:
        return self.interpolator.lookahead_distance

    # --- 参数注入 ---

    def update_obstacles(self, obstacles: Iterable[Obstacle]) -> None:
        self.arena = self.arena.with_obstacles(obstacles)
        self.planner = self._build_planner()

    def set_lookahead_distance(self, distance: float) -> None:
        self.interpolator = PathInterpolator(distance, self.interpolator.max_distance_to_path)
