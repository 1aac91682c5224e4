# thrustnav/planning/planners/rrt.py
import time
import numpy as np
from typing import List, Optional

from thrustnav.types import Point
from thrustnav.map.arena import Arena
from thrustnav.collision import CollisionChecker
from thrustnav.planning.planners.base import PlannerBase
from thrustnav.planning.interfaces import IPlannerObserver
from thrustnav.planning.smoother import GreedyShortcutSmoother
from thrustnav.visualization.observers import EfficientObserver


class RRTTree:
    """
    RRT 树的节点池 (arena 存储)
    节点坐标存在预分配的 numpy 数组里，父节点用下标表示 (-1 为根)。
    每个新节点的父节点在创建时已存在于树中，因此不会成环。
    """
    def __init__(self, root: Point, capacity: int):
        self.positions = np.empty((capacity + 1, 2), dtype=float)
        self.parents: List[int] = []
        self.size = 0
        self.add(root, -1)

    def add(self, p: Point, parent: int) -> int:
        self.positions[self.size] = (p.x, p.y)
        self.parents.append(parent)
        self.size += 1
        return self.size - 1

    def point(self, index: int) -> Point:
        x, y = self.positions[index]
        return Point(float(x), float(y))

    def nearest(self, p: Point) -> int:
        """线性扫描最近邻 (向量化)，距离相同取下标最小者"""
        diff = self.positions[:self.size] - (p.x, p.y)
        return int(np.argmin(np.einsum('ij,ij->i', diff, diff)))

    def path_to_root(self, index: int) -> List[Point]:
        path = []
        while index != -1:
            path.append(self.point(index))
            index = self.parents[index]
        path.reverse()
        return path


class RRTPathPlanner(PlannerBase):
    """
    几何 RRT 规划器
    在连续构型空间中随机生长树，找到后用贪心捷径法简化路径。
    规划失败 (迭代耗尽) 返回空列表，这是正常结果而不是错误。
    """
    def __init__(self,
                 arena: Arena,
                 collision_checker: CollisionChecker,
                 step_size: float = 20.0,       # 单次生长最大距离
                 max_iterations: int = 1000,    # 最大采样次数
                 goal_bias: float = 0.1,        # 目标偏置概率
                 goal_threshold: float = 30.0,  # 到达判定距离
                 rng: Optional[np.random.Generator] = None,
                 seed: Optional[int] = None,
                 time_budget_s: Optional[float] = None  # 可选的单次规划时限
                 ):
        if step_size <= 0:
            raise ValueError("step_size must be positive")
        if max_iterations < 0:
            raise ValueError("max_iterations must be non-negative")
        if not 0.0 <= goal_bias <= 1.0:
            raise ValueError("goal_bias must be a probability")

        self.arena = arena
        self.collision_checker = collision_checker

        self.step_size = step_size
        self.max_iter = max_iterations
        self.goal_bias = goal_bias
        self.goal_threshold = goal_threshold
        self.time_budget_s = time_budget_s

        # [关键] 随机源必须可注入，保证测试可复现
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.smoother = GreedyShortcutSmoother(collision_checker, arena)

    def find_path(self,
                  start: Point,
                  goal: Point,
                  observer: Optional[IPlannerObserver] = None) -> List[Point]:

        if observer is None:
            observer = EfficientObserver()
        observer.set_map_info(self.arena)

        # 0. 起点已在目标范围内：直接返回
        if start.distance_to(goal) < self.goal_threshold:
            if not self.collision_checker.segment_collides(start, goal, self.arena):
                return [start, goal]
            return [start]

        # 1. 初始化树
        tree = RRTTree(start, self.max_iter)
        deadline = None
        if self.time_budget_s is not None:
            deadline = time.perf_counter() + self.time_budget_s

        observer.log(f"Start planning... Max Iter: {self.max_iter}, Step: {self.step_size}", level='INFO',
                     payload={'max_iter': self.max_iter, 'step_size': self.step_size,
                              'obstacles': len(self.arena.obstacles)})

        for i in range(self.max_iter):
            if deadline is not None and time.perf_counter() > deadline:
                observer.log(f"Time budget exceeded after {i} iterations", level='WARN')
                return []

            # 2. 采样 (Sample)
            rnd_point = self._get_random_sample(goal)
            observer.record_sample(rnd_point)

            # 3. 寻找最近邻 (Nearest)
            nearest_index = tree.nearest(rnd_point)
            nearest_point = tree.point(nearest_index)

            # 4. 生长 (Steer)
            new_point = self._steer(nearest_point, rnd_point)

            # 5. 碰撞检测 (Collision Check)
            if self.collision_checker.segment_collides(nearest_point, new_point, self.arena):
                continue

            # 6. 添加到树
            new_index = tree.add(new_point, nearest_index)
            observer.record_current_expansion(new_point)
            observer.record_edge(nearest_point, new_point)

            # 7. 判断是否到达目标 (区域)
            if new_point.distance_to(goal) < self.goal_threshold:
                raw_path = tree.path_to_root(new_index)
                path = self.smoother.simplify(raw_path)
                observer.log(f"Goal reached at iteration {i}", level='INFO',
                             payload={'tree_size': tree.size, 'raw_nodes': len(raw_path),
                                      'simplified_nodes': len(path)})
                return path

        observer.log("Max iterations reached, path not found.", level='WARN',
                     payload={'tree_size': tree.size})
        return []

    def _get_random_sample(self, goal: Point) -> Point:
        """随机采样：按 goal_bias 概率直接取目标点，否则在边界余量内均匀撒点"""
        if self.rng.random() < self.goal_bias:
            return goal

        margin = self.collision_checker.config.boundary_margin
        rx = self.rng.uniform(margin, self.arena.width - margin)
        ry = self.rng.uniform(margin, self.arena.height - margin)
        return Point(float(rx), float(ry))

    def _steer(self, from_point: Point, to_point: Point) -> Point:
        """从 from 向 to 最多前进 step_size，更近时直接取采样点"""
        dist = from_point.distance_to(to_point)
        if dist <= self.step_size:
            return to_point
        ratio = self.step_size / dist
        return Point(from_point.x + (to_point.x - from_point.x) * ratio,
                     from_point.y + (to_point.y - from_point.y) * ratio)
