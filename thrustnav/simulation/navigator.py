# thrustnav/simulation/navigator.py
import numpy as np
from dataclasses import dataclass, replace
from typing import Callable, Optional, Sequence, Tuple

from thrustnav.config import GlobalConfig
from thrustnav.types import Control, CostComponents, Obstacle, Point, VehicleState
from thrustnav.map import Arena, ObstacleSource
from thrustnav.collision import CollisionChecker
from thrustnav.vehicles import ThrusterConfig, ThrustVehicle
from thrustnav.planning.interfaces import IPlannerObserver
from thrustnav.planning.path_manager import PathManager
from thrustnav.planning.costs import CostModel, CostWeights
from thrustnav.control import ControllerConfig, TrajectoryController
from thrustnav.visualization.observers import DebugObserver, EfficientObserver


@dataclass
class NavigatorConfig:
    retry_interval: int = 60           # 无路径时每隔多少个周期重试规划
    goal_tolerance: float = 30.0       # 到达判定距离，不得小于规划器的 goal_threshold
    obstacles_amount: int = 10         # regenerate_obstacles 请求的障碍物数量
    lookahead_distance: float = 75.0
    max_distance_to_path: float = 300.0
    waypoint_threshold: float = 70.0
    progress_interval: int = 60        # run() 打印进度的周期间隔

    def __post_init__(self):
        if self.retry_interval < 1:
            raise ValueError("retry_interval must be at least 1")
        if self.goal_tolerance <= 0:
            raise ValueError("goal_tolerance must be positive")
        if self.obstacles_amount < 1:
            raise ValueError("obstacles_amount must be at least 1")


@dataclass(frozen=True)
class TickSnapshot:
    """每个周期对外暴露的只读快照 (渲染/调试协作者轮询)"""
    tick: int
    state: VehicleState
    control: Control
    interpolated_target: Point
    waypoints: Tuple[Point, ...]
    costs: CostComponents
    lookahead_distance: float


class Navigator:
    """
    固定频率的 "感知-规划-控制-积分" 循环

    每个 step():
    1. 更新航点 (偏航过大时重规划；没有路径时按 retry_interval 重试)
    2. 计算前视瞄准点 (没有路径时退回最终目标)
    3. 随机打靶控制器求控制量
    4. 原地积分飞行器状态
    5. 碰撞检测 (只检测；碰撞响应由外部 collision_response 负责)
    6. 生成快照并交给观察者
    """
    def __init__(self,
                 arena: Arena,
                 start: VehicleState,
                 target: Point,
                 vehicle: Optional[ThrustVehicle] = None,
                 collision_checker: Optional[CollisionChecker] = None,
                 weights: Optional[CostWeights] = None,
                 controller_config: Optional[ControllerConfig] = None,
                 config: Optional[NavigatorConfig] = None,
                 global_config: Optional[GlobalConfig] = None,
                 obstacle_source: Optional[ObstacleSource] = None,
                 observer: Optional[IPlannerObserver] = None,
                 on_collision: Optional[Callable[[bool], None]] = None,
                 collision_response: Optional[Callable[[VehicleState, Tuple[Obstacle, ...]], None]] = None,
                 seed: Optional[int] = None,
                 **planner_params):

        self.arena = arena
        self.target = target
        self.initial_state = start.copy()
        self.state = start.copy()

        self.vehicle = vehicle if vehicle is not None else ThrustVehicle(ThrusterConfig())
        self.collision_checker = collision_checker if collision_checker is not None else CollisionChecker()
        self.weights = weights if weights is not None else CostWeights.path_following()
        self.controller_config = controller_config if controller_config is not None else ControllerConfig()
        self.config = config if config is not None else NavigatorConfig()
        self.global_config = global_config if global_config is not None else GlobalConfig(
            arena_width=arena.width, arena_height=arena.height)

        self.obstacle_source = obstacle_source
        if observer is None:
            observer = DebugObserver() if self.global_config.debug_mode else EfficientObserver()
        self.observer = observer
        self.on_collision = on_collision
        self.collision_response = collision_response

        # 规划与控制各用独立的随机流，互不干扰
        planner_seq, controller_seq = np.random.SeedSequence(seed).spawn(2)
        self.planner_rng = np.random.default_rng(planner_seq)
        self.controller_rng = np.random.default_rng(controller_seq)

        self.path_manager = PathManager(
            arena,
            self.collision_checker,
            lookahead_distance=self.config.lookahead_distance,
            max_distance_to_path=self.config.max_distance_to_path,
            waypoint_threshold=self.config.waypoint_threshold,
            rng=self.planner_rng,
            observer=self.observer,
            **planner_params)

        # 路径终点只保证落在 goal_threshold 以内，瞄准点不会越过它
        goal_threshold = self.path_manager.planner.goal_threshold
        if self.config.goal_tolerance < goal_threshold:
            raise ValueError(f"goal_tolerance ({self.config.goal_tolerance}) must not be smaller than "
                             f"the planner goal_threshold ({goal_threshold})")

        self.controller = self._build_controller()

        self.tick = 0
        self.obstacles_amount = self.config.obstacles_amount
        self.last_snapshot: Optional[TickSnapshot] = None
        self.trajectory = [self.state.position]
        self._ticks_since_plan = 0
        self._has_planned = False

    def _build_controller(self) -> TrajectoryController:
        cost_model = CostModel(self.arena, self.collision_checker.vehicle_radius, self.weights)
        return TrajectoryController(self.vehicle, cost_model, self.controller_config, rng=self.controller_rng)

    # --- 主循环 ---

    def step(self) -> TickSnapshot:
        state = self.state
        pm = self.path_manager

        # 1. 航点维护
        pm.update_waypoints(state.position, self.target)
        self._ticks_since_plan += 1
        if not pm.get_waypoints() and self._ticks_since_plan >= self.config.retry_interval:
            self.plan_path()

        # 2. 前视瞄准点
        aim_point = pm.get_interpolated_target(state.position, self.target)
        waypoints = pm.get_waypoints()

        # 3. 控制
        control = self.controller.compute_control(state, aim_point, waypoints)

        # 4. 积分
        self.vehicle.step(state, control, self.global_config.dt)
        self.trajectory.append(state.position)

        # 5. 碰撞检测
        collided = self.collision_checker.check_position(state.position, self.arena)
        if collided != state.collided:
            state.collided = collided
            if self.on_collision is not None:
                self.on_collision(collided)
            if collided:
                self.observer.log(f"Collision at tick {self.tick}", level='WARN',
                                  payload={'position': state.position})
        if collided and self.collision_response is not None:
            self.collision_response(state, self.arena.obstacles)

        # 6. 快照
        snapshot = TickSnapshot(
            tick=self.tick,
            state=state.copy(),
            control=control,
            interpolated_target=aim_point,
            waypoints=waypoints,
            costs=self.controller.get_last_costs(),
            lookahead_distance=pm.lookahead_distance,
        )
        self.last_snapshot = snapshot
        self.observer.record_tick(snapshot)

        self.tick += 1
        return snapshot

    def run(self, max_steps: int = 1000) -> bool:
        """
        循环执行直到到达目标或步数耗尽
        :return: 是否到达目标
        """
        if not self._has_planned:
            self.plan_path()

        for i in range(max_steps):
            if self.is_goal_reached():
                print(f"Goal Reached in {self.tick} ticks!")
                return True

            if i % self.config.progress_interval == 0:
                pos = self.state.position
                print(f"Tick {self.tick}/{max_steps} | Replan: {self.path_manager.replan_count} | "
                      f"Pos: ({pos.x:.1f}, {pos.y:.1f}) | Waypoints: {len(self.path_manager.get_waypoints())}")
            self.step()

        if self.is_goal_reached():
            print(f"Goal Reached in {self.tick} ticks!")
            return True
        print("Max steps reached.")
        return False

    def is_goal_reached(self) -> bool:
        return self.state.position.distance_to(self.target) < self.config.goal_tolerance

    def reset(self) -> None:
        self.state = self.initial_state.copy()
        self.tick = 0
        self.last_snapshot = None
        self.trajectory = [self.state.position]
        self.plan_path()

    # --- 控制面 (参数注入点) ---

    def plan_path(self) -> Tuple[Point, ...]:
        self._ticks_since_plan = 0
        self._has_planned = True
        return self.path_manager.plan_path(self.state.position, self.target)

    def replan_path(self) -> Tuple[Point, ...]:
        self._ticks_since_plan = 0
        self._has_planned = True
        return self.path_manager.replan_path(self.state.position, self.target)

    def set_weights(self, **changes) -> CostWeights:
        """按字段名修改代价权重，重建代价模型与控制器"""
        self.weights = replace(self.weights, **changes)
        self.controller = self._build_controller()
        self.observer.log("Updated controller weights", level='INFO', payload=changes)
        return self.weights

    def set_waypoint_lookahead_distance(self, distance: float) -> None:
        self.path_manager.set_lookahead_distance(distance)
        self.observer.log(f"Updated waypoint lookahead distance: {distance}", level='INFO')

    def set_obstacles_amount(self, amount: float) -> int:
        self.obstacles_amount = max(1, int(np.floor(amount)))
        self.observer.log(f"Obstacles amount set to {self.obstacles_amount}", level='INFO')
        return self.obstacles_amount

    def regenerate_obstacles(self) -> Tuple[Obstacle, ...]:
        if self.obstacle_source is None:
            raise ValueError("regenerate_obstacles requires an obstacle_source")

        obstacles: Sequence[Obstacle] = self.obstacle_source.generate_obstacles(
            self.state.position, self.target, self.obstacles_amount)
        self.set_obstacles(obstacles)
        return self.arena.obstacles

    def set_obstacles(self, obstacles: Sequence[Obstacle]) -> None:
        """整体替换障碍物集合：重建竞技场、规划器、代价模型，然后重规划"""
        self.arena = self.arena.with_obstacles(obstacles)
        self.path_manager.update_obstacles(self.arena.obstacles)
        self.controller = self._build_controller()
        self.observer.log(f"Obstacles replaced ({len(self.arena.obstacles)})", level='INFO')
        self.replan_path()
