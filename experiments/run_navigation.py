import os
import sys
import time
import argparse

# --- Path Setup ---
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from thrustnav.types import VehicleState
from thrustnav.map import Arena, ObstacleSource
from thrustnav.collision import CollisionChecker
from thrustnav.planning.planners import RRTPathPlanner
from thrustnav.simulation import Navigator
from thrustnav.visualization import DebugObserver, ExperimentObserver, ScenePlotter
from experiments.scenario_config import ScenarioConfig as cfg


class PresetObstacleSource(ObstacleSource):
    """按顺序取预设布局中的前 count 个障碍物"""
    def generate_obstacles(self, start, target, count):
        return cfg.OBSTACLE_LAYOUT[:count]


def build_arena(obstacles_amount):
    source = PresetObstacleSource()
    obstacles = source.generate_obstacles(cfg.START, cfg.TARGET, obstacles_amount)
    return Arena(cfg.ARENA_WIDTH, cfg.ARENA_HEIGHT, obstacles), source


def run_static_mode(obstacles_amount, seed):
    print("--- Static Planning Mode ---")
    arena, _ = build_arena(obstacles_amount)
    checker = CollisionChecker(cfg.COLLISION_CONFIG)
    planner = RRTPathPlanner(arena, checker, seed=seed, **cfg.RRT_PARAMS)

    observer = DebugObserver(log_dir=os.path.join(cfg.LOG_DIR, "planning_debug"))
    print(f"Debug Log initialized: {observer.log_file}")

    t0 = time.perf_counter()
    path = planner.find_path(cfg.START, cfg.TARGET, observer=observer)
    duration_ms = (time.perf_counter() - t0) * 1000
    success = len(path) > 0
    print(f"Planning Finished. Success: {success}, Waypoints: {len(path)}, Time: {duration_ms:.2f} ms")
    observer.close()

    plotter = ScenePlotter(arena, checker.vehicle_radius)
    plotter.draw_arena().draw_tree(observer).draw_endpoints(cfg.START, cfg.TARGET).draw_path(path)
    plotter.save(os.path.join(cfg.LOG_DIR, f"static_o{obstacles_amount}_s{seed}.png"),
                 title=f"RRT | Obstacles={obstacles_amount} | Seed={seed} | {'SUCCESS' if success else 'FAIL'}")
    return success


def run_tracking_mode(obstacles_amount, seed, debug=False):
    print("--- Tracking Mode ---")
    arena, source = build_arena(obstacles_amount)
    checker = CollisionChecker(cfg.COLLISION_CONFIG)

    if debug:
        observer = DebugObserver(log_dir=os.path.join(cfg.LOG_DIR, "tracking_debug"))
        print(f"Debug Log initialized: {observer.log_file}")
    else:
        observer = ExperimentObserver()

    collisions = []
    navigator = Navigator(
        arena,
        VehicleState(cfg.START),
        cfg.TARGET,
        collision_checker=checker,
        controller_config=cfg.CONTROLLER_CONFIG,
        config=cfg.NAVIGATOR_CONFIG,
        obstacle_source=source,
        observer=observer,
        on_collision=lambda flag: collisions.append(flag),
        seed=seed,
        **cfg.RRT_PARAMS,
    )
    navigator.set_obstacles_amount(obstacles_amount)

    t0 = time.time()
    success = navigator.run(max_steps=cfg.MAX_STEPS)
    t1 = time.time()

    print(f"Navigation Finished. Success: {success}, Duration: {t1 - t0:.2f}s")
    print(f"Total Replans: {navigator.path_manager.replan_count}, Ticks: {navigator.tick}, "
          f"Collisions: {collisions.count(True)}, Fuel left: {navigator.state.fuel:.1f}")
    if debug:
        observer.close()

    plotter = ScenePlotter(arena, checker.vehicle_radius)
    plotter.draw_arena().draw_endpoints(cfg.START, cfg.TARGET)
    plotter.draw_path(navigator.path_manager.get_waypoints(), label='Waypoints')
    plotter.draw_trajectory(navigator.trajectory)
    if navigator.last_snapshot is not None:
        plotter.draw_aim_point(navigator.last_snapshot.interpolated_target, navigator.state.position)
    plotter.save(os.path.join(cfg.LOG_DIR, f"tracking_o{obstacles_amount}_s{seed}_{'succ' if success else 'fail'}.png"),
                 title=f"Tracking | Obstacles={obstacles_amount} | Seed={seed} | Ticks={navigator.tick}")
    return success


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--mode", type=str, default="tracking", choices=["tracking", "static"], help="Experiment mode")
    parser.add_argument("--obstacles", type=int, default=3, help="Number of preset obstacles to place")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--debug", action="store_true", help="Write a debug log during tracking")
    args = parser.parse_args()

    if args.mode == "static":
        run_static_mode(args.obstacles, args.seed)
    else:
        run_tracking_mode(args.obstacles, args.seed, args.debug)
