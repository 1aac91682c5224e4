import pytest
import sys
import os
import glob
import logging

sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from thrustnav.types import Point
from thrustnav.map import Arena
from thrustnav.collision import CollisionChecker
from thrustnav.planning.planners import RRTPathPlanner
from thrustnav.visualization.observers import EfficientObserver, ExperimentObserver, DebugObserver


@pytest.fixture
def planner_setup():
    arena = Arena(400, 400)
    planner = RRTPathPlanner(arena, CollisionChecker(), step_size=20, max_iterations=500, seed=0)
    start = Point(50, 50)
    goal = Point(350, 350)
    return planner, start, goal


def test_efficient_mode(planner_setup):
    planner, start, goal = planner_setup
    observer = EfficientObserver()

    path = planner.find_path(start, goal, observer=observer)

    assert path
    assert not hasattr(observer, 'expanded_nodes')
    assert not hasattr(observer, 'samples')


def test_experiment_mode(planner_setup):
    planner, start, goal = planner_setup
    observer = ExperimentObserver()

    planner.find_path(start, goal, observer=observer)

    assert len(observer.samples) > 0
    assert len(observer.expanded_nodes) > 0
    assert len(observer.edges) == len(observer.expanded_nodes)
    assert observer.map_info is planner.arena


def test_debug_mode(planner_setup, tmp_path):
    planner, start, goal = planner_setup
    log_dir = str(tmp_path / "planning_debug")

    observer = DebugObserver(log_dir=log_dir)
    planner.find_path(start, goal, observer=observer)
    observer.log("failure detail", level='WARN', payload={'reason': 'test'})
    observer.close()

    # 1. 兼容实验模式 (可以取到 expanded_nodes)
    assert len(observer.expanded_nodes) > 0

    # 2. 检查日志文件
    log_files = glob.glob(os.path.join(log_dir, "*.log"))
    assert len(log_files) == 1

    with open(log_files[0], 'r', encoding='utf-8') as f:
        content = f.read()
    assert "Start planning" in content
    assert "Goal reached" in content
    assert "WARNING - failure detail | Payload: {'reason': 'test'}" in content


def test_debug_logger_does_not_propagate(tmp_path):
    observer = DebugObserver(log_dir=str(tmp_path))
    assert observer.logger.propagate is False
    assert observer.logger.level == logging.DEBUG
    observer.close()
    assert observer.logger.handlers == []


def test_experiment_tick_history_is_bounded():
    observer = ExperimentObserver(max_ticks=3)
    for tick in range(5):
        observer.record_tick(tick)
    assert list(observer.ticks) == [2, 3, 4]

    unbounded = ExperimentObserver(max_ticks=None)
    for tick in range(5):
        unbounded.record_tick(tick)
    assert len(unbounded.ticks) == 5
