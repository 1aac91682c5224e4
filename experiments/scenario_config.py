import sys
import os

# Ensure thrustnav can be imported if this config is used standalone
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from thrustnav.types import Obstacle, Point
from thrustnav.collision import CollisionConfig
from thrustnav.control import ControllerConfig
from thrustnav.simulation import NavigatorConfig


class ScenarioConfig:
    # --- Output Paths ---
    _BASE_DIR = os.path.dirname(os.path.abspath(__file__))
    _PROJECT_DIR = os.path.dirname(_BASE_DIR)
    LOG_DIR = os.path.join(_PROJECT_DIR, "logs", "navigation")

    # --- Arena ---
    ARENA_WIDTH = 800.0
    ARENA_HEIGHT = 600.0

    # --- Start & Target ---
    START = Point(80.0, 520.0)
    TARGET = Point(720.0, 100.0)

    # Preset layout, handed out in order by PresetObstacleSource
    OBSTACLE_LAYOUT = [
        Obstacle(200, 250, 40, 350),
        Obstacle(400, 0, 40, 320),
        Obstacle(560, 220, 40, 380),
        Obstacle(300, 80, 60, 30),
        Obstacle(640, 60, 30, 60),
        Obstacle(120, 120, 50, 50),
        Obstacle(480, 430, 40, 40),
        Obstacle(680, 300, 50, 30),
        Obstacle(300, 480, 60, 30),
        Obstacle(260, 180, 30, 30),
    ]

    # --- Components ---
    COLLISION_CONFIG = CollisionConfig(vehicle_radius=15.0, boundary_margin=20.0)
    CONTROLLER_CONFIG = ControllerConfig(iterations=30, horizon=60)
    NAVIGATOR_CONFIG = NavigatorConfig(obstacles_amount=3, goal_tolerance=30.0)

    RRT_PARAMS = {
        'step_size': 20.0,
        'max_iterations': 3000,
        'goal_bias': 0.1,
        'goal_threshold': 30.0,
    }

    MAX_STEPS = 1800   # 30 s at 60 Hz
