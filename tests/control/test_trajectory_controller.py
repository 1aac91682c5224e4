import unittest
import sys
import os
import numpy as np

sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from thrustnav.types import Control, CostComponents, Obstacle, Point, VehicleState
from thrustnav.map import Arena
from thrustnav.vehicles import ThrusterConfig, ThrustVehicle
from thrustnav.planning.costs import CostModel, CostWeights
from thrustnav.control import ControllerConfig, TrajectoryController


class TestTrajectoryController(unittest.TestCase):
    def setUp(self):
        self.arena = Arena(800, 600, [Obstacle(400, 250, 50, 100)])
        self.vehicle = ThrustVehicle(ThrusterConfig())
        self.cost_model = CostModel(self.arena, 15.0, CostWeights())
        self.state = VehicleState(Point(200, 300), velocity=Point(3, -1), angle=0.2)
        self.target = Point(300, 200)

    def make_controller(self, seed, **config):
        return TrajectoryController(self.vehicle, self.cost_model,
                                    ControllerConfig(**config), rng=np.random.default_rng(seed))

    def test_deterministic_under_fixed_seed(self):
        a = self.make_controller(123).compute_control(self.state, self.target)
        b = self.make_controller(123).compute_control(self.state, self.target)
        self.assertEqual(a, b)

    def test_state_not_mutated(self):
        before = self.state.copy()
        self.make_controller(1).compute_control(self.state, self.target)
        self.assertEqual(self.state, before)

    def test_control_within_limits(self):
        controller = self.make_controller(7)
        for _ in range(5):
            control = controller.compute_control(self.state, self.target)
            self.assertGreaterEqual(control.thrust, 0.0)
            self.assertLessEqual(control.thrust, 15.0)
            self.assertLessEqual(abs(control.torque), 5.0)

    def test_picks_lowest_cost_candidate(self):
        # 手动复现候选序列，逐个 rollout 求最优
        controller = self.make_controller(99, iterations=10, horizon=20)
        chosen = controller.compute_control(self.state, self.target)

        rng = np.random.default_rng(99)
        context = self.cost_model.make_context(self.target)
        best, best_cost = None, float('inf')
        for _ in range(10):
            candidate = Control(float(rng.uniform(0.0, 15.0)), float(rng.uniform(-5.0, 5.0)))
            sim = self.state.copy()
            total = 0.0
            for _ in range(20):
                self.vehicle.step(sim, candidate, 1.0 / 60.0)
                total += self.cost_model.evaluate_in(sim, context).total
            if total < best_cost:
                best, best_cost = candidate, total

        self.assertEqual(chosen, best)

    def test_last_costs_reported(self):
        controller = self.make_controller(5)
        self.assertEqual(controller.get_last_costs(), CostComponents.zero())
        controller.compute_control(self.state, self.target)
        costs = controller.get_last_costs()
        self.assertGreater(costs.total, 0.0)
        self.assertGreater(costs.position, 0.0)

    def test_zero_iterations_returns_zero_control(self):
        controller = self.make_controller(5, iterations=0)
        self.assertEqual(controller.compute_control(self.state, self.target), Control.zero())
        self.assertEqual(controller.get_last_costs(), CostComponents.zero())

    def test_invalid_config(self):
        with self.assertRaises(ValueError):
            ControllerConfig(iterations=-1)
        with self.assertRaises(ValueError):
            ControllerConfig(dt=0.0)


if __name__ == '__main__':
    unittest.main()
