import sys
import os
import math
import pytest

sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from thrustnav.types import Control, Point, VehicleState
from thrustnav.vehicles import ThrusterConfig, ThrustVehicle, VehicleBase

DT = 1.0 / 60.0


@pytest.fixture
def vehicle():
    return ThrustVehicle(ThrusterConfig())


def test_free_fall_semi_implicit_euler(vehicle):
    state = VehicleState(Point(100, 100))
    vehicle.step(state, Control.zero(), DT)

    # 位置用旧速度 (0) 更新，速度再加上重力
    assert state.position == Point(100, 100)
    assert state.velocity.x == 0.0
    assert state.velocity.y == pytest.approx(9.81 * DT)

    vehicle.step(state, Control.zero(), DT)
    assert state.position.y == pytest.approx(100 + 9.81 * DT * DT)


def test_upright_thrust_cancels_gravity(vehicle):
    state = VehicleState(Point(100, 100))
    for _ in range(60):
        vehicle.step(state, Control(thrust=9.81, torque=0.0), DT)
    assert state.velocity.x == pytest.approx(0.0)
    assert state.velocity.y == pytest.approx(0.0, abs=1e-9)
    assert state.thrust == 9.81


def test_tilted_thrust_pushes_sideways(vehicle):
    state = VehicleState(Point(100, 100), angle=math.pi / 2)
    vehicle.step(state, Control(thrust=10.0, torque=0.0), DT)
    assert state.velocity.x == pytest.approx(10.0 * DT)
    assert state.velocity.y == pytest.approx(9.81 * DT)


def test_torque_and_angle_normalization(vehicle):
    state = VehicleState(Point(0, 0), angle=math.pi - 0.01, angular_velocity=1.2)
    vehicle.step(state, Control(thrust=0.0, torque=3.0), DT)
    assert -math.pi <= state.angle < math.pi
    assert state.angle == pytest.approx(-math.pi - 0.01 + 1.2 * DT)
    assert state.angular_velocity == pytest.approx(1.2 + 3.0 * DT)


def test_rates_clamped_before_integration(vehicle):
    state = VehicleState(Point(0, 0), velocity=Point(5000, -5000), angular_velocity=-1e6)
    vehicle.step(state, Control.zero(), DT)
    assert state.position.x == pytest.approx(1000 * DT)
    assert state.position.y == pytest.approx(-1000 * DT)
    assert state.angular_velocity == pytest.approx(-1000.0)


def test_fuel_tracking(vehicle):
    state = VehicleState(Point(0, 0), fuel=1.0)
    vehicle.step(state, Control(thrust=15.0, torque=0.0), DT)
    assert state.fuel == pytest.approx(1.0 - 15.0 * DT)
    for _ in range(10):
        vehicle.step(state, Control(thrust=15.0, torque=0.0), DT)
    assert state.fuel == 0.0

    untracked = ThrustVehicle(ThrusterConfig(track_fuel=False))
    state = VehicleState(Point(0, 0), fuel=50.0)
    untracked.step(state, Control(thrust=15.0, torque=0.0), DT)
    assert state.fuel == 50.0


def test_propagate_leaves_input_untouched(vehicle):
    state = VehicleState(Point(10, 10), velocity=Point(1, 1))
    result = vehicle.propagate(state, Control(thrust=5.0, torque=1.0), DT)
    assert state.position == Point(10, 10)
    assert result is not state
    assert result.position == Point(10 + DT, 10 + DT)


def test_helpers_and_config():
    assert VehicleBase.normalize_angle(math.pi) == pytest.approx(-math.pi)
    assert VehicleBase.normalize_angle(3 * math.pi / 2) == pytest.approx(-math.pi / 2)
    assert VehicleBase.clamp(-7.0, 5.0) == -5.0

    vehicle = ThrustVehicle(ThrusterConfig(thrust_max=10.0, torque_max=2.0))
    assert vehicle.clamp_control(Control(12.0, -3.0)) == Control(10.0, -2.0)
    assert vehicle.clamp_control(Control(-1.0, 1.0)) == Control(0.0, 1.0)

    with pytest.raises(ValueError):
        ThrusterConfig(thrust_max=-1.0)
