"""Tests for integration, facing, and banking."""

from __future__ import annotations

import math

import numpy as np
import pytest

from boids import NumericCorruptionError, SimulationConfig
from boids.motion import lean_angle
from helpers import make_boid, make_flock

MAX_LEAN = math.radians(45.0)


class TestIntegration:
    def test_constant_velocity_displacement(self, config: SimulationConfig) -> None:
        flock = make_flock(config, make_boid(0.0, 0.0, 2.0, 0.0, y=0.0))
        flock.integrate(0.5)
        np.testing.assert_allclose(flock.positions[0], [1.0, 0.0, 0.0])

    def test_vertical_coordinate_unchanged(self, config: SimulationConfig) -> None:
        flock = make_flock(config, make_boid(1.0, -2.0, 0.7, -1.3, y=0.4))
        for _ in range(10):
            flock.integrate(0.1)
        assert flock.positions[0, 1] == 0.4
        np.testing.assert_allclose(flock.positions[0, [0, 2]], [1.7, -3.3])

    def test_zero_elapsed_time_keeps_position(self, config: SimulationConfig) -> None:
        flock = make_flock(config, make_boid(3.0, 4.0, 1.0, 1.0))
        flock.integrate(0.0)
        np.testing.assert_array_equal(flock.positions[0], [3.0, 0.4, 4.0])

    def test_previous_velocity_is_recorded(self, config: SimulationConfig) -> None:
        flock = make_flock(config, make_boid(0.0, 0.0, 1.0, 0.0))
        flock.velocities[0] = [0.5, 0.25]
        flock.integrate(0.1)
        np.testing.assert_array_equal(flock.previous_velocities[0], [0.5, 0.25])


class TestFacing:
    @pytest.mark.parametrize("vx, vz", [(2.0, 0.0), (0.0, -1.0), (-1.0, 1.0)])
    def test_forward_follows_displacement(self, config: SimulationConfig, vx: float, vz: float) -> None:
        flock = make_flock(config, make_boid(0.0, 0.0, vx, vz))
        flock.integrate(0.5)

        forward = flock.boid(0).forward
        expected = np.array([vx, 0.0, vz]) / math.hypot(vx, vz)
        np.testing.assert_allclose(forward, expected, atol=1e-12)

    def test_orientation_stays_a_rotation(self, config: SimulationConfig) -> None:
        flock = make_flock(config, make_boid(0.0, 0.0, 1.0, 2.0))
        flock.velocities[0] = [-2.0, 0.5]
        flock.integrate(0.2)

        m = flock.orientations[0]
        np.testing.assert_allclose(m @ m.T, np.eye(3), atol=1e-12)
        assert np.linalg.det(m) == pytest.approx(1.0)

    def test_zero_displacement_keeps_orientation(self, config: SimulationConfig) -> None:
        flock = make_flock(config, make_boid(0.0, 0.0))
        flock.integrate(0.5)
        np.testing.assert_array_equal(flock.orientations[0], np.eye(3))


class TestBanking:
    def test_lean_angle_bounded_and_monotonic(self) -> None:
        accelerations = np.linspace(0.0, 1.0, 200)
        magnitudes = [abs(lean_angle(a, 40.0, MAX_LEAN)) for a in accelerations]

        assert all(b >= a for a, b in zip(magnitudes, magnitudes[1:]))
        assert max(magnitudes) == pytest.approx(MAX_LEAN)
        for a in accelerations:
            angle = lean_angle(a, 40.0, MAX_LEAN)
            assert -MAX_LEAN <= angle <= MAX_LEAN

    def test_lean_angle_below_clamp_is_linear(self) -> None:
        assert lean_angle(0.01, 40.0, MAX_LEAN) == pytest.approx(-0.4)

    def test_tilts_into_the_turn(self, config: SimulationConfig) -> None:
        # Heading -z after turning left from (1, -1): acceleration points to -x
        flock = make_flock(config, make_boid(0.0, 0.0, 1.0, -1.0))
        flock.velocities[0] = [0.0, -1.0]
        flock.integrate(0.1)

        boid = flock.boid(0)
        # Acceleration 0.1 * 40 exceeds the clamp, so the lean is the full 45 degrees
        assert boid.up[0] < 0.0
        assert boid.up[1] == pytest.approx(math.cos(MAX_LEAN))
        np.testing.assert_allclose(boid.forward, [0.0, 0.0, -1.0], atol=1e-12)

    def test_banking_does_not_move_the_boid(self, config: SimulationConfig) -> None:
        flock = make_flock(config, make_boid(2.0, 3.0))
        flock.velocities[0] = [0.0, 4.0]
        flock.integrate(0.25)
        np.testing.assert_allclose(flock.positions[0], [2.0, 0.4, 4.0])

    def test_steady_velocity_does_not_bank(self, config: SimulationConfig) -> None:
        flock = make_flock(config, make_boid(0.0, 0.0, 0.0, 1.0))
        flock.integrate(0.1)
        np.testing.assert_allclose(flock.boid(0).up, [0.0, 1.0, 0.0], atol=1e-12)


class TestNumericCorruption:
    def test_nan_velocity_is_fatal(self, config: SimulationConfig) -> None:
        flock = make_flock(config, make_boid(0.0, 0.0, 1.0, 0.0), make_boid(5.0, 5.0, 1.0, 0.0))
        flock.velocities[1, 1] = np.nan
        positions = flock.positions.copy()

        with pytest.raises(NumericCorruptionError) as excinfo:
            flock.integrate(0.1)

        assert excinfo.value.index == 1
        assert excinfo.value.stage == "integrate"
        np.testing.assert_array_equal(flock.positions, positions)
