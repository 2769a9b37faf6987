"""Builders for hand-placed flocks."""

from __future__ import annotations

import numpy as np

from boids import Boid, Flock, SimulationConfig


def make_boid(x: float, z: float, vx: float = 0.0, vz: float = 0.0, y: float = 0.4) -> Boid:
    velocity = np.array([vx, vz])
    return Boid(
        position=np.array([x, y, z]),
        velocity=velocity,
        previous_velocity=velocity.copy(),
    )


def make_flock(config: SimulationConfig, *boids: Boid) -> Flock:
    return Flock.from_boids(config, boids)
