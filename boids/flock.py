"""Flock storage and per-tick stages - structure-of-arrays state driven by Numba kernels."""

from typing import Iterator, Optional

import numpy as np

from .boid import Boid
from .motion import check_velocities, integrate_boids
from .settings import SimulationConfig
from .steering import compute_steering


class Flock:
    """
    All boids of a simulation, stored as parallel numpy arrays.

    Boid ``i`` is row ``i`` of ``positions`` (n, 3), ``velocities`` (n, 2),
    ``previous_velocities`` (n, 2) and ``orientations`` (n, 3, 3).
    """

    def __init__(self, config: SimulationConfig, rng: Optional[np.random.Generator] = None):
        self.config = config
        self.num_boids = config.agent_count
        self.rng = rng if rng is not None else np.random.default_rng(config.seed)

        n = self.num_boids
        spawn = config.spawn_range
        self.positions = np.empty((n, 3), dtype=np.float64)
        self.positions[:, 0] = self.rng.uniform(-spawn, spawn, n)
        self.positions[:, 1] = config.boid_height
        self.positions[:, 2] = self.rng.uniform(-spawn, spawn, n)
        self.velocities = self.rng.uniform(-config.spawn_speed, config.spawn_speed, (n, 2))
        self.previous_velocities = self.velocities.copy()
        self.orientations = np.tile(np.eye(3), (n, 1, 1))

        # Steering writes here, then swaps with velocities
        self._next_velocities = np.zeros((n, 2), dtype=np.float64)
        self.neighbor_counts = np.zeros(n, dtype=np.int64)

    @classmethod
    def from_boids(cls, config: SimulationConfig, boids) -> "Flock":
        """Build a flock with explicit state (used by tests and presets)."""
        boids = list(boids)
        flock = cls(config.with_overrides(agent_count=len(boids)))
        for i, boid in enumerate(boids):
            flock.positions[i] = boid.position
            flock.velocities[i] = boid.velocity
            flock.previous_velocities[i] = boid.previous_velocity
            flock.orientations[i] = boid.orientation
        return flock

    def __len__(self) -> int:
        return self.num_boids

    def __iter__(self) -> Iterator[Boid]:
        for i in range(self.num_boids):
            yield self.boid(i)

    def boid(self, i: int) -> Boid:
        """Snapshot copy of boid ``i``."""
        return Boid(
            position=self.positions[i].copy(),
            velocity=self.velocities[i].copy(),
            previous_velocity=self.previous_velocities[i].copy(),
            orientation=self.orientations[i].copy(),
        )

    def steer(self, perceive: bool = True):
        """
        Apply the flocking rules to every boid.

        With ``perceive=False`` no boid has neighbors, leaving only the wall
        term and the speed limit.
        """
        cfg = self.config
        x_min, x_max, z_min, z_max = cfg.world_bounds
        view_range = cfg.view_range if perceive else 0.0

        compute_steering(
            self.positions,
            self.velocities,
            self._next_velocities,
            self.neighbor_counts,
            float(view_range),
            float(cfg.separation_distance),
            float(cfg.cos_half_fov),
            bool(cfg.use_view_cone),
            float(cfg.cohesion_weight),
            float(cfg.alignment_weight),
            float(cfg.wall_strength),
            float(x_min),
            float(x_max),
            float(z_min),
            float(z_max),
            float(cfg.max_speed),
            self.num_boids
        )

        self.velocities, self._next_velocities = self._next_velocities, self.velocities

    def integrate(self, dt: float):
        """Move every boid by its velocity; raises NumericCorruptionError on NaN."""
        check_velocities(self.velocities)

        cfg = self.config
        integrate_boids(
            self.positions,
            self.velocities,
            self.previous_velocities,
            self.orientations,
            float(dt),
            float(cfg.lean_gain),
            float(cfg.max_lean_radians),
            float(cfg.lean_epsilon),
            self.num_boids
        )

    def mean_speed(self) -> float:
        return float(np.linalg.norm(self.velocities, axis=1).mean())
