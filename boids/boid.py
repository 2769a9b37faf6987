"""Individual boid record with position, velocity, and orientation."""

import numpy as np
from dataclasses import dataclass, field


@dataclass
class Boid:
    """
    A single boid (bird-oid object) in the simulation.

    Boids live on the horizontal plane: velocities are (x, z) pairs and the
    vertical coordinate of the position never changes.

    Attributes:
        position: 3D position vector (x, y, z)
        velocity: 2D horizontal velocity (x, z)
        previous_velocity: Velocity applied on the previous tick
        orientation: 3x3 rotation matrix; its columns are the local axes
    """
    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    velocity: np.ndarray = field(default_factory=lambda: np.zeros(2))
    previous_velocity: np.ndarray = field(default_factory=lambda: np.zeros(2))
    orientation: np.ndarray = field(default_factory=lambda: np.eye(3))

    @property
    def forward(self) -> np.ndarray:
        """World-space forward axis (local -Z)."""
        return -self.orientation[:, 2]

    @property
    def up(self) -> np.ndarray:
        """World-space up axis (local +Y), tilted by banking."""
        return self.orientation[:, 1]
