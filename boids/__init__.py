"""Planar boids flocking: steering, integration, and camera framing."""

from .boid import Boid
from .camera import Camera
from .errors import DegenerateCameraError, FatalSimulationError, NumericCorruptionError
from .flock import Flock
from .settings import SimulationConfig
from .simulation import Simulation

__all__ = [
    "Boid",
    "Camera",
    "DegenerateCameraError",
    "FatalSimulationError",
    "Flock",
    "NumericCorruptionError",
    "Simulation",
    "SimulationConfig",
]
