"""Simulation context: owns the flock, its parameters, and the camera."""

from typing import Optional

from .camera import Camera
from .errors import FatalSimulationError
from .flock import Flock
from .settings import SimulationConfig


class Simulation:
    """
    Runs ticks in a fixed order: steering, integration, camera framing.

    Each stage finishes over the whole flock before the next one starts.
    A FatalSimulationError from any stage leaves ``halted`` set and
    propagates to the caller.
    """

    def __init__(
        self,
        config: SimulationConfig,
        camera: Optional[Camera] = None,
        flock: Optional[Flock] = None,
    ):
        self.config = config
        self.camera = camera if camera is not None else Camera()
        self.flock = flock if flock is not None else Flock(config)
        self.tick_count = 0
        self.elapsed = 0.0
        self.halted = False
        self.perceive = True

    def step(self, dt: float):
        """Advance one tick of ``dt`` seconds."""
        if dt < 0:
            raise ValueError(f"elapsed time must be non-negative, got {dt}")
        if self.halted:
            raise RuntimeError("simulation halted after a fatal error")

        try:
            self.flock.steer(perceive=self.perceive)
            self.flock.integrate(dt)
            self.camera.frame(self.flock.positions)
        except FatalSimulationError:
            self.halted = True
            raise

        self.tick_count += 1
        self.elapsed += dt

    def run(self, ticks: int, dt: float, callback=None):
        """
        Run ``ticks`` fixed-size steps.

        ``callback(simulation)`` is called after every tick.
        """
        for _ in range(ticks):
            self.step(dt)
            if callback is not None:
                callback(self)

    def reset(self):
        """Respawn the flock and restart the tick counter."""
        self.flock = Flock(self.config, rng=self.flock.rng)
        self.tick_count = 0
        self.elapsed = 0.0
        self.halted = False
