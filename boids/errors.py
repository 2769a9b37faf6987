"""Fatal simulation outcomes."""


class FatalSimulationError(RuntimeError):
    """
    Raised when the simulation state is corrupted and must not continue.

    Attributes:
        stage: Name of the tick stage that detected the corruption
    """

    def __init__(self, stage: str, message: str):
        super().__init__(f"{stage}: {message}")
        self.stage = stage


class NumericCorruptionError(FatalSimulationError):
    """A boid's velocity contains NaN."""

    def __init__(self, index: int, velocity):
        super().__init__(
            "integrate",
            f"boid {index} has a NaN velocity ({velocity[0]}, {velocity[1]})"
        )
        self.index = index


class DegenerateCameraError(FatalSimulationError):
    """The camera distance needed to frame the flock is not a finite number."""

    def __init__(self, distance: float, radius: float, fov: float):
        super().__init__(
            "frame",
            f"camera distance {distance} (radius={radius}, limiting fov={fov:.4f} rad)"
        )
        self.distance = distance
