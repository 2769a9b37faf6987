"""Immutable simulation parameters built from the config module."""

import math
from dataclasses import dataclass, fields, replace
from typing import Optional, Tuple


@dataclass(frozen=True)
class SimulationConfig:
    """
    Read-only parameters shared by every stage of a tick.

    Validated once on construction; the stages assume the invariants hold.
    """
    agent_count: int = 200
    view_range: float = 2.5
    separation_distance: float = 0.6
    field_of_view_half_angle: float = 60.0      # Degrees
    use_view_cone: bool = True
    max_speed: float = 3.0
    world_bounds: Tuple[float, float, float, float] = (-7.5, 7.5, -7.5, 7.5)
    cohesion_weight: float = 0.001
    alignment_weight: float = 0.01
    wall_strength: float = 0.05
    spawn_range: float = 5.0
    spawn_speed: float = 0.1
    boid_height: float = 0.4
    lean_gain: float = 40.0
    max_lean: float = 45.0                      # Degrees
    lean_epsilon: float = 1e-6
    seed: Optional[int] = None

    def __post_init__(self):
        if self.agent_count < 1:
            raise ValueError(f"agent_count must be positive, got {self.agent_count}")
        if self.view_range <= 0:
            raise ValueError(f"view_range must be positive, got {self.view_range}")
        if not 0 < self.separation_distance < self.view_range:
            raise ValueError(
                f"separation_distance must be in (0, view_range={self.view_range}), "
                f"got {self.separation_distance}"
            )
        if not 0 < self.field_of_view_half_angle <= 180:
            raise ValueError(
                f"field_of_view_half_angle must be in (0, 180], got {self.field_of_view_half_angle}"
            )
        if self.max_speed <= 0:
            raise ValueError(f"max_speed must be positive, got {self.max_speed}")
        if len(self.world_bounds) != 4:
            raise ValueError("world_bounds must be (x_min, x_max, z_min, z_max)")
        x_min, x_max, z_min, z_max = self.world_bounds
        if x_min >= x_max or z_min >= z_max:
            raise ValueError(f"world_bounds min must be below max on each axis, got {self.world_bounds}")
        if not 0 <= self.max_lean <= 90:
            raise ValueError(f"max_lean must be in [0, 90], got {self.max_lean}")

    @classmethod
    def from_dict(cls, settings: dict, **overrides) -> "SimulationConfig":
        """
        Build from a ``config.boids.BOIDS``-style dict.

        Unknown keys (rendering settings) are ignored; ``overrides`` that are
        None are skipped so argparse defaults can be passed straight through.
        """
        known = {f.name for f in fields(cls)}
        aliases = {"count": "agent_count", "height": "boid_height"}
        values = {}
        for key, value in settings.items():
            if key == "field_of_view":
                values["field_of_view_half_angle"] = value / 2.0
                continue
            key = aliases.get(key, key)
            if key in known:
                values[key] = value
        if "world_bounds" in values:
            values["world_bounds"] = tuple(float(b) for b in values["world_bounds"])
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def with_overrides(self, **overrides) -> "SimulationConfig":
        return replace(self, **overrides)

    @property
    def cos_half_fov(self) -> float:
        return math.cos(math.radians(self.field_of_view_half_angle))

    @property
    def max_lean_radians(self) -> float:
        return math.radians(self.max_lean)
