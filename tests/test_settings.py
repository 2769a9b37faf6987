"""Tests for SimulationConfig construction and validation."""

from __future__ import annotations

import math

import pytest

from boids import SimulationConfig
from config import boids as config


def test_from_config_module() -> None:
    settings = SimulationConfig.from_dict(config.BOIDS)
    assert settings.agent_count == config.BOIDS["count"]
    assert settings.field_of_view_half_angle == config.BOIDS["field_of_view"] / 2
    assert settings.boid_height == config.BOIDS["height"]
    assert settings.world_bounds == tuple(config.BOIDS["world_bounds"])


def test_overrides_skip_none() -> None:
    settings = SimulationConfig.from_dict(config.BOIDS, agent_count=12, seed=None)
    assert settings.agent_count == 12
    assert settings.seed == config.BOIDS["seed"]


def test_cos_half_fov() -> None:
    settings = SimulationConfig(field_of_view_half_angle=60.0)
    assert settings.cos_half_fov == pytest.approx(0.5)
    assert settings.max_lean_radians == pytest.approx(math.pi / 4)


def test_config_is_frozen() -> None:
    settings = SimulationConfig()
    with pytest.raises(AttributeError):
        settings.max_speed = 10.0


@pytest.mark.parametrize(
    "overrides",
    [
        {"agent_count": 0},
        {"view_range": 0.0},
        {"separation_distance": 2.5},
        {"separation_distance": 3.0},
        {"max_speed": -1.0},
        {"world_bounds": (5.0, -5.0, -5.0, 5.0)},
        {"world_bounds": (-5.0, 5.0, 1.0, 1.0)},
        {"field_of_view_half_angle": 0.0},
        {"max_lean": 120.0},
    ],
)
def test_invalid_settings_rejected(overrides: dict) -> None:
    with pytest.raises(ValueError):
        SimulationConfig(**overrides)
