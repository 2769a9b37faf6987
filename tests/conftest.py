"""Shared fixtures for the boids tests."""

from __future__ import annotations

import pytest

from boids import SimulationConfig


@pytest.fixture
def config() -> SimulationConfig:
    return SimulationConfig(agent_count=2, seed=1)


@pytest.fixture
def isolated_config(config: SimulationConfig) -> SimulationConfig:
    """Only the separation rule and the wall term contribute."""
    return config.with_overrides(cohesion_weight=0.0, alignment_weight=0.0)
