"""Rendering components for the boids simulation."""

from .flock_renderer import FlockRenderer
from .ground import GroundPlane
from .text import TextRenderer

__all__ = ["FlockRenderer", "GroundPlane", "TextRenderer"]
