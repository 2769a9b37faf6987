"""Auto-framing camera that keeps the whole flock in view."""

import math
import numpy as np
from typing import Tuple

from .errors import DegenerateCameraError


def bounding_sphere(positions: np.ndarray) -> Tuple[np.ndarray, float]:
    """
    Sphere around the midpoint of the axis-aligned bounding box, reaching
    the farthest point. Conservative, not the minimal enclosing sphere.
    """
    center = (positions.min(axis=0) + positions.max(axis=0)) * 0.5
    offsets = positions - center
    dist_sq = np.einsum("ij,ij->i", offsets, offsets)
    return center, float(math.sqrt(dist_sq.max()))


def limiting_fov(fov_v: float, aspect: float) -> float:
    """Smaller of the vertical and horizontal field of view, in radians."""
    fov_h = 2.0 * math.atan(math.tan(fov_v / 2.0) * aspect)
    return min(fov_v, fov_h)


def framing_distance(radius: float, fov_v: float, aspect: float) -> float:
    """Distance at which a sphere of ``radius`` fits the view; NaN or inf when degenerate."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(radius) / np.sin(np.float64(limiting_fov(fov_v, aspect)) / 2.0))


class Camera:
    """Perspective camera that reframes itself around a set of points."""

    def __init__(
        self,
        fov: float = 45.0,
        aspect: float = 16 / 9,
        position=(0.0, 10.0, 10.0),
        target=(0.0, 0.0, 0.0),
        view_direction=(0.0, 1.0, 1.0),
    ):
        self.fov = fov                      # Vertical, degrees
        self.aspect = aspect
        self.position = np.array(position, dtype=np.float64)
        self.target = np.array(target, dtype=np.float64)
        direction = np.array(view_direction, dtype=np.float64)
        self.view_direction = direction / np.linalg.norm(direction)
        self.distance = float(np.linalg.norm(self.position - self.target))
        self.radius = 0.0

    @classmethod
    def from_config(cls, camera: dict, aspect: float) -> "Camera":
        return cls(
            fov=camera["fov"],
            aspect=aspect,
            position=camera["initial_position"],
            target=camera["initial_target"],
            view_direction=camera["view_direction"],
        )

    def frame(self, positions: np.ndarray):
        """Move the camera so every point in ``positions`` fits the frustum."""
        if len(positions) == 0:
            return

        center, radius = bounding_sphere(positions)
        fov_v = math.radians(self.fov)
        distance = framing_distance(radius, fov_v, self.aspect)
        if not math.isfinite(distance):
            raise DegenerateCameraError(distance, radius, limiting_fov(fov_v, self.aspect))

        self.radius = radius
        self.distance = distance
        self.target = center
        self.position = center + self.view_direction * distance

    def get_camera_axes(self) -> tuple:
        """
        Get the camera's local coordinate axes (forward, right, up).
        Forward points from camera toward target.
        """
        forward = self.target - self.position
        length = np.linalg.norm(forward)
        if length < 1e-9:
            forward = -self.view_direction
        else:
            forward = forward / length

        world_up = np.array([0.0, 1.0, 0.0])

        right = np.cross(forward, world_up)
        right_len = np.linalg.norm(right)
        if right_len < 0.001:
            right = np.array([1.0, 0.0, 0.0])
        else:
            right = right / right_len

        up = np.cross(right, forward)
        up = up / np.linalg.norm(up)

        return forward, right, up
