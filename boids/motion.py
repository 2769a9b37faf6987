"""Velocity integration, facing, and banking."""

import math
import numpy as np
from numba import njit, prange

from .errors import NumericCorruptionError


@njit(cache=True)
def lean_angle(acceleration: float, lean_gain: float, max_lean: float) -> float:
    """Bank angle (radians) for an acceleration magnitude, clamped to +-max_lean."""
    return -min(max(acceleration * lean_gain, -max_lean), max_lean)


@njit(cache=True)
def set_facing(orientations: np.ndarray, i: int, dx: float, dz: float):
    """Yaw rotation taking local forward (-Z) onto the unit direction (dx, 0, dz)."""
    s = -dx
    c = -dz
    orientations[i, 0, 0] = c
    orientations[i, 0, 1] = 0.0
    orientations[i, 0, 2] = s
    orientations[i, 1, 0] = 0.0
    orientations[i, 1, 1] = 1.0
    orientations[i, 1, 2] = 0.0
    orientations[i, 2, 0] = -s
    orientations[i, 2, 1] = 0.0
    orientations[i, 2, 2] = c


@njit(cache=True)
def apply_bank(orientations: np.ndarray, i: int, kx: float, kz: float, angle: float):
    """Pre-multiply orientation ``i`` by a rotation about the horizontal unit axis (kx, 0, kz)."""
    s = math.sin(angle)
    t = 1.0 - math.cos(angle)

    # Rodrigues: R = I + sin(a) K + (1 - cos(a)) K^2, with ky = 0
    r00 = 1.0 - t * kz * kz
    r01 = -s * kz
    r02 = t * kx * kz
    r10 = s * kz
    r11 = 1.0 - t * (kx * kx + kz * kz)
    r12 = -s * kx
    r20 = t * kx * kz
    r21 = s * kx
    r22 = 1.0 - t * kx * kx

    for col in range(3):
        m0 = orientations[i, 0, col]
        m1 = orientations[i, 1, col]
        m2 = orientations[i, 2, col]
        orientations[i, 0, col] = r00 * m0 + r01 * m1 + r02 * m2
        orientations[i, 1, col] = r10 * m0 + r11 * m1 + r12 * m2
        orientations[i, 2, col] = r20 * m0 + r21 * m1 + r22 * m2


@njit(parallel=True, cache=True)
def integrate_boids(
    positions: np.ndarray,
    velocities: np.ndarray,
    previous_velocities: np.ndarray,
    orientations: np.ndarray,
    dt: float,
    lean_gain: float,
    max_lean: float,
    lean_epsilon: float,
    num_boids: int
):
    """Move, face, and bank every boid, then remember this tick's velocity."""
    for i in prange(num_boids):
        vx = velocities[i, 0]
        vz = velocities[i, 1]

        dx = vx * dt
        dz = vz * dt
        positions[i, 0] += dx
        positions[i, 2] += dz

        length = math.sqrt(dx * dx + dz * dz)
        if length > 0.0:
            set_facing(orientations, i, dx / length, dz / length)

        acc_x = (vx - previous_velocities[i, 0]) * dt
        acc_z = (vz - previous_velocities[i, 1]) * dt
        acc = math.sqrt(acc_x * acc_x + acc_z * acc_z)
        if acc > lean_epsilon:
            # normalize(acc) x up = (-az, 0, ax)
            kx = -acc_z / acc
            kz = acc_x / acc
            apply_bank(orientations, i, kx, kz, lean_angle(acc, lean_gain, max_lean))

        previous_velocities[i, 0] = vx
        previous_velocities[i, 1] = vz


def check_velocities(velocities: np.ndarray):
    """Raise NumericCorruptionError for the first boid with a NaN velocity."""
    bad = np.flatnonzero(np.isnan(velocities).any(axis=1))
    if bad.size:
        index = int(bad[0])
        raise NumericCorruptionError(index, velocities[index])
