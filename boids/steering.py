"""Flocking rules - Numba JIT kernels over a full pairwise neighbor scan."""

import math
import numpy as np
from numba import njit, prange


@njit(cache=True)
def wall_avoidance(
    x: float, z: float,
    x_min: float, x_max: float, z_min: float, z_max: float,
    strength: float
):
    """Fixed-magnitude push back inside the world bounds, per axis."""
    wx = 0.0
    wz = 0.0
    if x < x_min:
        wx = strength
    elif x > x_max:
        wx = -strength
    if z < z_min:
        wz = strength
    elif z > z_max:
        wz = -strength
    return wx, wz


@njit(cache=True)
def clamp_speed(vx: float, vz: float, max_speed: float):
    """Rescale a velocity to max_speed if it is faster, keeping direction."""
    speed = math.sqrt(vx * vx + vz * vz)
    if speed > max_speed:
        return (vx / speed) * max_speed, (vz / speed) * max_speed
    return vx, vz


@njit(cache=True)
def steer_boid(
    i: int,
    positions: np.ndarray,
    velocities: np.ndarray,
    view_range: float,
    separation_distance: float,
    cos_half_fov: float,
    use_view_cone: bool,
    cohesion_weight: float,
    alignment_weight: float,
    wall_strength: float,
    x_min: float,
    x_max: float,
    z_min: float,
    z_max: float,
    max_speed: float,
    num_boids: int
):
    """
    New (x, z) velocity for boid ``i`` from the given snapshot.

    Returns the neighbor count as a third value.
    """
    view_sq = view_range * view_range
    separation_sq = separation_distance * separation_distance

    px = positions[i, 0]
    pz = positions[i, 2]
    vx = velocities[i, 0]
    vz = velocities[i, 1]

    # Forward direction for the view cone; a stationary boid sees all around
    speed = math.sqrt(vx * vx + vz * vz)
    has_forward = use_view_cone and speed > 0.0
    fx, fz = 0.0, 0.0
    if has_forward:
        fx = vx / speed
        fz = vz / speed

    coh_x, coh_z = 0.0, 0.0
    align_x, align_z = 0.0, 0.0
    sep_x, sep_z = 0.0, 0.0
    neighbor_count = 0

    for j in range(num_boids):
        if i == j:
            continue

        dx = positions[j, 0] - px
        dz = positions[j, 2] - pz
        # Coincident boids are indistinguishable from self
        if dx == 0.0 and dz == 0.0:
            continue

        dist_sq = dx * dx + dz * dz
        if dist_sq > view_sq:
            continue

        if has_forward:
            cos_angle = (fx * dx + fz * dz) / math.sqrt(dist_sq)
            if cos_angle < cos_half_fov:
                continue

        coh_x += positions[j, 0]
        coh_z += positions[j, 2]
        align_x += velocities[j, 0]
        align_z += velocities[j, 1]
        neighbor_count += 1

        if dist_sq <= separation_sq:
            sep_x -= dx
            sep_z -= dz

    ax, az = wall_avoidance(px, pz, x_min, x_max, z_min, z_max, wall_strength)

    if neighbor_count > 0:
        ax += (coh_x / neighbor_count - px) * cohesion_weight
        az += (coh_z / neighbor_count - pz) * cohesion_weight

        ax += sep_x
        az += sep_z

        ax += (align_x / neighbor_count) * alignment_weight
        az += (align_z / neighbor_count) * alignment_weight

    new_vx, new_vz = clamp_speed(vx + ax, vz + az, max_speed)
    return new_vx, new_vz, neighbor_count


@njit(parallel=True, cache=True)
def compute_steering(
    positions: np.ndarray,
    velocities: np.ndarray,
    new_velocities: np.ndarray,
    neighbor_counts: np.ndarray,
    view_range: float,
    separation_distance: float,
    cos_half_fov: float,
    use_view_cone: bool,
    cohesion_weight: float,
    alignment_weight: float,
    wall_strength: float,
    x_min: float,
    x_max: float,
    z_min: float,
    z_max: float,
    max_speed: float,
    num_boids: int
):
    """
    Steer every boid. Reads only ``positions``/``velocities`` and writes only
    ``new_velocities``/``neighbor_counts``, so the result does not depend on
    iteration order.
    """
    for i in prange(num_boids):
        vx, vz, count = steer_boid(
            i, positions, velocities,
            view_range, separation_distance, cos_half_fov, use_view_cone,
            cohesion_weight, alignment_weight, wall_strength,
            x_min, x_max, z_min, z_max,
            max_speed, num_boids
        )
        new_velocities[i, 0] = vx
        new_velocities[i, 1] = vz
        neighbor_counts[i] = count
