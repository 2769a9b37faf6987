"""Flock rendering - oriented boxes built by a Numba kernel and drawn from VBOs."""

import numpy as np
from numba import njit, prange
from OpenGL.GL import *
from OpenGL.arrays import vbo

from config import boids as config


# Unit cube corners and the 6 faces (4 corners each, counter-clockwise)
CUBE_CORNERS = np.array([
    [-1.0, -1.0, -1.0], [1.0, -1.0, -1.0], [1.0, 1.0, -1.0], [-1.0, 1.0, -1.0],
    [-1.0, -1.0, 1.0], [1.0, -1.0, 1.0], [1.0, 1.0, 1.0], [-1.0, 1.0, 1.0],
], dtype=np.float64)

CUBE_FACES = np.array([
    [4, 5, 6, 7],   # +Z (back)
    [1, 0, 3, 2],   # -Z (front)
    [5, 1, 2, 6],   # +X
    [0, 4, 7, 3],   # -X
    [3, 7, 6, 2],   # +Y
    [0, 1, 5, 4],   # -Y
], dtype=np.int32)

# Per-face brightness so the boxes read as solids without lighting
FACE_SHADES = np.array([0.75, 1.0, 0.85, 0.65, 1.0, 0.45], dtype=np.float64)


@njit(parallel=True, fastmath=True, cache=True)
def build_box_vertices(
    positions: np.ndarray,
    orientations: np.ndarray,
    half_extents: np.ndarray,
    corners: np.ndarray,
    faces: np.ndarray,
    shades: np.ndarray,
    base_color: np.ndarray,
    vertices: np.ndarray,
    vert_colors: np.ndarray,
    num_boids: int
):
    """Numba JIT-compiled vertex building: 24 quad vertices per boid."""
    for i in prange(num_boids):
        px, py, pz = positions[i, 0], positions[i, 1], positions[i, 2]
        base = i * 24

        for f in range(6):
            shade = shades[f]
            for k in range(4):
                c = faces[f, k]
                lx = corners[c, 0] * half_extents[0]
                ly = corners[c, 1] * half_extents[1]
                lz = corners[c, 2] * half_extents[2]

                v = base + f * 4 + k
                vertices[v, 0] = px + orientations[i, 0, 0] * lx + orientations[i, 0, 1] * ly + orientations[i, 0, 2] * lz
                vertices[v, 1] = py + orientations[i, 1, 0] * lx + orientations[i, 1, 1] * ly + orientations[i, 1, 2] * lz
                vertices[v, 2] = pz + orientations[i, 2, 0] * lx + orientations[i, 2, 1] * ly + orientations[i, 2, 2] * lz

                vert_colors[v, 0] = base_color[0] * shade
                vert_colors[v, 1] = base_color[1] * shade
                vert_colors[v, 2] = base_color[2] * shade


class FlockRenderer:
    """
    Draws every boid as a box scaled by ``config.BOIDS["size"]``, oriented by
    its rotation matrix (forward along local -Z).
    """

    def __init__(self):
        self.half_extents = np.array(config.BOIDS["size"], dtype=np.float64) * 0.5
        self.base_color = np.array(config.BOIDS["color"], dtype=np.float64)
        self.verts_per_boid = 24
        self._capacity = 0
        self._vertices = np.zeros((0, 3), dtype=np.float32)
        self._vert_colors = np.zeros((0, 3), dtype=np.float32)

        # VBOs for GPU-side storage
        self._vbo_vertices = None
        self._vbo_colors = None
        self._vbos_initialized = False

    def _ensure_capacity(self, num_boids: int):
        if num_boids == self._capacity:
            return
        self._capacity = num_boids
        self._vertices = np.zeros((num_boids * self.verts_per_boid, 3), dtype=np.float32)
        self._vert_colors = np.zeros((num_boids * self.verts_per_boid, 3), dtype=np.float32)
        self._vbos_initialized = False

    def _init_vbos(self):
        """Initialize VBOs for fast GPU rendering."""
        try:
            self._vbo_vertices = vbo.VBO(self._vertices, usage=GL_DYNAMIC_DRAW)
            self._vbo_colors = vbo.VBO(self._vert_colors, usage=GL_DYNAMIC_DRAW)
            self._vbos_initialized = True
        except Exception as e:
            print(f"[Render] VBOs unavailable, using client arrays: {e}")
            self._vbo_vertices = None
            self._vbo_colors = None
            self._vbos_initialized = False

    def draw(self, flock):
        """Render all boids of ``flock``."""
        num_boids = len(flock)
        if num_boids == 0:
            return

        self._ensure_capacity(num_boids)
        if not self._vbos_initialized:
            self._init_vbos()

        build_box_vertices(
            flock.positions,
            flock.orientations,
            self.half_extents,
            CUBE_CORNERS,
            CUBE_FACES,
            FACE_SHADES,
            self.base_color,
            self._vertices,
            self._vert_colors,
            num_boids
        )
        total_verts = num_boids * self.verts_per_boid

        if self._vbos_initialized and self._vbo_vertices is not None:
            self._vbo_vertices.set_array(self._vertices)
            self._vbo_colors.set_array(self._vert_colors)

            self._vbo_vertices.bind()
            glEnableClientState(GL_VERTEX_ARRAY)
            glVertexPointer(3, GL_FLOAT, 0, None)

            self._vbo_colors.bind()
            glEnableClientState(GL_COLOR_ARRAY)
            glColorPointer(3, GL_FLOAT, 0, None)

            glDrawArrays(GL_QUADS, 0, total_verts)

            self._vbo_vertices.unbind()
            self._vbo_colors.unbind()
            glDisableClientState(GL_VERTEX_ARRAY)
            glDisableClientState(GL_COLOR_ARRAY)
        else:
            glEnableClientState(GL_VERTEX_ARRAY)
            glEnableClientState(GL_COLOR_ARRAY)

            glVertexPointer(3, GL_FLOAT, 0, self._vertices)
            glColorPointer(3, GL_FLOAT, 0, self._vert_colors)
            glDrawArrays(GL_QUADS, 0, total_verts)

            glDisableClientState(GL_VERTEX_ARRAY)
            glDisableClientState(GL_COLOR_ARRAY)
