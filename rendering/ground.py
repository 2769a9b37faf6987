"""Ground plane and world-bounds outline."""

from OpenGL.GL import *
from config import boids as config


class GroundPlane:
    """Draws the flat ground the boids move on and the wall rectangle above it."""
    
    def __init__(self, world_bounds: tuple):
        self.half_size = config.GROUND["size"] / 2.0
        self.color = config.GROUND["color"]
        self.bounds_color = config.GROUND["bounds_color"]
        self.world_bounds = world_bounds
        self.outline_height = config.BOIDS["height"]
    
    def draw(self):
        """Draw the ground quad and the world bounds as a line loop."""
        e = self.half_size
        
        glBegin(GL_QUADS)
        glColor3f(*self.color)
        glVertex3f(-e, 0.0, -e)
        glVertex3f(-e, 0.0, e)
        glVertex3f(e, 0.0, e)
        glVertex3f(e, 0.0, -e)
        glEnd()
        
        x_min, x_max, z_min, z_max = self.world_bounds
        y = self.outline_height
        
        glBegin(GL_LINE_LOOP)
        glColor3f(*self.bounds_color)
        glVertex3f(x_min, y, z_min)
        glVertex3f(x_max, y, z_min)
        glVertex3f(x_max, y, z_max)
        glVertex3f(x_min, y, z_max)
        glEnd()
