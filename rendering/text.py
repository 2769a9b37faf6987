"""HUD text drawn with pygame fonts into the OpenGL framebuffer."""

import pygame
from OpenGL.GL import *


class TextRenderer:
    """Renders text overlays, caching the pixel data of recent lines."""

    def __init__(self, font_name: str = "monospace", font_size: int = 18,
                 color: tuple = (0.9, 0.9, 0.9), line_spacing: int = 25, cache_size: int = 64):
        pygame.font.init()
        self.font = pygame.font.SysFont(font_name, font_size)
        self.color = tuple(int(c * 255) for c in color)
        self.line_spacing = line_spacing
        self.cache_size = cache_size
        self._cache = {}

    def _rasterize(self, text: str) -> tuple:
        """Return (rgba_bytes, width, height) for ``text``."""
        cached = self._cache.get(text)
        if cached is not None:
            return cached

        surface = self.font.render(text, True, self.color)
        w, h = surface.get_size()
        entry = (pygame.image.tostring(surface, "RGBA", True), w, h)

        # Stats lines change every frame; drop everything once the cache fills
        if len(self._cache) >= self.cache_size:
            self._cache.clear()
        self._cache[text] = entry
        return entry

    def draw_text(self, text: str, x: int, y: int, screen_size: tuple):
        """
        Draw text at the given screen position.

        Args:
            text: The string to render
            x: X position from left edge
            y: Y position from top edge
            screen_size: (width, height) of the screen
        """
        data, w, h = self._rasterize(text)

        # Switch to orthographic projection for 2D rendering
        glMatrixMode(GL_PROJECTION)
        glPushMatrix()
        glLoadIdentity()
        glOrtho(0, screen_size[0], 0, screen_size[1], -1, 1)
        glMatrixMode(GL_MODELVIEW)
        glPushMatrix()
        glLoadIdentity()

        glDisable(GL_DEPTH_TEST)
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        glRasterPos2f(x, screen_size[1] - y - h)
        glDrawPixels(w, h, GL_RGBA, GL_UNSIGNED_BYTE, data)
        glDisable(GL_BLEND)
        glEnable(GL_DEPTH_TEST)

        glPopMatrix()
        glMatrixMode(GL_PROJECTION)
        glPopMatrix()
        glMatrixMode(GL_MODELVIEW)

    def draw_lines(self, lines, x: int, y: int, screen_size: tuple):
        """Draw ``lines`` top to bottom starting at (x, y)."""
        for i, line in enumerate(lines):
            self.draw_text(line, x, y + i * self.line_spacing, screen_size)
