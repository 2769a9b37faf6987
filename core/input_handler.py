"""Input handling for keyboard and window events."""

import pygame
from pygame.locals import *


class InputHandler:
    """Translates pygame events into application actions."""

    KEY_ACTIONS = {
        K_SPACE: "pause",
        K_r: "reset",
        K_h: "help",
        K_f: "flocking",
    }

    def handle_event(self, event: pygame.event.Event):
        """
        Handle a single pygame event.
        Returns "quit", an action name from KEY_ACTIONS, or None.
        """
        if event.type == QUIT:
            return "quit"
        if event.type == KEYDOWN:
            if event.key == K_ESCAPE:
                return "quit"
            return self.KEY_ACTIONS.get(event.key)
        return None
