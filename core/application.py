"""Main application class that ties everything together."""

import pygame
from pygame.locals import *
from OpenGL.GL import *
from OpenGL.GLU import *

from config import boids as config
from boids import Camera, FatalSimulationError, Simulation, SimulationConfig
from .input_handler import InputHandler
from rendering import FlockRenderer, GroundPlane, TextRenderer


class Application:
    """Main application managing the game loop and rendering."""

    def __init__(self, sim_config: SimulationConfig):
        pygame.init()
        pygame.display.set_mode(
            (config.WINDOW["width"], config.WINDOW["height"]),
            DOUBLEBUF | OPENGL
        )
        pygame.display.set_caption(config.WINDOW["title"])

        self.input_handler = InputHandler()

        # Rendering components
        self.ground = GroundPlane(sim_config.world_bounds)
        self.flock_renderer = FlockRenderer()
        self.text_renderer = TextRenderer(color=config.COLORS["text"])

        # Simulation
        print(f"[App] Spawning {sim_config.agent_count} boids...")
        aspect = config.WINDOW["width"] / config.WINDOW["height"]
        self.simulation = Simulation(
            sim_config,
            camera=Camera.from_config(config.CAMERA, aspect),
        )

        # State
        self.clock = pygame.time.Clock()
        self.running = True
        self.paused = False
        self.show_help = True
        self.fps = 0
        self.exit_code = 0

        self._setup_gl()
        print("[App] Ready!")

    def _setup_gl(self):
        """Initialize OpenGL settings."""
        glClearColor(*config.COLORS["background"])
        glEnable(GL_DEPTH_TEST)
        glDepthFunc(GL_LEQUAL)

        camera = self.simulation.camera
        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        gluPerspective(
            camera.fov,
            camera.aspect,
            config.CAMERA["near_clip"],
            config.CAMERA["far_clip"]
        )
        glMatrixMode(GL_MODELVIEW)

    def _handle_events(self):
        """Process all pending pygame events."""
        for event in pygame.event.get():
            action = self.input_handler.handle_event(event)
            if action == "quit":
                self.running = False
            elif action == "pause":
                self.paused = not self.paused
                print(f"[App] {'Paused' if self.paused else 'Running'}")
            elif action == "reset":
                print("[App] Resetting flock...")
                self.simulation.reset()
            elif action == "help":
                self.show_help = not self.show_help
            elif action == "flocking":
                self.simulation.perceive = not self.simulation.perceive
                print(f"[App] Flocking {'on' if self.simulation.perceive else 'off'}")

    def _update(self, dt: float):
        """Update simulation state."""
        # Cap dt to prevent physics explosion on lag
        dt = min(dt, 0.05)

        if self.paused:
            return

        try:
            self.simulation.step(dt)
        except FatalSimulationError as e:
            print(f"[Boids] Fatal: {e}")
            print(f"[Boids] Halted at tick {self.simulation.tick_count}")
            self.running = False
            self.exit_code = 1

    def _apply_camera(self):
        """Load the camera's look-at transform into the modelview matrix."""
        camera = self.simulation.camera
        glLoadIdentity()
        gluLookAt(
            camera.position[0], camera.position[1], camera.position[2],
            camera.target[0], camera.target[1], camera.target[2],
            0, 1, 0
        )

    def _render(self):
        """Render the scene."""
        glClear(GL_COLOR_BUFFER_BIT | GL_DEPTH_BUFFER_BIT)
        self._apply_camera()

        self.ground.draw()
        self.flock_renderer.draw(self.simulation.flock)

        # Draw HUD
        screen_size = (config.WINDOW["width"], config.WINDOW["height"])
        flock = self.simulation.flock
        camera = self.simulation.camera
        status = "PAUSED" if self.paused else "RUNNING"
        lines = [
            f"Boids: {len(flock)}  |  FPS: {self.fps:.0f}  |  {status}",
            f"Speed: {flock.mean_speed():.2f}  Radius: {camera.radius:.1f}  Distance: {camera.distance:.1f}",
        ]
        if self.show_help:
            lines.append("SPACE: Pause | R: Reset | F: Toggle flocking | H: Toggle help | ESC: Quit")
        self.text_renderer.draw_lines(lines, 10, 10, screen_size)

        pygame.display.flip()

    def run(self) -> int:
        """Main application loop. Returns the process exit code."""
        print("[App] Starting main loop...")

        while self.running:
            dt = self.clock.tick() / 1000.0  # Uncapped FPS
            self.fps = self.clock.get_fps()

            self._handle_events()
            self._update(dt)
            if self.running:
                self._render()

        pygame.quit()
        print("[App] Shutdown complete")
        return self.exit_code
