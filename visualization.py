# visualization.py
"""
Renders both demos with Pygame and feeds mouse input back into them.
"""
import logging
import pygame
from constants import (
    FULLSCREEN, WINDOW_WIDTH, WINDOW_HEIGHT, FPS, BACKGROUND_COLOR, LINE_COLOR,
    ARENA_COLOR, CELL_ALIVE_COLOR, CELL_DEAD_COLOR
)
from typing import Dict, Any, Optional

from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from simulation import CarromSimulation
    from life import LifeSimulation


# --- Data Contracts ---
#
# class Visualizer:
#   - __init__(self, params: Optional[dict] = None, caption: str = ...):
#     - Inputs:
#       - params: The "visualization" section of config.json
#         ("fullscreen", "window_width", "window_height", "fps").
#     - Side Effects: Initializes Pygame and creates a display surface.
#       self.width / self.height hold the canvas size the simulations use.
#
#   - draw(self, simulation) -> bool:
#     - Outputs:
#       - bool: False if the user has quit, True otherwise.
#     - Side Effects: Dispatches pending mouse events to the simulation,
#       renders it, and flips the display.

class Visualizer:
    """
    Owns the Pygame window and the event pump shared by both demos.
    """
    caption = "Sandbox"

    def __init__(self, params: Optional[Dict[str, Any]] = None):
        """
        Initializes Pygame and the display window.
        """
        params = params or {}
        pygame.init()

        if params.get('fullscreen', FULLSCREEN):
            display_info = pygame.display.Info()
            width, height = display_info.current_w, display_info.current_h
            self.screen = pygame.display.set_mode((width, height), pygame.FULLSCREEN)
        else:
            width = params.get('window_width', WINDOW_WIDTH)
            height = params.get('window_height', WINDOW_HEIGHT)
            self.screen = pygame.display.set_mode((width, height))

        self.width = width
        self.height = height
        self.fps = params.get('fps', FPS)

        pygame.display.set_caption(self.caption)
        self.clock = pygame.time.Clock()

        logging.info(f"{type(self).__name__} initialized with Pygame display ({width}x{height}).")

    def handle_events(self, simulation) -> bool:
        """
        Routes pending events to the simulation.

        Returns:
            bool: False if the user asked to quit.
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                logging.info("Quit event received. Shutting down visualizer.")
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                logging.info("ESC key pressed. Shutting down visualizer.")
                return False
            self.handle_event(event, simulation)
        return True

    def handle_event(self, event: pygame.event.Event, simulation) -> None:
        raise NotImplementedError

    def now(self) -> int:
        """Milliseconds since Pygame was initialized."""
        return pygame.time.get_ticks()

    def close(self):
        """Shuts down Pygame."""
        pygame.quit()


class CarromVisualizer(Visualizer):
    """
    Draws the bodies, the arena outline and the aiming line of a drag.
    """
    caption = "Carrom"

    def handle_event(self, event: pygame.event.Event, simulation: "CarromSimulation") -> None:
        if event.type == pygame.MOUSEMOTION:
            simulation.pointer_move(*event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            simulation.pointer_down(*event.pos)
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            simulation.pointer_up(*event.pos)

    def draw(self, simulation: "CarromSimulation") -> bool:
        """
        Draws all bodies and handles events.

        Returns:
            bool: False if the simulation should exit, True otherwise.
        """
        if not self.handle_events(simulation):
            return False

        self.screen.fill(BACKGROUND_COLOR)

        for body in simulation.bodies:
            pygame.draw.circle(
                self.screen,
                body.color,
                (int(body.position[0]), int(body.position[1])),
                int(body.radius)
            )

        for origin, pointer in simulation.trajectories():
            pygame.draw.line(self.screen, LINE_COLOR, origin.tolist(), pointer.tolist())

        arena = simulation.arena
        pygame.draw.circle(self.screen, ARENA_COLOR, (int(arena.x), int(arena.y)), int(arena.radius), 1)

        pygame.display.flip()
        self.clock.tick(self.fps)
        return True


class LifeVisualizer(Visualizer):
    """
    Draws the Game of Life grid and paints cells under the mouse.
    """
    caption = "Game of Life"

    def handle_event(self, event: pygame.event.Event, simulation: "LifeSimulation") -> None:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            simulation.pointer_down(*event.pos)
        elif event.type == pygame.MOUSEMOTION:
            simulation.pointer_move(*event.pos)
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            simulation.pointer_up()
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_c:
            simulation.clear()

    def draw(self, simulation: "LifeSimulation") -> bool:
        """
        Draws every cell and handles events.

        Returns:
            bool: False if the simulation should exit, True otherwise.
        """
        if not self.handle_events(simulation):
            return False

        self.screen.fill(BACKGROUND_COLOR)
        size = simulation.resolution
        grid = simulation.grid
        for col in range(simulation.cols):
            for row in range(simulation.rows):
                rect = pygame.Rect(col * size, row * size, size, size)
                alive = grid[col, row] == 1
                fill = CELL_ALIVE_COLOR if alive else CELL_DEAD_COLOR
                stroke = CELL_DEAD_COLOR if alive else CELL_ALIVE_COLOR
                pygame.draw.rect(self.screen, fill, rect)
                pygame.draw.rect(self.screen, stroke, rect, 1)

        pygame.display.flip()
        self.clock.tick(self.fps)
        return True
