"""Pygame 2D visualization for the ant simulation.

Draws a speckled green ground, the food (red) and path (blue) pheromone
overlays, and each ant as a short line along its heading.  The
simulation steps at a configurable tick rate while the display refreshes
at the Pygame frame rate.  The renderer only reads simulation state.

The original canvas viewer generated a per-cell speckled ground but then
filled the background with solid ``rgb(50, 200, 50)`` every frame, so the
speckle never showed.  This viewer draws the speckle.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, ClassVar

import numpy as np
import pygame

if TYPE_CHECKING:
    from numpy.random import Generator
    from numpy.typing import NDArray

    from antsim.simulation.engine import Simulation
    from antsim.simulation.snapshot import Snapshot

logger = logging.getLogger(__name__)

# Colour palette
_ANT_COLOUR = (20, 20, 20)
_FOOD_COLOUR = (255, 0, 0)
_PATH_COLOUR = (0, 0, 255)
_TEXT_COLOUR = (200, 200, 200)
_PANEL_BG = (25, 25, 25)


def ground_texture(
    width: int,
    height: int,
    rng: Generator,
) -> NDArray[np.uint8]:
    """Random green speckle, one RGB colour per cell.

    Args:
        width: Grid columns.
        height: Grid rows.
        rng: Random generator (kept separate from the simulation's).

    Returns:
        Array of shape ``(width, height, 3)``, the axis order
        ``pygame.surfarray`` expects.
    """
    red = rng.integers(0, 50, size=(width, height))
    green = rng.integers(200, 256, size=(width, height))
    blue = rng.integers(0, 50, size=(width, height))
    return np.stack([red, green, blue], axis=-1).astype(np.uint8)


def pheromone_alpha(layer: NDArray[np.float64], cutoff: float) -> NDArray[np.uint8]:
    """Per-cell alpha for a pheromone overlay.

    Cells at or below ``cutoff`` are fully transparent; the rest use
    ``min(1, value)`` as opacity.

    Returns:
        Array of shape ``(width, height)`` (transposed from the field's
        ``(height, width)``).
    """
    alpha = np.where(layer > cutoff, np.minimum(layer, 1.0), 0.0)
    return (alpha.T * 255).astype(np.uint8)


def ant_segment(
    x: float,
    y: float,
    vx: float,
    vy: float,
    body_length: float,
) -> tuple[float, float]:
    """End point of an ant's body line drawn from ``(x, y)`` along its velocity."""
    radians = math.atan2(vx, vy)
    return (
        x + body_length * math.sin(radians),
        y + body_length * math.cos(radians),
    )


class PygameRenderer:
    """Renders a Simulation into a Pygame window.

    Attributes:
        simulation: The simulation to visualise.
        cell_size: Pixel size of each grid cell.
        body_length: Length of an ant's body line, in cells.
        screen: The Pygame display surface.
    """

    # Speed presets: ticks per second
    _SPEED_STEPS: ClassVar[list[float]] = [
        1.0,
        5.0,
        10.0,
        30.0,
        60.0,
        120.0,
        300.0,
    ]

    def __init__(
        self,
        simulation: Simulation,
        cell_size: int = 1,
        ticks_per_second: float = 60.0,
        body_length: float = 5.0,
    ) -> None:
        """Initialise the renderer.

        Args:
            simulation: The simulation to render.
            cell_size: Pixel width/height per grid cell.
            ticks_per_second: Simulation ticks per real-time second.
            body_length: Ant body line length in cells.
        """
        self.simulation = simulation
        self.cell_size = cell_size
        self.body_length = body_length
        self.ticks_per_second = ticks_per_second
        self._speed_index = self._nearest_speed(ticks_per_second)
        self._tick_accumulator = 0.0

        config = simulation.config
        self._grid_w = config.width * cell_size
        self._grid_h = config.height * cell_size
        self._panel_width = 200

        pygame.init()
        self.screen = pygame.display.set_mode(
            (self._grid_w + self._panel_width, self._grid_h),
        )
        pygame.display.set_caption("antsim")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("monospace", 14)
        self.running = True
        self.paused = False

        # Ground is static, so build it once.
        texture = ground_texture(
            config.width,
            config.height,
            np.random.default_rng(config.seed + 1),
        )
        ground = pygame.surfarray.make_surface(texture)
        self._ground = pygame.transform.scale(ground, (self._grid_w, self._grid_h))

    def _nearest_speed(self, tps: float) -> int:
        """Return the index of the closest speed preset."""
        return min(
            range(len(self._SPEED_STEPS)),
            key=lambda i: abs(self._SPEED_STEPS[i] - tps),
        )

    def run(self, fps: int = 60) -> None:
        """Main loop: handle events, step sim, render.

        Args:
            fps: Target frames per second.
        """
        while self.running:
            self.frame(fps)

        logger.info(
            "Viewer closed at tick %d; %d deposits dropped off-grid",
            self.simulation.ticks,
            self.simulation.pheromone_field.dropped_deposits,
        )
        pygame.quit()

    def frame(self, fps: int = 60) -> None:
        """Handle input, advance any ticks that are due, and draw once.

        Args:
            fps: Target frames per second.
        """
        dt = self.clock.tick(fps) / 1000.0  # seconds elapsed
        self._handle_events()
        if not self.paused:
            self._tick_accumulator += self.ticks_per_second * dt
            steps = int(self._tick_accumulator)
            self._tick_accumulator -= steps
            for _ in range(steps):
                self.simulation.tick()
        self._draw(self.simulation.snapshot())

    def _handle_events(self) -> None:
        """Process Pygame input events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_SPACE:
                    self.paused = not self.paused
                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS):
                    self._speed_index = min(
                        len(self._SPEED_STEPS) - 1,
                        self._speed_index + 1,
                    )
                    self.ticks_per_second = self._SPEED_STEPS[self._speed_index]
                elif event.key == pygame.K_MINUS:
                    self._speed_index = max(0, self._speed_index - 1)
                    self.ticks_per_second = self._SPEED_STEPS[self._speed_index]

    def _draw(self, snapshot: Snapshot) -> None:
        """Render one frame."""
        self.screen.fill(_PANEL_BG)
        self.screen.blit(self._ground, (0, 0))
        cutoff = self.simulation.config.pheromone_zero_cutoff
        self._draw_overlay(snapshot.food, _FOOD_COLOUR, cutoff)
        self._draw_overlay(snapshot.path, _PATH_COLOUR, cutoff)
        self._draw_ants(snapshot)
        self._draw_info_panel(snapshot)
        pygame.display.flip()

    def _draw_overlay(
        self,
        layer: NDArray[np.float64],
        colour: tuple[int, int, int],
        cutoff: float,
    ) -> None:
        """Blend one pheromone layer over the ground."""
        alpha = pheromone_alpha(layer, cutoff)
        if not alpha.any():
            return
        width, height = alpha.shape
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        overlay.fill((*colour, 0))
        pygame.surfarray.pixels_alpha(overlay)[:] = alpha
        self.screen.blit(
            pygame.transform.scale(overlay, (self._grid_w, self._grid_h)),
            (0, 0),
        )

    def _draw_ants(self, snapshot: Snapshot) -> None:
        """Draw each ant as a dark line along its velocity."""
        cs = self.cell_size
        for ant in snapshot.ants:
            end_x, end_y = ant_segment(ant.x, ant.y, ant.vx, ant.vy, self.body_length)
            pygame.draw.line(
                self.screen,
                _ANT_COLOUR,
                (ant.x * cs, ant.y * cs),
                (end_x * cs, end_y * cs),
            )

    def _draw_info_panel(self, snapshot: Snapshot) -> None:
        """Draw a stats panel on the right side of the window."""
        panel_x = self._grid_w + 10
        y = 10

        lines = [
            f"Tick: {snapshot.tick}",
            f"Speed: {self.ticks_per_second:.1f} t/s",
            f"{'PAUSED' if self.paused else 'RUNNING'}",
            "",
            f"Ants: {snapshot.population}",
            f"Path cells: {int(np.count_nonzero(snapshot.path))}",
            f"Food cells: {int(np.count_nonzero(snapshot.food))}",
            "",
            "--- Controls ---",
            "SPACE: pause",
            "+/-: speed",
            "ESC: quit",
        ]

        for line in lines:
            surf = self.font.render(line, True, _TEXT_COLOUR)
            self.screen.blit(surf, (panel_x, y))
            y += 18
