"""Ant -- a single agent with a stochastic velocity walk.

Each tick an ant runs a fixed four-step pipeline:

1. **choose_direction**: jitter the velocity by a small uniform draw per
   component and clamp each component to ``±max_velocity``.  Velocity
   performs a bounded random walk rather than being redrawn.
2. **leave_pheromone**: saturate FOOD pheromone when carrying food,
   PATH otherwise, at the current (pre-move) position.
3. **move**: translate position by velocity.
4. **handle_borders**: clamp position to ``[0, width] x [0, height]``
   and zero the velocity component of any axis that hit a wall.

The order matters: an ant about to leave the grid still marks the cell
it is leaving.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from antsim.geometry.vector import Vector
from antsim.pheromones.fields import PheromoneType

if TYPE_CHECKING:
    from numpy.random import Generator

    from antsim.pheromones.fields import PheromoneField
    from antsim.simulation.config import SimulationConfig


def clamp_component(value: float, limit: float) -> float:
    """Clamp ``value`` to ``[-limit, limit]``."""
    if value > limit:
        return limit
    if value < -limit:
        return -limit
    return value


def clamp_to_bounds(value: float, low: float, high: float) -> tuple[float, bool]:
    """Clamp ``value`` to ``[low, high]``.

    Returns:
        The clamped value and whether clamping was needed.
    """
    if value > high:
        return high, True
    if value < low:
        return low, True
    return value, False


@dataclass
class Ant:
    """A single ant agent.

    Attributes:
        position: Continuous world position.
        velocity: Displacement applied per tick.
        config: Simulation parameters (jitter, speed limit, grid size).
        food_carried: Amount of food currently carried.  Nothing in the
            engine picks food up, so this stays 0 unless set externally.
        energy: Vitality in ``[0, 1]``.
    """

    position: Vector
    config: SimulationConfig = field(repr=False)
    velocity: Vector = field(default_factory=lambda: Vector(0.0, 0.0))
    food_carried: float = 0.0
    energy: float = 1.0

    @classmethod
    def at_nest(cls, nest: Vector, config: SimulationConfig) -> Ant:
        """Create a resting ant at the nest.

        The position is copied so ants never share the nest vector.
        """
        return cls(position=nest.copy(), config=config)

    @property
    def pheromone_type(self) -> PheromoneType:
        """Which pheromone this ant currently lays."""
        return PheromoneType.FOOD if self.food_carried > 0 else PheromoneType.PATH

    def update(self, pheromones: PheromoneField, rng: Generator) -> None:
        """Perform one tick of movement and marking.

        Args:
            pheromones: Shared pheromone field to deposit into.
            rng: Seeded random generator.
        """
        self.choose_direction(rng)
        self.leave_pheromone(pheromones)
        self.move()
        self.handle_borders()

    def choose_direction(self, rng: Generator) -> None:
        """Add uniform jitter to the velocity and clamp each component."""
        diff = self.config.random_dir
        rand_x = float(rng.random()) * diff - 0.5 * diff
        rand_y = float(rng.random()) * diff - 0.5 * diff
        self.velocity.translate(rand_x, rand_y)

        limit = self.config.max_velocity
        self.velocity.x = clamp_component(self.velocity.x, limit)
        self.velocity.y = clamp_component(self.velocity.y, limit)

    def leave_pheromone(self, pheromones: PheromoneField) -> None:
        """Mark the cell under the ant's current position."""
        pheromones.deposit(self.position, self.pheromone_type)

    def move(self) -> None:
        """Advance position by one tick of velocity."""
        self.position.translate(self.velocity.x, self.velocity.y)

    def handle_borders(self) -> None:
        """Stop at the grid edges.

        Each axis is handled independently: an ant outside
        ``[0, dimension]`` is placed on the boundary and loses its
        velocity along that axis only.
        """
        self.position.x, hit_x = clamp_to_bounds(
            self.position.x,
            0.0,
            float(self.config.width),
        )
        if hit_x:
            self.velocity.x = 0.0

        self.position.y, hit_y = clamp_to_bounds(
            self.position.y,
            0.0,
            float(self.config.height),
        )
        if hit_y:
            self.velocity.y = 0.0
