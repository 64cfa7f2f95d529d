"""Simulation — the main tick loop.

Owns all simulation state and advances it in a fixed order:

1. Decay the pheromone field (every cell, once).
2. Update every ant (jitter velocity, deposit, move, clamp to borders).

Decay must finish before any ant deposits so that marks laid during a
tick are seen at full strength by consumers of that tick.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np
from numpy.random import Generator

from antsim.colony.colony import Colony
from antsim.geometry.vector import Vector
from antsim.pheromones.fields import PheromoneField, PheromoneType
from antsim.simulation.config import SimulationConfig
from antsim.simulation.snapshot import AntState, Snapshot

if TYPE_CHECKING:
    from antsim.colony.ant import Ant

logger = logging.getLogger(__name__)


@dataclass
class Simulation:
    """Drives the simulation forward tick by tick.

    Attributes:
        config: Simulation configuration.
        pheromone_field: Path and food pheromone grids.
        colony: Nest location and ant population.
        rng: Master seeded random generator.
        ticks: Number of ticks completed.
    """

    config: SimulationConfig
    pheromone_field: PheromoneField = field(init=False)
    colony: Colony = field(init=False)
    rng: Generator = field(init=False, repr=False)
    ticks: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        """Build the pheromone field, nest, and RNG from config."""
        self.rng = np.random.default_rng(self.config.seed)
        self.pheromone_field = PheromoneField(
            width=self.config.width,
            height=self.config.height,
            dissipation_rate=self.config.pheromone_dissipation_rate,
            zero_cutoff=self.config.pheromone_zero_cutoff,
        )
        nest = Vector(
            float(self.config.width // 2),
            float(self.config.height // 2),
        )
        self.colony = Colony(nest=nest, config=self.config)

    @property
    def nest(self) -> Vector:
        """Spawn point for new ants."""
        return self.colony.nest

    @property
    def ants(self) -> list[Ant]:
        """The live ant population, in spawn order."""
        return self.colony.ants

    def add_agents(self, count: int) -> None:
        """Add ``count`` resting ants at the nest.

        Args:
            count: Number of ants to add.
        """
        self.colony.spawn_ants(count)

    def tick(self) -> None:
        """Advance the simulation by one tick."""
        self.pheromone_field.decay()
        for ant in self.colony.ants:
            ant.update(self.pheromone_field, self.rng)
        self.ticks += 1
        logger.debug("Tick %d complete (%d ants)", self.ticks, len(self.ants))

    def run(self, ticks: int) -> None:
        """Run the simulation for a fixed number of ticks.

        Args:
            ticks: Number of ticks to advance.
        """
        for _ in range(ticks):
            self.tick()
        logger.debug(
            "Ran %d ticks (total %d); %d deposits dropped off-grid so far",
            ticks,
            self.ticks,
            self.pheromone_field.dropped_deposits,
        )

    def snapshot(self) -> Snapshot:
        """Capture an immutable copy of the current state."""
        path = self.pheromone_field.get_layer(PheromoneType.PATH).copy()
        food = self.pheromone_field.get_layer(PheromoneType.FOOD).copy()
        path.flags.writeable = False
        food.flags.writeable = False
        ants = tuple(
            AntState(
                x=ant.position.x,
                y=ant.position.y,
                vx=ant.velocity.x,
                vy=ant.velocity.y,
                food_carried=ant.food_carried,
                energy=ant.energy,
            )
            for ant in self.colony.ants
        )
        return Snapshot(tick=self.ticks, ants=ants, path=path, food=food)
