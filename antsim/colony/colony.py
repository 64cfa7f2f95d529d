"""Colony — the nest and the ant population spawned from it.

The population only grows: ants are appended at the nest and are never
removed during a run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from antsim.colony.ant import Ant

if TYPE_CHECKING:
    from antsim.geometry.vector import Vector
    from antsim.simulation.config import SimulationConfig

logger = logging.getLogger(__name__)


@dataclass
class Colony:
    """A nest location and its ants.

    Attributes:
        nest: Spawn point for new ants.
        config: Simulation parameters handed to each spawned ant.
        ants: Ant population in spawn order.
    """

    nest: Vector
    config: SimulationConfig = field(repr=False)
    ants: list[Ant] = field(default_factory=list)

    def spawn_ant(self) -> Ant:
        """Create a new resting ant at the nest.

        Returns:
            The newly created Ant (also appended to ``self.ants``).
        """
        ant = Ant.at_nest(self.nest, self.config)
        self.ants.append(ant)
        return ant

    def spawn_ants(self, count: int) -> list[Ant]:
        """Spawn ``count`` ants at the nest.

        Args:
            count: Number of ants to add.

        Returns:
            The new ants, in spawn order.

        Raises:
            ValueError: If ``count`` is negative.
        """
        if count < 0:
            msg = f"cannot spawn a negative number of ants ({count})"
            raise ValueError(msg)
        spawned = [self.spawn_ant() for _ in range(count)]
        logger.info(
            "Spawned %d ants at nest (%.1f, %.1f); population %d",
            count,
            self.nest.x,
            self.nest.y,
            len(self.ants),
        )
        return spawned
