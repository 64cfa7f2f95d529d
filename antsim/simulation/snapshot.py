"""Snapshot — immutable per-tick view of simulation state for consumers."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True, slots=True)
class AntState:
    """Kinematic state of one ant at the end of a tick."""

    x: float
    y: float
    vx: float
    vy: float
    food_carried: float
    energy: float


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Everything a renderer needs after a tick.

    The pheromone arrays are copies marked read-only, so neither the
    consumer nor later ticks can change them.

    Attributes:
        tick: Number of ticks completed when the snapshot was taken.
        ants: One AntState per ant, in spawn order.
        path: Path pheromone concentrations, shape ``(height, width)``.
        food: Food pheromone concentrations, shape ``(height, width)``.
    """

    tick: int
    ants: tuple[AntState, ...]
    path: NDArray[np.float64]
    food: NDArray[np.float64]

    @property
    def population(self) -> int:
        """Number of ants in the snapshot."""
        return len(self.ants)
