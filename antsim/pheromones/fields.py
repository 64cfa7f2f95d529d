"""PheromoneField — two-layer pheromone grid.

Path and food pheromone are stored as separate NumPy 2D arrays indexed
``[y, x]``.  The field provides deposit/read operations and delegates
the per-tick decay to ``decay.py``.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from antsim.pheromones.decay import update_field

if TYPE_CHECKING:
    from antsim.geometry.vector import Vector

logger = logging.getLogger(__name__)

DEPOSIT_LEVEL = 1.0


class PheromoneType(Enum):
    """Distinct pheromone channels, each with its own layer."""

    PATH = auto()
    FOOD = auto()


@dataclass(frozen=True)
class PheromoneCell:
    """Read-only view of one grid location's concentrations.

    Attributes:
        path: Path pheromone concentration.
        food: Food pheromone concentration.
    """

    path: float
    food: float


def drop_if_out_of_range(
    position: Vector,
    width: int,
    height: int,
) -> tuple[int, int] | None:
    """Map a continuous position to cell indices, or None if off-grid.

    Coordinates are floored, so ``(2.9, 0.1)`` lands in cell ``(2, 0)``
    and ``(-0.1, 0.0)`` is outside.

    Args:
        position: Continuous world position.
        width: Grid columns.
        height: Grid rows.

    Returns:
        ``(x, y)`` cell indices, or None when the cell does not exist.
    """
    x = math.floor(position.x)
    y = math.floor(position.y)
    if x < 0 or x >= width or y < 0 or y >= height:
        return None
    return x, y


@dataclass
class PheromoneField:
    """Both pheromone layers for a world.

    Attributes:
        width: Grid columns.
        height: Grid rows.
        dissipation_rate: Multiplicative decay factor applied each tick.
        zero_cutoff: Values below this snap to 0 after decay.
        layers: Mapping from PheromoneType to its concentration array.
        dropped_deposits: Number of deposits that fell outside the grid.
    """

    width: int
    height: int
    dissipation_rate: float = 0.99
    zero_cutoff: float = 0.01
    layers: dict[PheromoneType, NDArray[np.float64]] = field(
        init=False,
        repr=False,
    )
    dropped_deposits: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        """Create one zeroed layer per pheromone type."""
        self.layers = {
            ptype: np.zeros((self.height, self.width), dtype=np.float64)
            for ptype in PheromoneType
        }

    def deposit(self, position: Vector, ptype: PheromoneType) -> None:
        """Saturate one pheromone type at the cell under ``position``.

        The concentration is overwritten with ``DEPOSIT_LEVEL``, not added
        to.  Positions outside the grid are dropped without error.

        Args:
            position: Continuous world position of the depositor.
            ptype: Which pheromone to deposit.
        """
        cell = drop_if_out_of_range(position, self.width, self.height)
        if cell is None:
            self.dropped_deposits += 1
            logger.debug(
                "Dropped %s deposit at (%.3f, %.3f)",
                ptype.name,
                position.x,
                position.y,
            )
            return
        x, y = cell
        self.layers[ptype][y, x] = DEPOSIT_LEVEL

    def decay(self) -> None:
        """Apply one tick of dissipation to every cell."""
        update_field(self)

    def cell(self, x: int, y: int) -> PheromoneCell:
        """Return both concentrations at grid coordinates ``(x, y)``.

        Raises:
            IndexError: If coordinates are out of bounds.
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            msg = f"({x}, {y}) out of bounds for {self.width}x{self.height}"
            raise IndexError(msg)
        return PheromoneCell(
            path=float(self.layers[PheromoneType.PATH][y, x]),
            food=float(self.layers[PheromoneType.FOOD][y, x]),
        )

    def read(self, ptype: PheromoneType, x: int, y: int) -> float:
        """Read one pheromone concentration at a cell.

        Args:
            ptype: Which pheromone to read.
            x: Column index.
            y: Row index.

        Returns:
            Current concentration value.
        """
        return float(self.layers[ptype][y, x])

    def get_layer(self, ptype: PheromoneType) -> NDArray[np.float64]:
        """Return the raw NumPy array for a pheromone layer.

        Args:
            ptype: Which pheromone type.

        Returns:
            2D array of concentration values, shape ``(height, width)``.
        """
        return self.layers[ptype]

    def total(self, ptype: PheromoneType) -> float:
        """Sum of one pheromone type over the whole grid."""
        return float(self.layers[ptype].sum())
