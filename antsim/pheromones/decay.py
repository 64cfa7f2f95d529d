"""Decay logic for pheromone layers.

Operates on the raw NumPy arrays inside ``PheromoneField.layers``.
Separated from ``fields.py`` so the decay model can be swapped
independently of storage.  Pheromone does not spread between cells.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from antsim.pheromones.fields import PheromoneField


def decay_layer(
    grid: NDArray[np.float64],
    dissipation_rate: float,
    zero_cutoff: float,
) -> None:
    """Exponentially decay one layer in place.

    Applies ``grid *= dissipation_rate`` and then snaps every value
    below ``zero_cutoff`` to exactly 0.

    Args:
        grid: Concentration array to modify.
        dissipation_rate: Multiplicative factor in ``(0, 1)``.
        zero_cutoff: Snap-to-zero threshold.
    """
    grid *= dissipation_rate
    grid[grid < zero_cutoff] = 0.0


def update_field(field: PheromoneField) -> None:
    """Run one tick of decay on all layers.

    Args:
        field: The complete pheromone field to update.
    """
    for grid in field.layers.values():
        decay_layer(grid, field.dissipation_rate, field.zero_cutoff)
