"""Vector — minimal mutable 2D point used for ant kinematics."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass
class Vector:
    """A 2D point or direction with float components.

    Attributes:
        x: Horizontal component (column axis).
        y: Vertical component (row axis).
    """

    x: float
    y: float

    def translate(self, dx: float, dy: float) -> None:
        """Shift this vector in place by ``(dx, dy)``."""
        self.x += dx
        self.y += dy

    def unit(self) -> Vector:
        """Return a new vector scaled by the inverse squared magnitude.

        The divisor is ``|x² + y²|`` with no square root, so the result is
        only a true unit vector when the magnitude is exactly 1.  A zero
        vector gives non-finite components (``nan`` for 0/0, ``±inf``
        otherwise) rather than raising.

        Returns:
            A new Vector; this one is left unchanged.
        """
        mag = np.float64(abs(self.x * self.x + self.y * self.y))
        with np.errstate(divide="ignore", invalid="ignore"):
            return Vector(
                float(np.float64(self.x) / mag),
                float(np.float64(self.y) / mag),
            )

    def copy(self) -> Vector:
        """Return an independent copy."""
        return Vector(self.x, self.y)
