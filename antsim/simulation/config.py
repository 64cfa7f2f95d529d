"""Config — load simulation parameters from YAML files.

All tunable constants (grid size, velocity limits, pheromone decay)
live in YAML and are parsed into a typed dataclass here.  The config is
passed explicitly to the Simulation and threaded from there to the
pheromone field and every ant; there is no global settings object.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, fields
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

_INT_FIELDS = ("width", "height", "seed", "initial_ants")
_REAL_FIELDS = (
    "random_dir",
    "max_velocity",
    "pheromone_zero_cutoff",
    "pheromone_dissipation_rate",
)


class ConfigError(ValueError):
    """Raised when configuration values are missing or out of range."""


@dataclass
class SimulationConfig:
    """Top-level simulation configuration.

    Attributes:
        random_dir: Magnitude of the per-tick velocity jitter.  Each
            component receives a uniform draw in
            ``[-random_dir / 2, random_dir / 2]``.
        max_velocity: Clamp bound applied to each velocity component.
        width: Number of grid columns.
        height: Number of grid rows.
        pheromone_zero_cutoff: Concentrations below this snap to 0 after
            decay.
        pheromone_dissipation_rate: Per-tick multiplicative decay factor,
            strictly between 0 and 1.
        seed: RNG seed for deterministic replay.
        initial_ants: Ants added at the nest on start-up.
    """

    random_dir: float = 0.1
    max_velocity: float = 1.0
    width: int = 512
    height: int = 512
    pheromone_zero_cutoff: float = 0.01
    pheromone_dissipation_rate: float = 0.99
    seed: int = 42
    initial_ants: int = 100

    def __post_init__(self) -> None:
        """Reject values the engine cannot run with."""
        for name in _INT_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                msg = f"{name} must be an integer, got {value!r}"
                raise ConfigError(msg)
        for name in _REAL_FIELDS:
            value = getattr(self, name)
            if (
                isinstance(value, bool)
                or not isinstance(value, (int, float))
                or not math.isfinite(value)
            ):
                msg = f"{name} must be a finite number, got {value!r}"
                raise ConfigError(msg)
        if self.width <= 0 or self.height <= 0:
            msg = f"grid must be non-empty, got {self.width}x{self.height}"
            raise ConfigError(msg)
        if not 0.0 < self.pheromone_dissipation_rate < 1.0:
            msg = (
                "pheromone_dissipation_rate must be in (0, 1), "
                f"got {self.pheromone_dissipation_rate}"
            )
            raise ConfigError(msg)
        for name in ("random_dir", "max_velocity", "pheromone_zero_cutoff"):
            value = getattr(self, name)
            if value < 0:
                msg = f"{name} must be >= 0, got {value}"
                raise ConfigError(msg)
        if self.initial_ants < 0:
            msg = f"initial_ants must be >= 0, got {self.initial_ants}"
            raise ConfigError(msg)
        if self.seed < 0:
            msg = f"seed must be >= 0, got {self.seed}"
            raise ConfigError(msg)

    @classmethod
    def from_yaml(cls, path: str | Path) -> SimulationConfig:
        """Load configuration from a YAML file.

        Keys missing from the file keep their defaults; unknown keys are
        logged and ignored.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated SimulationConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
            ConfigError: If the document is not a mapping or a value is
                out of range.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            msg = f"{path}: expected a mapping, got {type(data).__name__}"
            raise ConfigError(msg)

        known = {f.name for f in fields(cls)}
        for key in sorted(set(data) - known):
            logger.warning("%s: ignoring unknown config key %r", path, key)

        config = cls(**{k: v for k, v in data.items() if k in known})
        logger.info(
            "Loaded config from %s (%dx%d, seed=%d)",
            path,
            config.width,
            config.height,
            config.seed,
        )
        return config
