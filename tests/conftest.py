"""Shared fixtures for the antsim test suite."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.random import Generator

from antsim.pheromones.fields import PheromoneField
from antsim.simulation.config import SimulationConfig


@pytest.fixture
def rng() -> Generator:
    """A deterministic random generator for reproducible tests."""
    return np.random.default_rng(seed=12345)


@pytest.fixture
def small_config() -> SimulationConfig:
    """An 8x8 grid with the default motion and decay parameters."""
    return SimulationConfig(width=8, height=8, initial_ants=5)


@pytest.fixture
def still_config() -> SimulationConfig:
    """A 4x4 grid with no velocity jitter, so motion is fully predictable."""
    return SimulationConfig(width=4, height=4, random_dir=0.0)


@pytest.fixture
def small_field() -> PheromoneField:
    """An 8x8 pheromone field with the default decay parameters."""
    return PheromoneField(width=8, height=8)
