"""Shared fixtures for the reallife test suite."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.random import Generator

from reallife.rules.constants import Rules
from reallife.simulation.config import SimulationConfig
from reallife.world.grid import World


@pytest.fixture
def rng() -> Generator:
    """A deterministic random generator for reproducible tests."""
    return np.random.default_rng(seed=12345)


@pytest.fixture
def rules() -> Rules:
    """The default turn constants."""
    return Rules()


@pytest.fixture
def small_world() -> World:
    """An empty 5x5 world for fast tests."""
    return World(size=5)


@pytest.fixture
def small_config() -> SimulationConfig:
    """A small config that runs quickly (no YAML file needed)."""
    return SimulationConfig(
        seed=777,
        world_size=10,
        initial_life=4,
        initial_resources=15,
    )
