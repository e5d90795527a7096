"""Pytest configuration and shared fixtures."""

import pytest
import sys
from pathlib import Path

import numpy as np

# Add the source directory to the Python path
src_dir = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_dir))


@pytest.fixture
def rng():
    """Provide a seeded random number generator."""
    return np.random.default_rng(42)


@pytest.fixture
def default_config():
    """Provide a default configuration with a small population."""
    from neuroevo.run.config import Config
    config = Config()
    config.population_size = 20
    config.max_elite = 2
    config.max_elite_copies = 2
    config.max_number_generations = 5
    return config
