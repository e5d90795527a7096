"""
Shared fixtures for integration tests.
"""

import pytest
import numpy as np
from neuroevo.run.config import Config


@pytest.fixture
def soft_or_inputs():
    """Grid of sensor readings in [0, 1]."""
    grid = np.linspace(0.0, 1.0, 5)
    return np.array([[x1, x2] for x1 in grid for x2 in grid])


@pytest.fixture
def soft_or_targets(soft_or_inputs):
    """Soft OR of each pair of readings, in [0.5, 1]."""
    return 0.5 + 0.5 * soft_or_inputs.max(axis=1)


@pytest.fixture
def evolution_config():
    """Configuration for a short, seeded run."""
    config = Config()
    config.population_size = 60
    config.seed = 42
    config.num_inputs = 2
    config.num_outputs = 1
    config.num_hidden_layers = 1
    config.neurons_per_hidden_layer = 3
    config.mutation_rate = 0.05
    config.crossover_rate = 0.7
    config.max_elite = 2
    config.max_elite_copies = 2
    config.max_number_generations = 15
    return config
