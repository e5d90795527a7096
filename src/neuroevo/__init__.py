"""
neuroevo - Neuroevolution of fixed-topology feedforward networks.

This package evolves the weights of small fully-connected feedforward neural
networks with a generational genetic algorithm. It is meant for problems where
no labeled training data exists and fitness can only be measured by simulation
(for example, game-playing agents).

Main components:
- phenotype: Feedforward network interpreting a flat weight vector
- genotype: Chromosomes (weight vector plus fitness)
- pool: Reproduction engine (elitism, roulette selection, crossover, mutation)
        and population statistics
- run: Configuration and trial execution
- activations: Activation functions for neural networks

Example:
    >>> from neuroevo import Config, Trial
    >>> config = Config("config.ini")
    >>> class MyTrial(Trial):
    ...     def _evaluate_fitness(self, network):
    ...         # Implement fitness evaluation
    ...         pass
    >>> trial = MyTrial(config)
    >>> trial.run()
"""

__version__ = "0.1.0"

# Import main classes for convenient access
from neuroevo.run.config               import Config
from neuroevo.run.trial                import Trial
from neuroevo.genotype.chromosome      import Chromosome
from neuroevo.phenotype.network        import Network
from neuroevo.pool.genetic_algorithm   import GeneticAlgorithm
from neuroevo.pool.statistics          import FitnessStatistics
from neuroevo.logging_config           import configure_logging

__all__ = [
    "Config",
    "Trial",
    "Chromosome",
    "Network",
    "GeneticAlgorithm",
    "FitnessStatistics",
    "configure_logging",
]
