"""
Roulette Selection Module

Fitness-proportionate ("roulette wheel") parent selection: the probability of
picking a chromosome equals its share of the population's total fitness.
"""

import numpy as np

from neuroevo.genotype import Chromosome

def roulette_index(fitness: np.ndarray, r: float) -> int:
    """
    Return the index of the first chromosome whose cumulative fitness exceeds 'r'.

    Chromosomes with zero fitness are never selected. If rounding in the
    cumulative sum leaves it short of 'r', the last chromosome with positive
    fitness is returned instead.

    Parameters:
        fitness: the fitness of each chromosome, in population order
        r:       a point on the wheel, in [0, total fitness)
    """
    cumulative = np.cumsum(fitness)
    index = int(np.searchsorted(cumulative, r, side='right'))
    if index < len(fitness):
        return index
    return int(np.flatnonzero(fitness > 0)[-1])

def roulette_select(population: list[Chromosome], total_fitness: float,
                    rng: np.random.Generator) -> Chromosome:
    """
    Pick a chromosome with probability proportional to its fitness.
    Selection is with replacement.

    Parameters:
        population:    the chromosomes to choose from (fitness must be non-negative)
        total_fitness: the sum of the fitness of all chromosomes
        rng:           source of randomness

    Raises:
        ValueError: if the total fitness is not positive (or is NaN)
    """
    if not total_fitness > 0:
        raise ValueError(f"roulette selection requires a positive total fitness, got {total_fitness}")

    r = rng.random() * total_fitness
    fitness = np.fromiter((chromosome.fitness for chromosome in population),
                          dtype=np.float64, count=len(population))
    return population[roulette_index(fitness, r)]
