"""
Population Module

A population is a plain list of chromosomes, kept in insertion order. This
module provides the helpers a driver needs to seed and inspect one.
"""

from typing import Optional

import numpy as np

from neuroevo.genotype import Chromosome

def create_population(population_size: int, genome_size: int,
                      rng: np.random.Generator) -> list[Chromosome]:
    """
    Create the initial population: chromosomes with weights drawn uniformly
    from [0, 1) and zero fitness.

    Parameters:
        population_size: the number of chromosomes
        genome_size:     the number of weights in each chromosome
        rng:             source of randomness
    """
    return [Chromosome.random(genome_size, rng) for _ in range(population_size)]

def get_fittest(population: list[Chromosome]) -> Optional[Chromosome]:
    """
    Return the chromosome with the highest fitness (the first one, on ties),
    or None if the population is empty.
    """
    if not population:
        return None
    return max(population, key=lambda chromosome: chromosome.fitness)
