"""
Pool Package

This package manages populations of chromosomes and their reproduction from one
generation to the next.

Modules:
    genetic_algorithm: GeneticAlgorithm class (the reproduction engine)
    population:        Helpers to create and inspect populations
    selection:         Roulette (fitness-proportionate) selection
    statistics:        FitnessStatistics class

Exported:
    GeneticAlgorithm:  Generational reproduction of fixed-length chromosomes
    FitnessStatistics: Best, worst, average and total fitness of a generation
    create_population: Create a population of random chromosomes
    get_fittest:       Return the fittest chromosome of a population
    roulette_select:   Pick a chromosome with probability proportional to its fitness
"""

from neuroevo.pool.genetic_algorithm import GeneticAlgorithm
from neuroevo.pool.population        import create_population, get_fittest
from neuroevo.pool.selection         import roulette_select
from neuroevo.pool.statistics        import FitnessStatistics

__all__ = ['GeneticAlgorithm',
           'FitnessStatistics',
           'create_population',
           'get_fittest',
           'roulette_select']
