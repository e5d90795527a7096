"""
Genetic Algorithm Module

This module implements the reproduction engine of the neuroevolution process,
which turns a fitness-annotated population into the next generation through
elitism, roulette selection, single-point crossover and mutation.

Classes:
    GeneticAlgorithm: Generational reproduction of fixed-length chromosomes
"""

from typing import Optional, TYPE_CHECKING

import numpy as np
from loguru import logger

from neuroevo.genotype        import Chromosome
from neuroevo.pool.selection  import roulette_select
from neuroevo.pool.statistics import FitnessStatistics

if TYPE_CHECKING:
    from neuroevo.run.config import Config

class GeneticAlgorithm:
    """
    Generational genetic algorithm over fixed-length weight vectors.

    The engine keeps no state between generations other than the statistics
    of the last population it reproduced. Randomness is drawn exclusively from
    the generator handed to 'epoch', so a run is reproducible given its seed.

    Public Properties:
        population_size: Number of chromosomes in each generation
        genome_size:     Number of weights in each chromosome
        mutation_rate:   Per-gene probability of mutation
        crossover_rate:  Probability that two parents are recombined
        statistics:      FitnessStatistics of the last reproduced population
        total_fitness:   Sum of fitness over the last reproduced population
        best_fitness:    Highest fitness in the last reproduced population
        average_fitness: Mean fitness of the last reproduced population
        worst_fitness:   Lowest fitness in the last reproduced population
        population:      The last generation produced by 'epoch' (None before the first call)

    Public Methods:
        epoch(population, rng):             Produce the next generation
        crossover(parent_a, parent_b, rng): Recombine two weight vectors
        mutate(weights, rng):               Replace random genes of a weight vector
    """

    def __init__(self,
                 population_size: int,
                 genome_size: int,
                 mutation_rate: float = 0.001,
                 crossover_rate: float = 0.7,
                 max_elite: int = 10,
                 max_elite_copies: int = 20,
                 max_perturbation: float = 1.0):
        """
        Parameters:
            population_size:  the number of chromosomes in each generation
            genome_size:      the number of weights in each chromosome
            mutation_rate:    per-gene probability of being replaced by a random value
            crossover_rate:   probability that two parents are recombined
            max_elite:        the number of fittest chromosomes carried over unchanged
            max_elite_copies: the number of copies of each elite chromosome
            max_perturbation: upper bound (exclusive) of the random value a mutated gene takes

        Raises:
            ValueError: if any parameter is out of its valid range
        """
        if population_size < 1:
            raise ValueError(f"population_size must be positive, got {population_size}")
        if genome_size < 1:
            raise ValueError(f"genome_size must be positive, got {genome_size}")
        if not 0.0 <= mutation_rate <= 1.0:
            raise ValueError(f"mutation_rate must be in [0, 1], got {mutation_rate}")
        if not 0.0 <= crossover_rate <= 1.0:
            raise ValueError(f"crossover_rate must be in [0, 1], got {crossover_rate}")
        if max_elite < 0 or max_elite_copies < 0:
            raise ValueError("max_elite and max_elite_copies must not be negative")
        if max_perturbation <= 0:
            raise ValueError(f"max_perturbation must be positive, got {max_perturbation}")

        self._population_size : int   = population_size
        self._genome_size     : int   = genome_size
        self._mutation_rate   : float = mutation_rate
        self._crossover_rate  : float = crossover_rate
        self._max_elite       : int   = max_elite
        self._max_elite_copies: int   = max_elite_copies
        self._max_perturbation: float = max_perturbation

        self._statistics: FitnessStatistics          = FitnessStatistics()
        self._population: Optional[list[Chromosome]] = None

        num_elite = max_elite * max_elite_copies
        if num_elite > population_size:
            logger.warning("Elitism produces {} chromosomes, more than the population size {}; "
                           "elite copies will be truncated", num_elite, population_size)
        elif (population_size - num_elite) % 2:
            logger.warning("Elitism leaves an odd number of slots ({}); the last pair of "
                           "children will be cut to one", population_size - num_elite)

    @classmethod
    def from_config(cls, config: 'Config') -> 'GeneticAlgorithm':
        """
        Create the genetic algorithm described by 'config'.

        Parameters:
            config: Stores configuration parameters
        """
        return cls(config.population_size,
                   config.genome_size,
                   mutation_rate=config.mutation_rate,
                   crossover_rate=config.crossover_rate,
                   max_elite=config.max_elite,
                   max_elite_copies=config.max_elite_copies,
                   max_perturbation=config.max_perturbation)

    @property
    def population_size(self) -> int:
        return self._population_size

    @property
    def genome_size(self) -> int:
        return self._genome_size

    @property
    def mutation_rate(self) -> float:
        return self._mutation_rate

    @property
    def crossover_rate(self) -> float:
        return self._crossover_rate

    @property
    def statistics(self) -> FitnessStatistics:
        return self._statistics

    @property
    def total_fitness(self) -> float:
        return self._statistics.total

    @property
    def best_fitness(self) -> float:
        return self._statistics.best

    @property
    def average_fitness(self) -> float:
        return self._statistics.average

    @property
    def worst_fitness(self) -> float:
        return self._statistics.worst

    @property
    def population(self) -> Optional[list[Chromosome]]:
        return self._population

    def epoch(self, population: list[Chromosome], rng: np.random.Generator) -> list[Chromosome]:
        """
        Produce the next generation from a fitness-annotated population.

        The generation transition follows these steps:

        Step 1: Statistics
        - Discard previous statistics and recompute them from 'population'

        Step 2: Elitism
        - Copy the 'max_elite' fittest chromosomes, 'max_elite_copies' times
          each, into the next generation (never more than 'population_size')

        Step 3: Reproduction
        - Pick two parents by roulette selection
        - Recombine them (single-point crossover) and mutate both children
        - Add the children, tagged with their parents' fitness, until the
          next generation holds 'population_size' chromosomes

        Parameters:
            population: the evaluated population (fitness must be non-negative)
            rng:        source of randomness

        Returns:
            The next generation, exactly 'population_size' chromosomes long

        Raises:
            ValueError: if the population is empty, contains genomes of the
                        wrong length, negative or non-finite fitness, or has zero
                        total fitness while slots remain to be filled by selection
        """
        self._validate(population)

        self._statistics.compute(population)
        logger.debug("Reproducing population of {}: {}", len(population), self._statistics)

        next_population = self._copy_elite(population)

        while len(next_population) < self._population_size:
            parent_a = roulette_select(population, self._statistics.total, rng)
            parent_b = roulette_select(population, self._statistics.total, rng)

            child_a, child_b = self.crossover(parent_a.weights, parent_b.weights, rng)
            child_a = self.mutate(child_a, rng)
            child_b = self.mutate(child_b, rng)

            # the children's fitness is unknown until they are evaluated
            next_population.append(Chromosome(parent_a.fitness, child_a))
            if len(next_population) < self._population_size:
                next_population.append(Chromosome(parent_b.fitness, child_b))

        self._population = next_population
        return next_population

    def _validate(self, population: list[Chromosome]):
        if not population:
            raise ValueError("cannot reproduce an empty population")
        for idx, chromosome in enumerate(population):
            if len(chromosome) != self._genome_size:
                raise ValueError(f"chromosome {idx} has {len(chromosome)} genes, "
                                 f"expected {self._genome_size}")
            if not np.isfinite(chromosome.fitness):
                raise ValueError(f"chromosome {idx} has non-finite fitness {chromosome.fitness}")
            if chromosome.fitness < 0:
                raise ValueError(f"chromosome {idx} has negative fitness {chromosome.fitness}")

    def _copy_elite(self, population: list[Chromosome]) -> list[Chromosome]:
        """
        Return copies of the fittest chromosomes, fittest first.
        Ties are broken by position in the population.
        """
        ranking = sorted(range(len(population)), key=lambda idx: -population[idx].fitness)
        elite = [population[idx] for idx in ranking[:self._max_elite]]

        copies = [chromosome.copy() for chromosome in elite for _ in range(self._max_elite_copies)]
        return copies[:self._population_size]

    def crossover(self, parent_a: np.ndarray, parent_b: np.ndarray,
                  rng: np.random.Generator) -> tuple[np.ndarray, np.ndarray]:
        """
        Single-point crossover.

        With probability 'crossover_rate' a cut point is drawn in [0, genome_size - 1)
        and the children exchange the parents' suffixes from that point on:
            child_a = parent_a[:cut] + parent_b[cut:]
            child_b = parent_b[:cut] + parent_a[cut:]
        Otherwise the children are copies of their parents.

        Returns:
            The two children, as new arrays
        """
        if rng.random() >= self._crossover_rate or self._genome_size < 2:
            return parent_a.copy(), parent_b.copy()

        cut = int(rng.integers(0, self._genome_size - 1))
        child_a = np.concatenate((parent_a[:cut], parent_b[cut:]))
        child_b = np.concatenate((parent_b[:cut], parent_a[cut:]))
        return child_a, child_b

    def mutate(self, weights: np.ndarray, rng: np.random.Generator) -> np.ndarray:
        """
        Replace each gene, with probability 'mutation_rate', by a value drawn
        uniformly from [0, max_perturbation).

        Returns:
            The mutated weights, as a new array
        """
        mutated = np.array(weights, dtype=np.float64)
        mask = rng.random(len(mutated)) < self._mutation_rate
        mutated[mask] = rng.random(int(np.count_nonzero(mask))) * self._max_perturbation
        return mutated

    def __repr__(self):
        return (f"GeneticAlgorithm(population_size={self._population_size}, "
                f"genome_size={self._genome_size}, "
                f"mutation_rate={self._mutation_rate}, "
                f"crossover_rate={self._crossover_rate})")
