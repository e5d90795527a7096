"""
Population Statistics Module

Classes:
    FitnessStatistics: Best, worst, average and total fitness of a generation
"""

import heapq
import math

from neuroevo.genotype import Chromosome

class FitnessStatistics:
    """
    Fitness statistics of one generation.

    Public Attributes:
        total:   Sum of the fitness of all chromosomes
        best:    Highest fitness
        worst:   Lowest fitness
        average: Mean fitness

    Public Methods:
        reset():              Restore the sentinel values
        compute(population):  Recalculate all statistics from a population
    """

    def __init__(self):
        self.reset()

    def reset(self):
        """Discard the current statistics (worst is +inf, everything else zero)."""
        self.total  : float = 0.0
        self.average: float = 0.0
        self.best   : float = 0.0
        self.worst  : float = math.inf

    def compute(self, population: list[Chromosome]):
        """
        Recalculate the statistics of 'population'.

        The chromosomes are ranked through a min-heap on fitness: the first
        chromosome popped is the least fit, the last one the fittest.

        Raises:
            ValueError: if the population is empty
        """
        self.reset()
        if not population:
            raise ValueError("cannot compute the statistics of an empty population")

        queue = list(population)
        heapq.heapify(queue)

        self.worst = heapq.heappop(queue).fitness
        self.total = self.best = self.worst
        while queue:
            sample = heapq.heappop(queue).fitness
            self.total += sample
            self.best = sample

        self.average = self.total / len(population)

    def __str__(self):
        return (f"best={self.best:.4f} avg={self.average:.4f} "
                f"worst={self.worst:.4f} total={self.total:.4f}")

    def __repr__(self):
        return (f"FitnessStatistics(total={self.total}, best={self.best}, "
                f"average={self.average}, worst={self.worst})")
