"""
Chromosome Module

This module implements the genotype handled by the genetic algorithm: a flat
vector of real valued weights paired with the fitness of the network it encodes.

Classes:
    Chromosome: A candidate solution (weight vector plus fitness)
"""

from typing import Sequence

import numpy as np

class Chromosome:
    """
    A candidate solution of the genetic algorithm.

    The chromosome is opaque to the genetic algorithm: its weights are only
    interpreted when decoded into a Network (see 'Network.put_weights'), which
    reads them in layer-major, neuron-major, weight-minor order.

    Chromosomes are ordered by fitness, so that sorting a population or pushing
    it into a heap ranks it from least to most fit. Equality compares both the
    fitness and the weights.

    Public Attributes:
        fitness: Fitness of the individual (higher is better), assigned by the
                 caller after evaluating the decoded network
        weights: The weight vector, a numpy array of fixed length

    Public Methods:
        random(genome_size, rng): Create a chromosome with random weights
        copy():                   Create an independent copy of this chromosome
    """

    def __init__(self, fitness: float, weights: Sequence[float]):
        """
        Parameters:
            fitness: the fitness of the individual
            weights: the weight vector; it is copied, not aliased
        """
        self.fitness: float      = float(fitness)
        self.weights: np.ndarray = np.array(weights, dtype=np.float64)

    @classmethod
    def random(cls, genome_size: int, rng: np.random.Generator) -> 'Chromosome':
        """
        Create a chromosome with weights drawn uniformly from [0, 1) and zero fitness.

        Parameters:
            genome_size: the number of weights
            rng:         source of randomness
        """
        return cls(0.0, rng.random(genome_size))

    def copy(self) -> 'Chromosome':
        return Chromosome(self.fitness, self.weights)

    def __len__(self):
        return len(self.weights)

    def __lt__(self, other: 'Chromosome') -> bool:
        return self.fitness < other.fitness

    def __le__(self, other: 'Chromosome') -> bool:
        return self.fitness <= other.fitness

    def __gt__(self, other: 'Chromosome') -> bool:
        return self.fitness > other.fitness

    def __ge__(self, other: 'Chromosome') -> bool:
        return self.fitness >= other.fitness

    def __eq__(self, other):
        if not isinstance(other, Chromosome):
            return NotImplemented
        return self.fitness == other.fitness and np.array_equal(self.weights, other.weights)

    __hash__ = None

    def __repr__(self):
        return f"Chromosome(fitness={self.fitness:.4f}, genome_size={len(self.weights)})"
