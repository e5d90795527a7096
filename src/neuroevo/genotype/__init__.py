"""
Genotype Package

This package implements the genetic encoding used by the genetic algorithm:
each candidate network is represented by a chromosome, a flat vector of weights
annotated with the fitness of the network it encodes.

Modules:
    chromosome: Chromosome class

Exported Classes:
    Chromosome: A candidate solution (weight vector plus fitness)
"""

from neuroevo.genotype.chromosome import Chromosome

__all__ = ['Chromosome']
