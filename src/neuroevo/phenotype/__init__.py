"""
Phenotype Package

This package implements the phenotype of the genetic algorithm: a fixed-topology
feedforward neural network which expresses a chromosome's flat weight vector as
an executable function from inputs to outputs.

Modules:
    network: Neuron, NeuronLayer and Network classes

Exported Classes:
    Neuron:      A computational node holding its input and bias weights
    NeuronLayer: An ordered sequence of neurons sharing the same inputs
    Network:     Fully-connected feedforward neural network
"""

from neuroevo.phenotype.network import Neuron, NeuronLayer, Network

__all__ = ['Neuron',
           'NeuronLayer',
           'Network']
