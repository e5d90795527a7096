"""
Activations Package

This package provides the activation functions a Network applies to the
weighted sum computed by each of its neurons.

Exported:
    activations:    Dictionary mapping activation function names to functions
    get_activation: Look up an activation function by name
    Individual activation functions: identity_activation, clamped_activation,
                                     relu_activation, sigmoid_activation,
                                     tanh_activation, step_activation
"""

from neuroevo.activations.basic_activations import (
    activations,
    get_activation,
    identity_activation,
    clamped_activation,
    relu_activation,
    sigmoid_activation,
    tanh_activation,
    step_activation
)

__all__ = [
    'activations',
    'get_activation',
    'identity_activation',
    'clamped_activation',
    'relu_activation',
    'sigmoid_activation',
    'tanh_activation',
    'step_activation'
]
