"""
Feedforward Network Module

This module implements the phenotype of the genetic algorithm: a fixed-topology,
fully-connected feedforward neural network which interprets a flat vector of
real numbers (a chromosome's weights) as its connection and bias weights.

The network is made of an ordered sequence of layers, each layer being an ordered
sequence of neurons. Every neuron owns 'inputs + 1' weights; the extra (last)
weight multiplies a constant bias input. The flattening order of all weights is
layer-major, neuron-major, weight-minor, and is the contract which chromosome
weight vectors must follow.

Classes:
    Neuron:      A computational node holding its input and bias weights
    NeuronLayer: An ordered sequence of neurons sharing the same inputs
    Network:     A feedforward neural network built from neuron layers
"""

from typing import Callable, Optional, Sequence, TYPE_CHECKING

import numpy as np
from loguru import logger

from neuroevo.activations import get_activation, sigmoid_activation

if TYPE_CHECKING:
    from neuroevo.run.config import Config

class Neuron:
    """
    A computational node (neuron) in a feedforward network.

    The neuron stores 'num_inputs + 1' weights drawn uniformly from [0, 1).
    The first 'num_inputs' weights multiply the neuron inputs, the last one
    multiplies the bias input.

    Public Attributes:
        weights: numpy array holding the input weights followed by the bias weight

    Public Properties:
        num_inputs:  Number of inputs feeding this neuron
        size:        Number of weights owned by this neuron (num_inputs + 1)
        bias_weight: The weight applied to the bias input
    """

    def __init__(self, num_inputs: int, rng: np.random.Generator):
        """
        Parameters:
            num_inputs: the number of inputs feeding the neuron
            rng:        source of randomness used to initialize the weights
        """
        self._num_inputs: int        = num_inputs
        self.weights    : np.ndarray = rng.random(num_inputs + 1)

    @property
    def num_inputs(self) -> int:
        """Number of inputs feeding this neuron."""
        return self._num_inputs

    @property
    def size(self) -> int:
        """Number of weights, including the bias weight."""
        return self._num_inputs + 1

    @property
    def bias_weight(self) -> float:
        """The weight applied to the constant bias input."""
        return float(self.weights[-1])

    def __repr__(self):
        return f"Neuron(num_inputs={self._num_inputs})"

class NeuronLayer:
    """
    An ordered sequence of neurons which all receive the same input vector.

    Public Attributes:
        neurons: the neurons in this layer

    Public Properties:
        size:              Number of neurons in the layer
        num_inputs:        Number of inputs feeding each neuron
        number_of_weights: Total number of weights owned by the layer's neurons

    Public Methods:
        forward_pass(inputs, bias, activation, activation_response): Calculate the layer output
    """

    def __init__(self, num_neurons: int, num_inputs: int, rng: np.random.Generator):
        """
        Parameters:
            num_neurons: the number of neurons in the layer
            num_inputs:  the number of inputs feeding each neuron
            rng:         source of randomness used to initialize the weights
        """
        self._num_inputs: int = num_inputs
        self.neurons = [Neuron(num_inputs, rng) for _ in range(num_neurons)]

    @property
    def size(self) -> int:
        return len(self.neurons)

    @property
    def num_inputs(self) -> int:
        return self._num_inputs

    @property
    def number_of_weights(self) -> int:
        return sum(neuron.size for neuron in self.neurons)

    def forward_pass(self, inputs: np.ndarray, bias: float,
                     activation: Callable, activation_response: float) -> np.ndarray:
        """
        Calculate the output of every neuron in the layer as:
            activation((sum(weight * input) + bias_weight * bias) / activation_response)

        Parameters:
            inputs:              the layer inputs, a vector of length 'num_inputs'
            bias:                the constant bias input
            activation:          the activation function
            activation_response: divides the weighted sum before activation

        Returns:
            The layer outputs, one value per neuron
        """
        weights = np.vstack([neuron.weights for neuron in self.neurons])
        net     = weights[:, :-1] @ inputs + weights[:, -1] * bias
        return np.asarray(activation(net / activation_response), dtype=np.float64)

    def __repr__(self):
        return f"NeuronLayer(size={self.size}, num_inputs={self._num_inputs})"

class Network:
    """
    Fixed-topology, fully-connected feedforward neural network.

    The network consists of 'num_hidden_layers' hidden layers of
    'neurons_per_hidden_layer' neurons each, followed by an output layer of
    'num_outputs' neurons. Every hidden neuron receives 'num_inputs' inputs,
    every output neuron receives 'neurons_per_hidden_layer' inputs. Since each
    layer consumes the output of the previous layer, topologies in which those
    widths can not line up are rejected.

    The network knows nothing about fitness or generations: it is a pure
    interpreter of a flat weight vector, which can be read with 'get_weights'
    and replaced with 'put_weights'.

    Structural mismatches (out of range indices, weight or input vectors of the
    wrong length) are signalled through the return value ('False' or 'None')
    rather than raised, with the exception of 'get_weight'.

    Public Properties:
        num_inputs:               Number of network inputs
        num_outputs:              Number of network outputs
        num_hidden_layers:        Number of hidden layers
        neurons_per_hidden_layer: Number of neurons in each hidden layer
        layers:                   The hidden layers followed by the output layer
        number_of_weights:        Total number of weights, i.e. the genome size

    Public Methods:
        get_weight(layer, neuron, input_idx):        Return a single weight
        get_weights():                               Return all weights as a flat vector
        put_weight(layer, neuron, input_idx, value): Replace a single weight
        put_weights(weights):                        Replace all weights from a flat vector
        update(inputs):                              Calculate the network outputs
    """

    def __init__(self,
                 num_inputs: int,
                 num_outputs: int,
                 num_hidden_layers: int,
                 neurons_per_hidden_layer: int,
                 rng: np.random.Generator,
                 activation: Callable = sigmoid_activation,
                 bias: float = 1.0,
                 activation_response: float = 1.0):
        """
        Build the network, drawing every weight uniformly from [0, 1).

        Parameters:
            num_inputs:               the number of network inputs
            num_outputs:              the number of network outputs
            num_hidden_layers:        the number of hidden layers
            neurons_per_hidden_layer: the number of neurons in each hidden layer
            rng:                      source of randomness used to initialize the weights
            activation:               activation function applied by every neuron
            bias:                     the constant input multiplied by each neuron's bias weight
            activation_response:      divides each neuron's weighted sum before activation

        Raises:
            ValueError: if the layer sizes are invalid or can not be chained together
        """
        self._validate_topology(num_inputs, num_outputs, num_hidden_layers, neurons_per_hidden_layer)
        if activation_response == 0:
            raise ValueError("activation_response must be non-zero")

        self._num_inputs              : int      = num_inputs
        self._num_outputs             : int      = num_outputs
        self._num_hidden_layers       : int      = num_hidden_layers
        self._neurons_per_hidden_layer: int      = neurons_per_hidden_layer
        self._activation              : Callable = activation
        self.bias                     : float    = bias
        self.activation_response      : float    = activation_response

        # hidden layers, then the output layer
        self._layers = [NeuronLayer(neurons_per_hidden_layer, num_inputs, rng)
                        for _ in range(num_hidden_layers)]
        self._layers.append(NeuronLayer(num_outputs, neurons_per_hidden_layer, rng))

    @classmethod
    def from_config(cls, config: 'Config', rng: np.random.Generator) -> 'Network':
        """
        Build a randomly initialized network whose shape is described by 'config'.

        Parameters:
            config: Stores configuration parameters
            rng:    source of randomness used to initialize the weights
        """
        return cls(config.num_inputs,
                   config.num_outputs,
                   config.num_hidden_layers,
                   config.neurons_per_hidden_layer,
                   rng,
                   activation=get_activation(config.activation),
                   bias=config.bias,
                   activation_response=config.activation_response)

    @staticmethod
    def _validate_topology(num_inputs: int, num_outputs: int,
                           num_hidden_layers: int, neurons_per_hidden_layer: int):
        if num_inputs < 1 or num_outputs < 1 or neurons_per_hidden_layer < 1:
            raise ValueError("num_inputs, num_outputs and neurons_per_hidden_layer must be positive")
        if num_hidden_layers < 0:
            raise ValueError("num_hidden_layers must not be negative")

        # Hidden layers are wired to 'num_inputs' inputs, the output layer to
        # 'neurons_per_hidden_layer' inputs; both only line up with the width
        # of the previous layer when there is exactly one hidden layer, or
        # when the two widths are equal.
        if num_hidden_layers != 1 and neurons_per_hidden_layer != num_inputs:
            raise ValueError(
                f"a network with {num_hidden_layers} hidden layers requires "
                f"neurons_per_hidden_layer ({neurons_per_hidden_layer}) to equal "
                f"num_inputs ({num_inputs})")

    @staticmethod
    def count_weights(num_inputs: int, num_outputs: int,
                      num_hidden_layers: int, neurons_per_hidden_layer: int) -> int:
        """Number of weights in a network of the given shape (the genome size)."""
        hidden = num_hidden_layers * neurons_per_hidden_layer * (num_inputs + 1)
        output = num_outputs * (neurons_per_hidden_layer + 1)
        return hidden + output

    @property
    def num_inputs(self) -> int:
        return self._num_inputs

    @property
    def num_outputs(self) -> int:
        return self._num_outputs

    @property
    def num_hidden_layers(self) -> int:
        return self._num_hidden_layers

    @property
    def neurons_per_hidden_layer(self) -> int:
        return self._neurons_per_hidden_layer

    @property
    def layers(self) -> list[NeuronLayer]:
        """The hidden layers followed by the output layer."""
        return self._layers

    @property
    def number_of_weights(self) -> int:
        """Total number of weights in the network, bias weights included."""
        return sum(layer.number_of_weights for layer in self._layers)

    @staticmethod
    def _check_index(index: int, length: int, name: str):
        if not 0 <= index < length:
            raise IndexError(f"{name} index {index} out of range [0, {length})")

    def _get_neuron(self, layer: int, neuron: int) -> Neuron:
        self._check_index(layer, len(self._layers), "layer")
        neurons = self._layers[layer].neurons
        self._check_index(neuron, len(neurons), "neuron")
        return neurons[neuron]

    def get_weight(self, layer: int, neuron: int, input_idx: int) -> float:
        """
        Return the weight of a given input of a given neuron.
        The input index equal to the neuron's number of inputs addresses its bias weight.

        Raises:
            IndexError: if any of the indices is out of range
        """
        target = self._get_neuron(layer, neuron)
        self._check_index(input_idx, target.size, "input")
        return float(target.weights[input_idx])

    def get_weights(self) -> np.ndarray:
        """
        Return all weights in layer-major, neuron-major, weight-minor order.

        Returns:
            A new array; modifying it does not affect the network
        """
        return np.concatenate([neuron.weights for layer in self._layers for neuron in layer.neurons])

    def put_weight(self, layer: int, neuron: int, input_idx: int, value: float) -> bool:
        """
        Replace the weight of a given input of a given neuron.

        Returns:
            True if the weight was replaced, False if any index is out of range
        """
        try:
            target = self._get_neuron(layer, neuron)
            self._check_index(input_idx, target.size, "input")
        except IndexError as error:
            logger.debug("put_weight rejected: {}", error)
            return False

        target.weights[input_idx] = value
        return True

    def put_weights(self, weights: Sequence[float]) -> bool:
        """
        Replace every weight in the network, reading 'weights' in the same
        order produced by 'get_weights'. Values are copied, not aliased.

        Values beyond 'number_of_weights' are ignored. If the vector is too
        short the network is left unchanged.

        Returns:
            True if all weights were replaced, False if the vector is too short
            or not a flat sequence of numbers
        """
        try:
            weights = np.asarray(weights, dtype=np.float64)
        except (TypeError, ValueError):
            logger.debug("put_weights rejected: weights are not numeric")
            return False

        required = self.number_of_weights
        if weights.ndim != 1 or weights.shape[0] < required:
            logger.debug("put_weights rejected: expected {} weights, got shape {}", required, weights.shape)
            return False

        offset = 0
        for layer in self._layers:
            for neuron in layer.neurons:
                neuron.weights[:] = weights[offset:offset + neuron.size]
                offset += neuron.size
        return True

    def update(self, inputs: Sequence[float]) -> Optional[np.ndarray]:
        """
        Perform a forward pass through the network.

        Each layer's outputs become the next layer's inputs; the outputs of
        the final layer are returned.

        Parameters:
            inputs: the network inputs, a vector of length 'num_inputs'

        Returns:
            The network outputs (a vector of length 'num_outputs'),
            or None if the number of inputs is wrong
        """
        values = np.asarray(inputs, dtype=np.float64)
        if values.ndim != 1 or values.shape[0] != self._num_inputs:
            return None

        for layer in self._layers:
            values = layer.forward_pass(values, self.bias, self._activation, self.activation_response)

        return values

    def __str__(self):
        lines = []
        for layer_idx, layer in enumerate(self._layers):
            kind = "output" if layer_idx == len(self._layers) - 1 else "hidden"
            lines.append(f"Layer {layer_idx} ({kind}):")
            for neuron_idx, neuron in enumerate(layer.neurons):
                weights = ", ".join(f"{w:+.2f}" for w in neuron.weights[:-1])
                lines.append(f"  Neuron {neuron_idx}: w=[{weights}], bias_w={neuron.bias_weight:+.2f}")
        return "\n".join(lines)

    def __repr__(self):
        return (f"Network(inputs={self._num_inputs}, "
                f"outputs={self._num_outputs}, "
                f"hidden_layers={self._num_hidden_layers}, "
                f"neurons_per_hidden_layer={self._neurons_per_hidden_layer}, "
                f"weights={self.number_of_weights})")
