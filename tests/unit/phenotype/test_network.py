"""
Unit tests for the network module (Neuron, NeuronLayer, Network classes).

Tests cover construction and topology validation, weight accessors and
mutators, the flattening order of the weight vector, and the forward pass.
"""

import pytest
import numpy as np
from neuroevo.activations import relu_activation, sigmoid_activation
from neuroevo.phenotype.network import Neuron, NeuronLayer, Network
from neuroevo.run.config import Config


# ============================================================================
# Test Fixtures
# ============================================================================

@pytest.fixture
def small_network(rng):
    """2 inputs, one hidden layer of 2 neurons, 1 output: 9 weights."""
    return Network(2, 1, 1, 2, rng)


@pytest.fixture
def tiny_network(rng):
    """2 inputs, one hidden layer of 1 neuron, 1 output: 5 weights."""
    return Network(2, 1, 1, 1, rng)


def sigmoid(z):
    return 1.0 / (1.0 + np.exp(-z))


# ============================================================================
# Test Neuron and NeuronLayer
# ============================================================================

class TestNeuron:

    def test_neuron_has_extra_bias_weight(self, rng):
        neuron = Neuron(3, rng)
        assert neuron.num_inputs == 3
        assert neuron.size == 4
        assert neuron.weights.shape == (4,)

    def test_weights_in_unit_interval(self, rng):
        neuron = Neuron(50, rng)
        assert np.all(neuron.weights >= 0.0)
        assert np.all(neuron.weights < 1.0)

    def test_bias_weight_is_last_weight(self, rng):
        neuron = Neuron(2, rng)
        neuron.weights[:] = [0.1, 0.2, 0.3]
        assert neuron.bias_weight == pytest.approx(0.3)


class TestNeuronLayer:

    def test_layer_size_and_weight_count(self, rng):
        layer = NeuronLayer(4, 3, rng)
        assert layer.size == 4
        assert layer.num_inputs == 3
        assert layer.number_of_weights == 16

    def test_forward_pass(self, rng):
        layer = NeuronLayer(2, 2, rng)
        layer.neurons[0].weights[:] = [1.0, 0.0, 0.0]
        layer.neurons[1].weights[:] = [0.0, 1.0, 1.0]

        outputs = layer.forward_pass(np.array([2.0, 3.0]), 1.0, relu_activation, 1.0)

        np.testing.assert_allclose(outputs, [2.0, 4.0])

    def test_forward_pass_applies_response_and_bias(self, rng):
        layer = NeuronLayer(1, 1, rng)
        layer.neurons[0].weights[:] = [1.0, 2.0]

        outputs = layer.forward_pass(np.array([4.0]), 0.5, relu_activation, 2.0)

        # (4 * 1 + 2 * 0.5) / 2
        np.testing.assert_allclose(outputs, [2.5])


# ============================================================================
# Test Network Construction
# ============================================================================

class TestNetworkInit:

    def test_dimensions(self, small_network):
        assert small_network.num_inputs == 2
        assert small_network.num_outputs == 1
        assert small_network.num_hidden_layers == 1
        assert small_network.neurons_per_hidden_layer == 2

    def test_layers(self, small_network):
        hidden, output = small_network.layers
        assert hidden.size == 2
        assert hidden.num_inputs == 2
        assert output.size == 1
        assert output.num_inputs == 2

    def test_number_of_weights(self, small_network):
        # hidden: 2 * (2 + 1), output: 1 * (2 + 1)
        assert small_network.number_of_weights == 9

    def test_count_weights_matches_network(self, rng):
        network = Network(4, 3, 1, 6, rng)
        assert Network.count_weights(4, 3, 1, 6) == network.number_of_weights == 6 * 5 + 3 * 7

    def test_initial_weights_in_unit_interval(self, rng):
        network = Network(5, 3, 1, 8, rng)
        weights = network.get_weights()
        assert np.all(weights >= 0.0)
        assert np.all(weights < 1.0)

    def test_initial_weights_follow_generator_stream(self):
        network = Network(2, 1, 1, 2, np.random.default_rng(7))
        expected = np.random.default_rng(7).random(9)
        np.testing.assert_array_equal(network.get_weights(), expected)

    def test_same_seed_same_network(self):
        network1 = Network(3, 2, 1, 4, np.random.default_rng(1))
        network2 = Network(3, 2, 1, 4, np.random.default_rng(1))
        np.testing.assert_array_equal(network1.get_weights(), network2.get_weights())

    def test_multiple_hidden_layers_with_matching_width(self, rng):
        network = Network(3, 2, 2, 3, rng)
        assert len(network.layers) == 3
        assert network.number_of_weights == 2 * 3 * 4 + 2 * 4

    def test_multiple_hidden_layers_with_mismatched_width_raises(self, rng):
        with pytest.raises(ValueError, match="neurons_per_hidden_layer"):
            Network(2, 1, 2, 3, rng)

    def test_no_hidden_layer_with_matching_width(self, rng):
        network = Network(2, 1, 0, 2, rng)
        assert len(network.layers) == 1
        assert network.number_of_weights == 3

    def test_no_hidden_layer_with_mismatched_width_raises(self, rng):
        with pytest.raises(ValueError):
            Network(2, 1, 0, 3, rng)

    @pytest.mark.parametrize("shape", [(0, 1, 1, 2), (2, 0, 1, 2), (2, 1, 1, 0), (2, 1, -1, 2)])
    def test_invalid_sizes_raise(self, rng, shape):
        with pytest.raises(ValueError):
            Network(*shape, rng)

    def test_zero_activation_response_raises(self, rng):
        with pytest.raises(ValueError, match="activation_response"):
            Network(2, 1, 1, 2, rng, activation_response=0.0)

    def test_from_config(self, rng):
        config = Config()
        config.num_inputs = 3
        config.num_outputs = 2
        config.num_hidden_layers = 1
        config.neurons_per_hidden_layer = 5
        config.activation = 'relu'
        config.bias = -1.0
        config.activation_response = 2.0

        network = Network.from_config(config, rng)

        assert network.num_inputs == 3
        assert network.num_outputs == 2
        assert network.number_of_weights == config.genome_size
        assert network.bias == -1.0
        assert network.activation_response == 2.0

    def test_repr(self, small_network):
        assert repr(small_network) == ("Network(inputs=2, outputs=1, hidden_layers=1, "
                                       "neurons_per_hidden_layer=2, weights=9)")


# ============================================================================
# Test Weight Accessors and Mutators
# ============================================================================

class TestNetworkWeights:

    def test_get_weight(self, small_network):
        small_network.layers[1].neurons[0].weights[2] = 0.75
        assert small_network.get_weight(1, 0, 2) == 0.75

    @pytest.mark.parametrize("index", [(2, 0, 0), (0, 2, 0), (0, 0, 3), (-1, 0, 0), (0, -1, 0), (0, 0, -1)])
    def test_get_weight_out_of_range_raises(self, small_network, index):
        with pytest.raises(IndexError):
            small_network.get_weight(*index)

    def test_get_weights_order(self, small_network):
        small_network.put_weights(np.arange(9, dtype=float))

        # layer-major, neuron-major, weight-minor
        assert small_network.get_weight(0, 0, 0) == 0.0
        assert small_network.get_weight(0, 0, 2) == 2.0
        assert small_network.get_weight(0, 1, 0) == 3.0
        assert small_network.get_weight(0, 1, 2) == 5.0
        assert small_network.get_weight(1, 0, 0) == 6.0
        assert small_network.get_weight(1, 0, 2) == 8.0

    def test_get_weights_returns_copy(self, small_network):
        weights = small_network.get_weights()
        weights[:] = -1.0
        assert np.all(small_network.get_weights() >= 0.0)

    def test_put_weight(self, small_network):
        assert small_network.put_weight(0, 1, 2, -3.5) is True
        assert small_network.get_weight(0, 1, 2) == -3.5

    @pytest.mark.parametrize("index", [(2, 0, 0), (0, 2, 0), (0, 0, 3), (-1, 0, 0), (0, 0, -1)])
    def test_put_weight_out_of_range_returns_false(self, small_network, index):
        before = small_network.get_weights()
        assert small_network.put_weight(*index, 9.0) is False
        np.testing.assert_array_equal(small_network.get_weights(), before)

    def test_put_weights_round_trip(self, small_network, rng):
        weights = rng.normal(size=9)
        assert small_network.put_weights(weights) is True
        np.testing.assert_array_equal(small_network.get_weights(), weights)

    def test_put_weights_accepts_list(self, small_network):
        weights = [float(i) / 10 for i in range(9)]
        assert small_network.put_weights(weights) is True
        np.testing.assert_allclose(small_network.get_weights(), weights)

    def test_put_weights_copies_values(self, small_network):
        weights = np.ones(9)
        small_network.put_weights(weights)
        weights[:] = 5.0
        np.testing.assert_array_equal(small_network.get_weights(), np.ones(9))

    def test_put_weights_too_short_returns_false_and_keeps_weights(self, small_network):
        before = small_network.get_weights()
        assert small_network.put_weights(np.zeros(8)) is False
        np.testing.assert_array_equal(small_network.get_weights(), before)

    def test_put_weights_longer_vector_ignores_extra_values(self, small_network):
        weights = np.arange(12, dtype=float)
        assert small_network.put_weights(weights) is True
        np.testing.assert_array_equal(small_network.get_weights(), weights[:9])

    def test_put_weights_rejects_matrix(self, small_network):
        assert small_network.put_weights(np.zeros((3, 3))) is False

    @pytest.mark.parametrize("weights", [["a"] * 9, [[1.0, 2.0], [3.0]]])
    def test_put_weights_non_numeric_returns_false_and_keeps_weights(self, small_network, weights):
        before = small_network.get_weights()
        assert small_network.put_weights(weights) is False
        np.testing.assert_array_equal(small_network.get_weights(), before)


# ============================================================================
# Test Forward Pass
# ============================================================================

class TestNetworkUpdate:

    def test_wrong_input_length_returns_none(self, small_network):
        assert small_network.update([1.0]) is None
        assert small_network.update([1.0, 2.0, 3.0]) is None

    def test_two_dimensional_input_returns_none(self, small_network):
        assert small_network.update([[1.0, 2.0]]) is None

    def test_output_length(self, rng):
        network = Network(3, 4, 1, 5, rng)
        outputs = network.update([0.1, 0.2, 0.3])
        assert outputs.shape == (4,)

    def test_outputs_in_open_unit_interval(self, rng):
        network = Network(3, 4, 1, 5, rng)
        for inputs in rng.normal(size=(20, 3)):
            outputs = network.update(inputs)
            assert np.all(outputs > 0.0)
            assert np.all(outputs < 1.0)

    def test_output_stays_positive_for_large_negative_bias(self, small_network):
        weights = small_network.get_weights()
        weights[8] = -50.0
        small_network.put_weights(weights)

        outputs = small_network.update([0.0, 0.0])

        hidden = sigmoid(weights[[2, 5]])
        expected = sigmoid(weights[6:8] @ hidden - 50.0)
        assert outputs[0] > 0.0
        assert outputs[0] == pytest.approx(expected, rel=1e-9)

    def test_known_weights(self, tiny_network):
        tiny_network.put_weights([0.5, -1.0, 0.25, 2.0, -0.5])

        outputs = tiny_network.update([1.0, 2.0])

        hidden = sigmoid(0.5 * 1.0 - 1.0 * 2.0 + 0.25)
        expected = sigmoid(2.0 * hidden - 0.5)
        assert outputs[0] == pytest.approx(expected)

    def test_activation_response_scales_net_input(self, rng):
        network = Network(2, 1, 1, 1, rng, activation_response=2.0)
        network.put_weights([0.5, -1.0, 0.25, 2.0, -0.5])

        outputs = network.update([1.0, 2.0])

        hidden = sigmoid((0.5 * 1.0 - 1.0 * 2.0 + 0.25) / 2.0)
        expected = sigmoid((2.0 * hidden - 0.5) / 2.0)
        assert outputs[0] == pytest.approx(expected)

    def test_bias_input_multiplies_bias_weight(self, rng):
        network = Network(2, 1, 1, 1, rng, bias=-1.0)
        network.put_weights([0.5, -1.0, 0.25, 2.0, -0.5])

        outputs = network.update([1.0, 2.0])

        hidden = sigmoid(0.5 * 1.0 - 1.0 * 2.0 - 0.25)
        expected = sigmoid(2.0 * hidden + 0.5)
        assert outputs[0] == pytest.approx(expected)

    def test_custom_activation(self, rng):
        network = Network(2, 1, 1, 1, rng, activation=relu_activation)
        network.put_weights([1.0, 1.0, 0.0, 3.0, 1.0])

        outputs = network.update([2.0, 1.0])

        assert outputs[0] == pytest.approx(3.0 * 3.0 + 1.0)

    def test_update_is_deterministic(self, small_network):
        first = small_network.update([0.3, -0.7])
        second = small_network.update([0.3, -0.7])
        np.testing.assert_array_equal(first, second)

    def test_update_does_not_change_weights(self, small_network):
        before = small_network.get_weights()
        small_network.update([0.3, -0.7])
        np.testing.assert_array_equal(small_network.get_weights(), before)

    def test_bias_only_network_ignores_inputs(self, small_network):
        bias = 5.0
        weights = np.zeros(9)
        weights[[2, 5, 8]] = bias
        small_network.put_weights(weights)

        expected = sigmoid(bias * small_network.bias / small_network.activation_response)
        for inputs in ([0.0, 0.0], [1.0, -1.0], [100.0, 250.0]):
            assert small_network.update(inputs)[0] == pytest.approx(expected)

    def test_multiple_hidden_layers_chain(self, rng):
        network = Network(2, 1, 2, 2, rng, activation=relu_activation)
        # each hidden layer passes its inputs through unchanged, the output sums them
        network.put_weights([1.0, 0.0, 0.0,  0.0, 1.0, 0.0,
                             1.0, 0.0, 0.0,  0.0, 1.0, 0.0,
                             1.0, 1.0, 0.0])

        outputs = network.update([2.0, 3.0])

        assert outputs[0] == pytest.approx(5.0)

    def test_default_activation_is_sigmoid(self, tiny_network):
        assert tiny_network._activation is sigmoid_activation
