import math
import random

import pytest

from octonn.layer import NeuronLayer, glorot_initialize
from octonn.neuron import sigmoid


@pytest.mark.parametrize("size", [1, 5, 64, 784])
def test_glorot_initialize_length_and_range(size):
    random.seed(size)
    weights = glorot_initialize(size)
    limit = math.sqrt(6.0 / (size + 1))
    assert len(weights) == size
    assert all(-limit <= w <= limit for w in weights)


def test_glorot_initialize_empty():
    assert glorot_initialize(0) == []


def test_glorot_initialize_is_random():
    random.seed(3)
    weights = glorot_initialize(50)
    assert len(set(weights)) == 50


def test_input_layer_has_no_parent_and_zero_biases():
    layer = NeuronLayer(4)
    assert len(layer) == 4
    assert layer.parent is None
    assert [n.bias for n in layer] == [0.0] * 4


def test_input_layer_activate_leaves_activations():
    layer = NeuronLayer(3)
    for neuron, value in zip(layer, [0.1, 0.2, 0.3]):
        neuron.activation = value
    layer.activate()
    assert [n.activation for n in layer] == [0.1, 0.2, 0.3]


def test_input_layer_parent_size_raises():
    with pytest.raises(ValueError):
        NeuronLayer(2).parent_size


def test_child_layer_uses_generators():
    parent = NeuronLayer(3)
    requested = []

    def weights(n):
        requested.append(n)
        return [0.5] * n

    child = NeuronLayer(2, parent, lambda: 0.25, weights)
    assert len(child) == 2
    assert child.parent is parent
    assert child.parent_size == 3
    assert requested == [3, 3]
    for neuron in child:
        assert neuron.weights == [0.5, 0.5, 0.5]
        assert neuron.bias == 0.25
        assert neuron.parents is parent.neurons


def test_child_layer_default_weights_are_glorot_bounded():
    random.seed(11)
    parent = NeuronLayer(10)
    child = NeuronLayer(4, parent)
    limit = math.sqrt(6.0 / 11)
    assert all(n.bias == 0.0 for n in child)
    assert all(len(n.weights) == 10 for n in child)
    assert all(-limit <= w <= limit for n in child for w in n.weights)


def test_activate_computes_from_parent_activations():
    parent = NeuronLayer(3)
    inputs = [0.2, 0.3, 0.4]
    for neuron, value in zip(parent, inputs):
        neuron.activation = value
    child = NeuronLayer(2, parent, generate_weights=lambda n: [1.0] * n)
    child.activate(lambda x: x)
    for neuron in child:
        assert neuron.activation == pytest.approx(sum(inputs))


def test_activate_defaults_to_sigmoid():
    parent = NeuronLayer(1)
    parent[0].activation = 1.0
    child = NeuronLayer(1, parent, lambda: 0.0, lambda n: [-0.75] * n)
    child.activate()
    assert child[0].activation == sigmoid(-0.75)


def test_most_activated_returns_highest():
    layer = NeuronLayer(4)
    for neuron, value in zip(layer, [0.1, 0.7, 0.3, 0.2]):
        neuron.activation = value
    neuron, index = layer.most_activated()
    assert index == 1
    assert neuron is layer[1]


def test_most_activated_prefers_first_on_tie():
    layer = NeuronLayer(3)
    for neuron, value in zip(layer, [0.2, 0.9, 0.9]):
        neuron.activation = value
    assert layer.most_activated()[1] == 1


def test_most_activated_empty_layer_raises():
    with pytest.raises(IndexError):
        NeuronLayer(0).most_activated()


def test_negative_size_raises():
    with pytest.raises(ValueError):
        NeuronLayer(-1)