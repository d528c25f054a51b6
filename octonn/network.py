"""A fully connected feed-forward network trained by backpropagation."""

from __future__ import annotations

from typing import Iterable, Sequence, TextIO

from octonn.layer import (
    BiasGenerator,
    NeuronLayer,
    WeightGenerator,
    _zero_bias,
    glorot_initialize,
)
from octonn.neuron import ActivationFunction, sigmoid, sigmoid_derivative


def _format_number(value: float) -> str:
    return format(value, "g")


def _fields(line: str) -> list[str]:
    tokens = line.rstrip("\n").split(",")
    if tokens and tokens[-1] == "":
        tokens.pop()
    return tokens


class NeuralNetwork:
    """Layers of sigmoid neurons, the first of which takes the input."""

    def __init__(
        self,
        layer_sizes: Sequence[int],
        learning_rate: float,
        activation_function: ActivationFunction = sigmoid,
        activation_derivative: ActivationFunction = sigmoid_derivative,
        generate_bias: BiasGenerator = _zero_bias,
        generate_weights: WeightGenerator = glorot_initialize,
    ) -> None:
        sizes = list(layer_sizes)
        if not sizes:
            raise ValueError("a network needs at least one layer")
        self.learning_rate = learning_rate
        self.activation_function = activation_function
        self.activation_derivative = activation_derivative
        self.generate_bias = generate_bias
        self.generate_weights = generate_weights
        self.layers = self._build(sizes)

    def _build(self, sizes: list[int]) -> list[NeuronLayer]:
        layers = [NeuronLayer(sizes[0])]
        for size in sizes[1:]:
            layers.append(
                NeuronLayer(size, layers[-1], self.generate_bias, self.generate_weights)
            )
        return layers

    @property
    def layer_sizes(self) -> list[int]:
        """Sizes of the layers, input first."""
        return [len(layer) for layer in self.layers]

    def _output(self) -> list[float]:
        return [neuron.activation for neuron in self.layers[-1]]

    def run(self, inputs: Iterable[float]) -> list[float]:
        """Feed ``inputs`` forward and return the output activations."""
        values = list(inputs)
        input_layer = self.layers[0]
        if len(values) != len(input_layer):
            raise ValueError(
                f"expected {len(input_layer)} inputs, got {len(values)}"
            )
        for neuron, value in zip(input_layer, values):
            neuron.activation = value
        for layer in self.layers:
            layer.activate(self.activation_function)
        return self._output()

    def train(
        self, inputs: Iterable[float], ideal_output: Sequence[float]
    ) -> list[float]:
        """Run one input, update weights toward ``ideal_output``.

        Returns the output activations computed before the update.
        """
        ideal = list(ideal_output)
        output_layer = self.layers[-1]
        if len(ideal) != len(output_layer):
            raise ValueError(
                f"expected {len(output_layer)} ideal outputs, got {len(ideal)}"
            )
        self.run(inputs)
        derivative = self.activation_derivative
        deltas = [
            (neuron.activation - target) * derivative(neuron.weighted_sum)
            for neuron, target in zip(output_layer, ideal)
        ]
        self._back_propagate(deltas)
        return self._output()

    def _back_propagate(self, deltas: list[float]) -> None:
        rate = self.learning_rate
        derivative = self.activation_derivative
        layer = self.layers[-1]
        while layer.parent is not None:
            parent = layer.parent
            parent_activations = [neuron.activation for neuron in parent]
            for neuron, delta in zip(layer, deltas):
                step = rate * delta
                neuron.bias -= step
                updated = [
                    weight - step * activation
                    for weight, activation in zip(neuron.weights, parent_activations)
                ]
                neuron.weights[: len(updated)] = updated
            if parent.parent is None:
                return
            columns = zip(*(neuron.weights for neuron in layer))
            deltas = [
                sum(delta * weight for delta, weight in zip(deltas, column))
                * derivative(parent_neuron.weighted_sum)
                for parent_neuron, column in zip(parent, columns)
            ]
            layer = parent

    def result(self) -> int:
        """Index of the most activated output neuron."""
        return self.layers[-1].most_activated()[1]

    def reset_weights_and_biases(self) -> None:
        """Rebuild every layer with freshly generated weights and biases."""
        self.layers = self._build(self.layer_sizes)

    def write(self, stream: TextIO) -> None:
        """Write layer sizes, then one line of bias and weights per neuron."""
        stream.write("".join(f"{size}," for size in self.layer_sizes) + "\n")
        for layer in self.layers:
            if layer.parent is None:
                continue
            width = len(layer.parent)
            for neuron in layer:
                values = [neuron.bias, *neuron.weights[:width]]
                stream.write("".join(f"{_format_number(v)}," for v in values) + "\n")

    def read(self, stream: TextIO) -> None:
        """Load biases and weights written by :meth:`write`.

        The stored layer sizes must match this network's.
        """
        header = stream.readline()
        if not header:
            raise ValueError("missing layer sizes")
        sizes = [int(token) for token in _fields(header)]
        if sizes != self.layer_sizes:
            raise ValueError(
                f"stored layer sizes {sizes} do not match {self.layer_sizes}"
            )
        parsed = []
        for layer_index, layer in enumerate(self.layers):
            if layer.parent is None:
                continue
            needed = 1 + len(layer.parent)
            for neuron_index, neuron in enumerate(layer):
                line = stream.readline()
                if not line:
                    raise ValueError(
                        f"missing data for neuron {neuron_index} of layer {layer_index}"
                    )
                tokens = _fields(line)
                if len(tokens) < needed:
                    raise ValueError(
                        f"neuron {neuron_index} of layer {layer_index} needs "
                        f"{needed} values, got {len(tokens)}"
                    )
                values = [float(token) for token in tokens[:needed]]
                parsed.append((neuron, values[0], values[1:]))
        for neuron, bias, weights in parsed:
            neuron.bias = bias
            neuron.weights[: len(weights)] = weights