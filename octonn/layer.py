"""Layers of neurons and the Glorot weight initialiser."""

from __future__ import annotations

import math
import random
from typing import Callable, Iterator, Sequence

from octonn.neuron import ActivationFunction, Neuron, sigmoid

BiasGenerator = Callable[[], float]
WeightGenerator = Callable[[int], Sequence[float]]


def glorot_initialize(size: int) -> list[float]:
    """Return ``size`` weights drawn uniformly from the Glorot range."""
    limit = math.sqrt(6.0 / (size + 1))
    return [random.uniform(-limit, limit) for _ in range(size)]


def _zero_bias() -> float:
    return 0.0


class NeuronLayer:
    """A layer of neurons, each connected to every neuron of the parent layer.

    A layer without a parent is an input layer: its activations are set
    directly and activating it does nothing.
    """

    def __init__(
        self,
        size: int,
        parent: NeuronLayer | None = None,
        generate_bias: BiasGenerator = _zero_bias,
        generate_weights: WeightGenerator = glorot_initialize,
    ) -> None:
        if size < 0:
            raise ValueError(f"layer size must not be negative, got {size}")
        self.parent = parent
        if parent is None:
            self.neurons = [Neuron() for _ in range(size)]
        else:
            self.neurons = [
                Neuron(
                    parent.neurons,
                    list(generate_weights(len(parent))),
                    generate_bias(),
                )
                for _ in range(size)
            ]

    def __len__(self) -> int:
        return len(self.neurons)

    def __iter__(self) -> Iterator[Neuron]:
        return iter(self.neurons)

    def __getitem__(self, index: int) -> Neuron:
        return self.neurons[index]

    @property
    def parent_size(self) -> int:
        """Number of neurons in the parent layer."""
        if self.parent is None:
            raise ValueError("an input layer has no parent")
        return len(self.parent)

    def activate(self, activation_function: ActivationFunction = sigmoid) -> None:
        """Activate every neuron from the parent layer's activations."""
        if self.parent is None:
            return
        for neuron in self.neurons:
            neuron.activate(activation_function)

    def most_activated(self) -> tuple[Neuron, int]:
        """Return the neuron with the highest activation and its index.

        On ties the first such neuron wins.
        """
        if not self.neurons:
            raise IndexError("an empty layer has no most activated neuron")
        index = max(range(len(self.neurons)), key=lambda i: self.neurons[i].activation)
        return self.neurons[index], index