"""Single neurons and the sigmoid activation they use by default."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable

ActivationFunction = Callable[[float], float]


def sigmoid(x: float) -> float:
    """Return the logistic sigmoid of ``x``."""
    try:
        return 1.0 / (1.0 + math.exp(-x))
    except OverflowError:
        return 0.0


def sigmoid_derivative(x: float) -> float:
    """Return the derivative of the sigmoid, evaluated at ``x``."""
    fx = sigmoid(x)
    return fx * (1.0 - fx)


@dataclass(eq=False)
class Neuron:
    """A neuron fed by the neurons of a parent layer.

    ``parents`` is shared with the parent layer, so changes to the parent
    activations are seen the next time the neuron is activated.
    """

    parents: list[Neuron] = field(default_factory=list, repr=False)
    weights: list[float] = field(default_factory=list)
    bias: float = 0.0
    activation: float = 0.0
    weighted_sum: float = 0.0

    def activate(self, activation_function: ActivationFunction = sigmoid) -> float:
        """Compute and store the weighted input sum and the activation."""
        if len(self.weights) < len(self.parents):
            raise IndexError(
                f"neuron has {len(self.weights)} weights for {len(self.parents)} parents"
            )
        total = sum(
            parent.activation * weight
            for parent, weight in zip(self.parents, self.weights)
        )
        self.weighted_sum = total + self.bias
        self.activation = activation_function(self.weighted_sum)
        return self.activation