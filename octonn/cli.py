"""Train a digit classifier on CSV rows of a label followed by pixels."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from octonn.neuron import Neuron
from octonn.network import NeuralNetwork

IMAGE_SIDE = 28
LAYER_SIZES = (IMAGE_SIDE * IMAGE_SIDE, 256, 128, 10)
LEARNING_RATE = 0.1
EPOCHS = 4
LOW_TARGET = 0.1
HIGH_TARGET = 0.9


def parse_line(line: str, size: int) -> tuple[list[float], int]:
    """Split a CSV row into ``size`` pixel activations in [0, 1] and its label."""
    fields = line.rstrip("\n").split(",")
    if len(fields) < size + 1:
        raise ValueError(
            f"expected a label and {size} pixels, got {len(fields)} fields"
        )
    digit = int(fields[0])
    activations = [(int(token) % 256) / 255 for token in fields[1 : size + 1]]
    return activations, digit


def render_layer(neurons: Sequence[Neuron], width: int = IMAGE_SIDE) -> str:
    """Draw active neurons as ``1`` and inactive ones as spaces, row by row."""
    height = len(neurons) // width
    rows = (
        "".join("1" if n.activation > 0 else " " for n in neurons[r * width : (r + 1) * width])
        for r in range(height)
    )
    return "".join(row + "\n" for row in rows)


def main(argv: Sequence[str] | None = None) -> int:
    """Train on a CSV file, printing each expected and predicted digit."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("usage: octonn CSV_FILE [--epochs N]", file=sys.stderr)
        return 1
    parser = argparse.ArgumentParser(prog="octonn", description=__doc__)
    parser.add_argument("csv_file")
    parser.add_argument("--epochs", type=int, default=EPOCHS)
    options = parser.parse_args(args)

    network = NeuralNetwork(LAYER_SIZES, LEARNING_RATE)
    pixels = LAYER_SIZES[0]
    outputs = LAYER_SIZES[-1]
    try:
        for _ in range(options.epochs):
            with open(options.csv_file, encoding="utf-8") as csv:
                for line in csv:
                    if not line.strip():
                        continue
                    inputs, digit = parse_line(line, pixels)
                    ideal = [LOW_TARGET] * outputs
                    ideal[digit] = HIGH_TARGET
                    print(f"expected: {digit} ", end="")
                    activations = network.train(inputs, ideal)
                    print(f"got: {network.result()}")
                    print("".join(f"{a:g}, " for a in activations))
    except OSError as exc:
        print(f"octonn: {exc}", file=sys.stderr)
        return 1
    return 0