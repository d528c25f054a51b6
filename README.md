# octonn

octonn is a small neural network library with no dependencies. It builds a
fully connected feed-forward network of sigmoid neurons and trains it with plain
stochastic gradient descent and back-propagation. It can write the biases and
weights to a text stream and read them back.

## Installation

```
pip install .
```

## Library use

```python
from octonn.network import NeuralNetwork

net = NeuralNetwork([4, 8, 3], learning_rate=0.1)

outputs = net.train([0.0, 0.5, 1.0, 0.25], [0.1, 0.9, 0.1])
print(outputs)        # output activations after the weight update
print(net.result())   # index of the most activated output neuron

print(net.run([0.0, 0.5, 1.0, 0.25]))

with open("weights.csv", "w") as fh:
    net.write(fh)

with open("weights.csv") as fh:
    net.read(fh)
```

`NeuralNetwork(layer_sizes, learning_rate, activation_function=sigmoid,
activation_derivative=sigmoid_derivative, generate_bias=..., generate_weights=glorot_initialize)`
takes the layer sizes with the input layer first. By default, biases start at
zero and weights come from `glorot_initialize`. It offers the following:

- `run(inputs)` sets the input activations, feeds them forward and returns the
  output activations. It raises `ValueError` if the number of inputs does not
  match the input layer.
- `train(inputs, ideal_output)` runs the input and then updates every bias and
  weight toward `ideal_output`. It raises `ValueError` if the number of ideal
  outputs does not match the output layer.
- `result()` returns the index of the most activated output neuron. On a tie,
  the first of them wins.
- `reset_weights_and_biases()` rebuilds every layer with freshly generated
  values.
- `layer_sizes` gives the layer sizes, and `learning_rate` can be read or
  assigned.
- `write(stream)` and `read(stream)` save and load the network in the format
  described below.

The building blocks can also be used on their own:

- `octonn.neuron` has `sigmoid`, `sigmoid_derivative` and `Neuron`. A `Neuron`
  is a dataclass with the fields `parents`, `weights`, `bias`, `activation` and
  `weighted_sum`. Its `activate(activation_function)` method computes and
  stores the weighted sum and the activation.
- `octonn.layer` has `glorot_initialize(size)` and `NeuronLayer(size, parent=None, ...)`.
  A layer supports `len()`, iteration and indexing. It also has `parent_size`,
  `activate(activation_function)` and `most_activated()`, which returns
  `(neuron, index)`. A layer without a parent is an input layer, and activating
  it does nothing.

### Saved format

The first line lists the layer sizes, each followed by a comma. After that
comes one line for each non-input neuron, taken layer by layer. Each of these
lines holds the neuron's bias followed by its incoming weights, and every value
ends with a comma. Numbers are written with Python's `g` format, which keeps
six significant digits, so a saved network is close to the original but not
bit-exact.

`read` raises `ValueError` in these cases:

- the stored layer sizes differ from the network's;
- the header is missing;
- a neuron line is missing or too short.

Nothing is changed unless the whole stream reads cleanly.

## Command line

The `octonn` command trains a 784-256-128-10 network with learning rate 0.1 on
MNIST-style CSV data. Each line of the file holds the digit label, then 784
pixel values from 0 to 255, separated by commas. Blank lines are skipped.

```
octonn mnist_train.csv
octonn mnist_train.csv --epochs 2
```

By default the command makes four passes over the file. For each sample it
prints the expected digit, the predicted digit and the output activations. If
no file is given, or the file cannot be opened, it exits with status 1.

`octonn.cli` also provides two helpers:

- `parse_line(line, size)` turns one CSV row into pixel activations in [0, 1]
  and a label.
- `render_layer(neurons, width)` draws a layer as rows of `1` and spaces.

## What it does not do

The command only trains. It does not save the trained weights, and it does not
evaluate the network on a separate test set. To save a network, call
`NeuralNetwork.write` from your own code.

## Running the tests

```
pip install .[test]
pytest
```