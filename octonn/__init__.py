"""A small feed-forward neural network trained with back-propagation."""

__version__ = "0.1.0"
__all__ = ["neuron", "layer", "network", "cli"]