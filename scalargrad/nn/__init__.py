# scalargrad/nn/__init__.py

from .module import Module
from .neuron import Neuron
from .mlp import Layer, MLP

__all__ = ["Module", "Neuron", "Layer", "MLP"]
