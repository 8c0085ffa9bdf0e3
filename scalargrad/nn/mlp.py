# scalargrad/nn/mlp.py
from __future__ import annotations
import numpy as np
from typing import List, Optional, Sequence

from ..core.value import Value
from .module import Module
from .neuron import Neuron


class Layer(Module):
    """A row of `nout` independent neurons sharing the same inputs."""

    def __init__(self, nin: int, nout: int, nonlin: bool = True,
                 rng: Optional[np.random.Generator] = None):
        self.neurons = [Neuron(nin, nonlin=nonlin, rng=rng) for _ in range(nout)]

    def __call__(self, x: Sequence) -> List[Value]:
        return [n(x) for n in self.neurons]

    def parameters(self) -> List[Value]:
        return [p for n in self.neurons for p in n.parameters()]

    def __repr__(self):
        return f"Layer of [{', '.join(str(n) for n in self.neurons)}]"


class MLP(Module):
    """
    Multilayer perceptron. Hidden layers use ReLU, the last layer is linear.

    Example
    -------
    model = MLP(2, [16, 16, 1])   # 2 inputs, two hidden layers of 16, 1 output
    score = model([x0, x1])[0]
    """

    def __init__(self, nin: int, nouts: Sequence[int], rng: Optional[np.random.Generator] = None):
        if not nouts:
            raise ValueError("MLP needs at least one layer size")
        rng = rng if rng is not None else np.random.default_rng()
        sz = [nin] + list(nouts)
        n = len(nouts)
        self.layers = [Layer(sz[i], sz[i + 1], nonlin=(i != n - 1), rng=rng) for i in range(n)]

    def __call__(self, x: Sequence) -> List[Value]:
        for layer in self.layers:
            x = layer(x)
        return x

    def parameters(self) -> List[Value]:
        return [p for layer in self.layers for p in layer.parameters()]

    def __repr__(self):
        return f"MLP of [{', '.join(str(layer) for layer in self.layers)}]"
