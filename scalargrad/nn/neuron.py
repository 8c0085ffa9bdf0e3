# scalargrad/nn/neuron.py
from __future__ import annotations
import numpy as np
from typing import List, Optional, Sequence

from ..core.value import Value
from ..ops.arithmetic import add, mul, _as_value
from ..ops.activation import relu
from .module import Module


class Neuron(Module):
    """
    Single neuron: out = relu(b + sum_i w_i * x_i), or linear when nonlin=False.

    Weights are drawn uniformly from [-1, 1); the bias starts at 0.
    """

    def __init__(self, nin: int, nonlin: bool = True, rng: Optional[np.random.Generator] = None):
        if nin < 1:
            raise ValueError(f"Neuron needs at least one input, got nin={nin}")
        rng = rng if rng is not None else np.random.default_rng()
        self.w = [Value(w) for w in rng.uniform(-1.0, 1.0, size=nin)]
        self.b = Value(0.0)
        self.nonlin = nonlin

    def __call__(self, x: Sequence) -> Value:
        if len(x) != len(self.w):
            raise ValueError(f"Neuron expects {len(self.w)} inputs, got {len(x)}")
        act = self.b
        for wi, xi in zip(self.w, x):
            act = add(act, mul(wi, _as_value(xi)))
        return relu(act) if self.nonlin else act

    def parameters(self) -> List[Value]:
        return [self.b] + self.w

    def __repr__(self):
        return f"{'ReLU' if self.nonlin else 'Linear'}Neuron({len(self.w)})"
