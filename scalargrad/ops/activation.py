# scalargrad/ops/activation.py
import numpy as np
from ..core.value import Value
from .arithmetic import _as_value


def relu(x):
    """
    Rectified linear unit: out = max(0, x).

    Gradient passes through only when x > 0; at exactly 0 the local
    derivative is taken as 0. A nan input maps to 0 as well (the strict
    `> 0` test fails for nan).
    """
    x = _as_value(x)
    out = Value(x.data if x.data > 0 else 0.0, (x,), "ReLU")

    def _backward():
        if x.data > 0:
            with np.errstate(all="ignore"):
                x.grad += out.grad
    out._backward = _backward
    return out
