# scalargrad/__init__.py
# Scalar reverse-mode automatic differentiation

from .core.value import Value
from .core.engine import build_topo, backward, zero_grad
from .ops import add, mul, pow, neg, sub, div, add_all, relu

__version__ = "0.1.0"

__all__ = [
    # Core
    'Value',
    'build_topo',
    'backward',
    'zero_grad',
    # Ops
    'add',
    'mul',
    'pow',
    'neg',
    'sub',
    'div',
    'add_all',
    'relu',
]
