# scalargrad/core/__init__.py

"""
Core public API of scalargrad.

Exports:
    Value      : Scalar graph node (data, grad, operands, propagation rule).
    build_topo : Topological order of the graph reachable from a node.
    backward   : Run one reverse pass, seeding the root's grad with 1.0.
    zero_grad  : Reset grad on every node reachable from a root.
"""

from .value import Value
from .engine import build_topo, backward, zero_grad

__all__ = [
    "Value",
    "build_topo", "backward", "zero_grad",
]
