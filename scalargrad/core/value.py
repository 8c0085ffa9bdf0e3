# scalargrad/core/value.py
from __future__ import annotations
import itertools
import numpy as np
from typing import Any, Callable, Optional, Tuple

# Process-wide identity source; a node's uid never changes and is never reused.
_uid_counter = itertools.count()


class Value:
    """
    One scalar node of the computation graph.

    Attributes
    ----------
    data : np.float64
        Forward result of the operation that produced this node (or the literal,
        for leaves). Writable so that training can overwrite parameters in place.
    grad : np.float64 | float
        Accumulator for d(root)/d(this node). Starts at 0.0 and is only written
        by `backward` (always with `+=`) or reset explicitly via `zero_grad`.
    uid : int
        Stable identity, independent of `data`. Two nodes holding equal values
        are still distinct nodes.
    label : Optional[str]
        Optional debug/pretty-print name.

    Raises
    ------
    TypeError
        `data` is not a real numeric scalar (bool included).
    OverflowError
        `data` is a Python int outside the float64 range.

    Internal
    --------
    _prev : Tuple[Value, ...]
        Operands in the order the operation defines them (operand 0 is the
        left/base operand).
    _backward : Optional[Callable[[], None]]
        Propagation rule; None for leaves.
    _op : str
        Debug tag of the producing operation ("" for leaves).
    """

    __slots__ = ("data", "grad", "uid", "label", "_prev", "_backward", "_op")

    # numpy scalars on the left (np.float64 * Value) defer to the reflected operators
    __array_ufunc__ = None

    def __init__(self, data: Any, _children: Tuple["Value", ...] = (), _op: str = "",
                 *, label: Optional[str] = None):
        # Only real numeric scalars; bool is an int subclass but never a sensible input
        if isinstance(data, bool) or not isinstance(data, (int, float, np.integer, np.floating)):
            raise TypeError(
                f"Value only accepts real numeric scalars (int, float, numpy scalar), "
                f"but got {type(data)}"
            )
        try:
            self.data = np.float64(float(data))
        except OverflowError:
            # only Python ints can exceed the float64 range here
            raise OverflowError(
                "integer is too large for a float64 Value (|x| > 1.8e308)"
            ) from None
        self.grad = 0.0
        self.uid = next(_uid_counter)
        self.label = label
        self._prev = tuple(_children)
        self._backward: Optional[Callable[[], None]] = None
        self._op = _op

    def __repr__(self):
        return f"Value(data={self.data}, grad={self.grad})"

    @property
    def is_leaf(self) -> bool:
        return not self._prev

    # Operator overloading; every operator is a thin alias of a factory in scalargrad.ops
    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self)

    def __sub__(self, other):
        from ..ops.arithmetic import sub
        return sub(self, other)

    def __rsub__(self, other):
        from ..ops.arithmetic import sub
        return sub(other, self)

    def __mul__(self, other):
        from ..ops.arithmetic import mul
        return mul(self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import mul
        return mul(other, self)

    def __truediv__(self, other):
        from ..ops.arithmetic import div
        return div(self, other)

    def __rtruediv__(self, other):
        from ..ops.arithmetic import div
        return div(other, self)

    def __neg__(self):
        from ..ops.arithmetic import neg
        return neg(self)

    def __pow__(self, other):
        from ..ops.arithmetic import pow
        return pow(self, other)

    def relu(self):
        from ..ops.activation import relu
        return relu(self)

    def backward(self):
        from .engine import backward
        backward(self)
