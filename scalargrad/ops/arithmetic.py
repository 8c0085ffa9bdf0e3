# scalargrad/ops/arithmetic.py
import numpy as np
from typing import Iterable
from ..core.value import Value

_REAL = (int, float, np.integer, np.floating)


def _as_value(x):
    """Ensure x is a Value; otherwise wrap it as a constant leaf."""
    return x if isinstance(x, Value) else Value(x)


# ------------------------------- primitives ------------------------------- #
# Arithmetic is unchecked float64: inf/nan results propagate without warnings.
def add(x, y):
    """out = x + y ; both operands receive out.grad unchanged."""
    x = _as_value(x)
    y = _as_value(y)
    with np.errstate(all="ignore"):
        out = Value(x.data + y.data, (x, y), "+")

    def _backward():
        with np.errstate(all="ignore"):
            x.grad += out.grad
            y.grad += out.grad
    out._backward = _backward
    return out


def mul(x, y):
    """out = x * y ; each operand receives the other's value times out.grad."""
    x = _as_value(x)
    y = _as_value(y)
    with np.errstate(all="ignore"):
        out = Value(x.data * y.data, (x, y), "*")

    def _backward():
        with np.errstate(all="ignore"):
            x.grad += y.data * out.grad
            y.grad += x.data * out.grad
    out._backward = _backward
    return out


def pow(x, n):
    """
    Power with a constant exponent:
      out.data = x.data ** n
      ∂out/∂x = n * x^(n-1)

    The exponent is not part of the graph and gets no gradient. Domain errors
    (0 ** negative, negative ** fractional) follow float64 semantics and give
    inf / nan instead of raising.
    """
    if isinstance(n, Value):
        raise TypeError("pow only supports a constant (int/float) exponent, got a Value")
    if isinstance(n, bool) or not isinstance(n, _REAL):
        raise TypeError(f"pow exponent must be int or float, got {type(n)}")
    x = _as_value(x)
    n = np.float64(n)
    with np.errstate(all="ignore"):
        out = Value(np.power(x.data, n), (x,), f"**{n:g}")

    def _backward():
        with np.errstate(all="ignore"):
            x.grad += n * np.power(x.data, n - 1.0) * out.grad
    out._backward = _backward
    return out


# ------------------------------ compositions ------------------------------ #
# Built only from the primitives above; no extra gradient rules.
def neg(x):
    return mul(x, -1.0)


def sub(x, y):
    return add(x, neg(y))


def div(x, y):
    return mul(x, pow(_as_value(y), -1.0))


def add_all(values: Iterable):
    """
    Sum a non-empty iterable of Values (or numbers) with `add`, starting from
    the first element. Unlike builtin sum(), no extra 0.0 leaf enters the graph.
    """
    it = iter(values)
    try:
        total = _as_value(next(it))
    except StopIteration:
        raise ValueError("add_all() requires at least one value") from None
    for v in it:
        total = add(total, v)
    return total
