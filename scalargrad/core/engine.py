# scalargrad/core/engine.py
from __future__ import annotations
from typing import List
from .value import Value


def build_topo(root: Value) -> List[Value]:
    """
    Topological order of every node reachable from `root`.

    Depth-first postorder over `_prev`: a node is emitted only after all of
    its operands, and each node exactly once (visits are deduplicated on
    `uid`, not on value). The root is always the last element.

    Uses an explicit stack instead of recursion so long chains (e.g. a loss
    summed over a whole dataset) do not hit the interpreter recursion limit.
    The emitted order is the same as the recursive formulation.
    """
    topo: List[Value] = []
    visited = set()
    stack = [(root, False)]  # (node, operands already expanded?)

    while stack:
        node, expanded = stack.pop()

        if expanded:
            topo.append(node)
            continue

        if node.uid in visited:
            continue
        visited.add(node.uid)

        # postorder: re-push the node, then its operands on top of it
        stack.append((node, True))
        for child in reversed(node._prev):
            if child.uid not in visited:
                stack.append((child, False))

    return topo


def backward(root: Value) -> None:
    """
    Run a single reverse pass from `root`.

    Seeds root.grad = 1.0 and then invokes each node's propagation rule in
    reverse topological order (consumers before producers), so a node's own
    gradient is complete before it is pushed to its operands.

    Notes:
        - Gradients are NOT reset: calling backward twice on overlapping graphs
          adds the second pass on top of the first. Use `zero_grad` first if
          that is not wanted.
        - Leaves have no rule and are skipped.
    """
    topo = build_topo(root)

    root.grad = 1.0
    for node in reversed(topo):
        if node._backward is not None:
            node._backward()


def zero_grad(root: Value) -> None:
    """Set grad = 0.0 on every node reachable from `root` (root included)."""
    for node in build_topo(root):
        node.grad = 0.0
