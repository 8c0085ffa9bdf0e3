# scalargrad/nn/module.py
from typing import List
from ..core.value import Value


class Module:
    """Base class for anything that owns trainable leaf Values."""

    def parameters(self) -> List[Value]:
        return []

    def zero_grad(self):
        for p in self.parameters():
            p.grad = 0.0
