# scalargrad/training/trainer.py
from __future__ import annotations
import time
import numpy as np
from typing import List, Tuple

from ..core.value import Value
from ..core.engine import backward
from ..ops.arithmetic import add_all, mul
from ..ops.activation import relu
from .config import TrainConfig


def loss(model, X: np.ndarray, y: np.ndarray, alpha: float = 1e-4) -> Tuple[Value, float]:
    """
    SVM max-margin loss with L2 regularization:

        data_loss = mean_i relu(1 - y_i * score_i)
        reg_loss  = alpha * sum_p p^2

    Returns:
        (total_loss, accuracy) where accuracy is the fraction of points whose
        score sign matches the label.
    """
    scores = [model([Value(xi) for xi in row])[0] for row in X]

    losses = [relu(1.0 + -float(yi) * si) for yi, si in zip(y, scores)]
    data_loss = add_all(losses) * (1.0 / len(losses))

    reg_loss = alpha * add_all(mul(p, p) for p in model.parameters())
    total_loss = data_loss + reg_loss

    accuracy = float(np.mean([(yi > 0) == (si.data > 0) for yi, si in zip(y, scores)]))
    return total_loss, accuracy


def train(model, X: np.ndarray, y: np.ndarray, config: TrainConfig) -> List[Tuple[float, float]]:
    """
    Plain SGD on `model`.

    Each step: forward loss, reset parameter grads, backward, then
    p.data -= lr * p.grad for every parameter.

    Returns:
        history: list of (loss, accuracy) per step
    """
    history = []
    t0 = time.time()

    for k in range(config.steps):
        # forward
        total_loss, acc = loss(model, X, y, alpha=config.alpha)

        # backward
        model.zero_grad()
        backward(total_loss)

        # update (sgd)
        lr = config.learning_rate(k)
        for p in model.parameters():
            p.data -= lr * p.grad

        history.append((float(total_loss.data), acc))
        if config.verbose:
            print(f"step {k} loss {total_loss.data:.3f}, accuracy {acc * 100:.2f}%")

    if config.verbose:
        print(f"Trained {config.steps} steps in {time.time() - t0:.2f}s")
    return history
