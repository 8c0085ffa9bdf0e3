"""
Decision-boundary visualization for a trained 2-input model.

Both helpers evaluate the model on a regular grid over [-2, 2]^2 (plotting
widens it to cover the data) and mark where the score is positive.
"""

import numpy as np
import matplotlib
matplotlib.use('Agg')  # Non-interactive backend
import matplotlib.pyplot as plt

from ..core.value import Value


def _score(model, x0: float, x1: float) -> float:
    return float(model([Value(x0), Value(x1)])[0].data)


def ascii_contour(model, bound: int = 20) -> str:
    """
    Text contour: one row per y step (top to bottom), '*' where the score is
    positive and '.' elsewhere. Grid is 2*bound x 2*bound cells over [-2, 2]^2.
    """
    rows = []
    for yi in range(-bound, bound):
        row = []
        for xi in range(-bound, bound):
            s = _score(model, xi / bound * 2.0, -yi / bound * 2.0)
            row.append("*" if s > 0.0 else ".")
        rows.append(" ".join(row))
    return "\n".join(rows)


def plot_decision_boundary(model, X: np.ndarray, y: np.ndarray, h: float = 0.25,
                           save_path=None):
    """
    Filled contour of sign(score) with the data points on top.

    Args:
        model: callable taking a list of 2 Values and returning a list of Values
        X, y: data points (n, 2) and labels (n,)
        h: grid step
        save_path: where to save the figure; not saved when None

    Returns:
        The matplotlib Figure (already closed).
    """
    x_min, x_max = X[:, 0].min() - 1, X[:, 0].max() + 1
    y_min, y_max = X[:, 1].min() - 1, X[:, 1].max() + 1
    xx, yy = np.meshgrid(np.arange(x_min, x_max, h), np.arange(y_min, y_max, h))

    Z = np.array([_score(model, a, b) > 0 for a, b in zip(xx.ravel(), yy.ravel())])
    Z = Z.reshape(xx.shape).astype(float)

    fig, ax = plt.subplots(figsize=(6, 5))
    ax.contourf(xx, yy, Z, cmap=plt.cm.Spectral, alpha=0.8)
    ax.scatter(X[:, 0], X[:, 1], c=y, s=40, cmap=plt.cm.Spectral, edgecolors='k')
    ax.set_xlim(xx.min(), xx.max())
    ax.set_ylim(yy.min(), yy.max())
    ax.set_title('MLP decision boundary')

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=150, bbox_inches='tight')
        print(f"\nFigure saved to: {save_path}")

    plt.close(fig)
    return fig
