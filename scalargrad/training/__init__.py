# scalargrad/training/__init__.py

from .config import TrainConfig
from .trainer import loss, train
from .plotting import ascii_contour, plot_decision_boundary

__all__ = [
    "TrainConfig",
    "loss", "train",
    "ascii_contour", "plot_decision_boundary",
]
