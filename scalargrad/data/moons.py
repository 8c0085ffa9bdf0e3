"""
Two-moons dataset

Loads the classic two interleaving half-circles either from a CSV file
(columns x, y, label) or from a numpy generator. Labels are -1 / +1 so they
can be used directly in a max-margin loss.
"""

import numpy as np
import pandas as pd
from pathlib import Path
from typing import Optional, Tuple

REQUIRED_COLUMNS = ("x", "y", "label")


def read_csv_file(filepath) -> Tuple[np.ndarray, np.ndarray]:
    """
    Read a moons CSV with a header row.

    Returns:
        X: (n, 2) float64 array of points
        y: (n,) float64 array of labels
    """
    df = pd.read_csv(Path(filepath))

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"{filepath}: missing column(s) {missing}, found {list(df.columns)}")

    X = df[["x", "y"]].to_numpy(dtype=np.float64)
    y = df["label"].to_numpy(dtype=np.float64)
    return X, y


def make_moons(n_samples: int = 100, noise: float = 0.1,
               rng: Optional[np.random.Generator] = None) -> Tuple[np.ndarray, np.ndarray]:
    """
    Generate two interleaving half-circles.

    Args:
        n_samples: Total number of points (split as evenly as possible)
        noise: Std of the Gaussian noise added to every coordinate
        rng: numpy Generator; a fresh default one when omitted

    Returns:
        X: (n_samples, 2) points
        y: (n_samples,) labels in {-1, +1}
    """
    if n_samples < 2:
        raise ValueError(f"n_samples must be >= 2, got {n_samples}")
    rng = rng if rng is not None else np.random.default_rng()

    n_out = n_samples // 2
    n_in = n_samples - n_out

    t_out = np.linspace(0.0, np.pi, n_out)
    t_in = np.linspace(0.0, np.pi, n_in)

    outer = np.column_stack([np.cos(t_out), np.sin(t_out)])
    inner = np.column_stack([1.0 - np.cos(t_in), 1.0 - np.sin(t_in) - 0.5])

    X = np.vstack([outer, inner])
    y = np.concatenate([-np.ones(n_out), np.ones(n_in)])

    if noise > 0:
        X = X + rng.normal(scale=noise, size=X.shape)

    perm = rng.permutation(n_samples)
    return X[perm], y[perm]


def load_moons_data(filepath=None, n_samples: int = 100, noise: float = 0.1,
                    rng: Optional[np.random.Generator] = None) -> Tuple[np.ndarray, np.ndarray]:
    """Load from `filepath` when given, otherwise generate with `make_moons`."""
    if filepath is not None:
        return read_csv_file(filepath)
    return make_moons(n_samples=n_samples, noise=noise, rng=rng)
