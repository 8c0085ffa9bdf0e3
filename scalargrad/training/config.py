"""
Training configuration

One dataclass holds every knob of a moons training run; the root-level
script maps its argparse flags onto it.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass
class TrainConfig:
    """Settings for an SGD run of an MLP on the two-moons data."""

    hidden_sizes: Tuple[int, ...] = field(default=(16, 16))
    steps: int = 100
    alpha: float = 1e-4          # L2 regularization strength
    lr_start: float = 1.0
    lr_decay: float = 0.9        # lr goes linearly from lr_start to lr_start - lr_decay
    n_samples: int = 100
    noise: float = 0.1
    seed: int = 1337
    data_path: Optional[str] = None
    verbose: bool = True

    def __post_init__(self):
        self.hidden_sizes = tuple(int(h) for h in self.hidden_sizes)
        if any(h < 1 for h in self.hidden_sizes):
            raise ValueError(f"hidden_sizes must be positive, got {self.hidden_sizes}")
        if self.steps < 1:
            raise ValueError(f"steps must be >= 1, got {self.steps}")
        if self.n_samples < 2:
            raise ValueError(f"n_samples must be >= 2, got {self.n_samples}")
        if self.alpha < 0:
            raise ValueError(f"alpha must be >= 0, got {self.alpha}")

    @property
    def layer_sizes(self) -> Tuple[int, ...]:
        """Output sizes for MLP(2, ...): hidden layers then one score."""
        return self.hidden_sizes + (1,)

    def learning_rate(self, k: int) -> float:
        """Linearly decayed learning rate at step k."""
        return self.lr_start - self.lr_decay * k / self.steps
