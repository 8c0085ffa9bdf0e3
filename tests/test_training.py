import numpy as np
import pytest

from scalargrad import Value, mul, backward
from scalargrad.nn import Module, MLP
from scalargrad.data import make_moons
from scalargrad.training import TrainConfig, loss, train, ascii_contour, plot_decision_boundary


class ScaledFirstInput(Module):
    """score = w * x0"""

    def __init__(self, w):
        self.w = Value(w)

    def __call__(self, x):
        return [mul(self.w, x[0])]

    def parameters(self):
        return [self.w]


def test_config_defaults_and_learning_rate():
    config = TrainConfig()
    assert config.layer_sizes == (16, 16, 1)
    assert config.learning_rate(0) == 1.0
    assert config.learning_rate(50) == pytest.approx(0.55)


@pytest.mark.parametrize("kwargs", [
    {"steps": 0},
    {"n_samples": 1},
    {"alpha": -1.0},
    {"hidden_sizes": (4, 0)},
])
def test_config_validation(kwargs):
    with pytest.raises(ValueError):
        TrainConfig(**kwargs)


def test_loss_value_and_gradient():
    model = ScaledFirstInput(2.0)
    X = np.array([[1.0, 0.0], [-1.0, 0.0]])
    y = np.array([1.0, -1.0])

    total, acc = loss(model, X, y, alpha=0.1)
    # both margins are satisfied, only the L2 term remains
    assert total.data == pytest.approx(0.1 * 4.0)
    assert acc == 1.0

    backward(total)
    assert model.w.grad == pytest.approx(2 * 0.1 * 2.0)


def test_loss_counts_margin_violations():
    model = ScaledFirstInput(0.5)
    X = np.array([[1.0, 0.0], [1.0, 0.0]])
    y = np.array([1.0, -1.0])
    total, acc = loss(model, X, y, alpha=0.0)
    # relu(1 - 0.5) + relu(1 + 0.5), averaged
    assert total.data == pytest.approx((0.5 + 1.5) / 2)
    assert acc == 0.5


def test_train_applies_sgd_update():
    rng = np.random.default_rng(0)
    X, y = make_moons(10, rng=rng)
    model = MLP(2, [4, 1], rng=rng)
    before = [p.data for p in model.parameters()]

    config = TrainConfig(hidden_sizes=(4,), steps=1, verbose=False)
    history = train(model, X, y, config)

    assert len(history) == 1
    loss_value, acc = history[0]
    assert np.isfinite(loss_value)
    assert 0.0 <= acc <= 1.0
    for old, p in zip(before, model.parameters()):
        assert p.data == pytest.approx(old - config.learning_rate(0) * p.grad)


def test_train_reduces_loss():
    rng = np.random.default_rng(0)
    X, y = make_moons(20, rng=rng)
    model = MLP(2, [8, 1], rng=rng)

    history = train(model, X, y, TrainConfig(hidden_sizes=(8,), steps=5, verbose=False))

    losses = [h[0] for h in history]
    assert len(losses) == 5
    assert losses[1] < losses[0]
    assert losses[-1] < losses[0]


def test_train_prints_progress(capsys):
    rng = np.random.default_rng(1)
    X, y = make_moons(6, rng=rng)
    model = MLP(2, [2, 1], rng=rng)
    train(model, X, y, TrainConfig(hidden_sizes=(2,), steps=2))
    out = capsys.readouterr().out
    assert "step 0 loss" in out
    assert "step 1 loss" in out


def test_ascii_contour():
    grid = ascii_contour(ScaledFirstInput(1.0), bound=3).splitlines()
    assert len(grid) == 6
    # columns run x = -2 .. 2; positive score only right of 0
    assert grid[0] == ". . . . * *"


def test_plot_decision_boundary(tmp_path):
    X, y = make_moons(20, rng=np.random.default_rng(0))
    path = tmp_path / "boundary.png"
    plot_decision_boundary(ScaledFirstInput(1.0), X, y, h=0.5, save_path=path)
    assert path.exists()
