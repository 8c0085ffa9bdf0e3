import numpy as np
import pytest

from scalargrad.data import read_csv_file, make_moons, load_moons_data


def test_make_moons_shape_and_labels():
    X, y = make_moons(50, noise=0.1, rng=np.random.default_rng(0))
    assert X.shape == (50, 2)
    assert y.shape == (50,)
    assert set(np.unique(y)) == {-1.0, 1.0}
    assert (y == -1).sum() == 25


def test_make_moons_is_reproducible():
    X1, y1 = make_moons(30, rng=np.random.default_rng(7))
    X2, y2 = make_moons(30, rng=np.random.default_rng(7))
    np.testing.assert_array_equal(X1, X2)
    np.testing.assert_array_equal(y1, y2)


def test_make_moons_without_noise_lies_on_circles():
    X, y = make_moons(20, noise=0.0, rng=np.random.default_rng(0))
    outer = X[y == -1]
    np.testing.assert_allclose(np.hypot(outer[:, 0], outer[:, 1]), 1.0)


def test_make_moons_rejects_tiny_sample():
    with pytest.raises(ValueError):
        make_moons(1)


def test_read_csv_file(tmp_path):
    path = tmp_path / "moons.csv"
    path.write_text("x,y,label\n0.5,1.0,1\n-0.25,0.0,-1\n")
    X, y = read_csv_file(path)
    np.testing.assert_allclose(X, [[0.5, 1.0], [-0.25, 0.0]])
    np.testing.assert_allclose(y, [1.0, -1.0])

    X2, y2 = load_moons_data(path)
    np.testing.assert_allclose(X2, X)


def test_read_csv_file_missing_column(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("x,y\n0.5,1.0\n")
    with pytest.raises(ValueError, match="label"):
        read_csv_file(path)


def test_load_moons_data_generates_when_no_path():
    X, y = load_moons_data(n_samples=10, rng=np.random.default_rng(0))
    assert X.shape == (10, 2)
