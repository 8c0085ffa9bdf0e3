import numpy as np
import pytest

from scalargrad import Value, backward
from scalargrad.nn import Neuron, Layer, MLP


def test_linear_neuron_forward():
    n = Neuron(2, nonlin=False, rng=np.random.default_rng(0))
    ws = [p.data for p in n.parameters()]
    z = n([Value(1.0), Value(-2.0)])
    assert z.data == pytest.approx(ws[0] + ws[1] * 1.0 + ws[2] * (-2.0))


def test_relu_neuron_forward_accepts_plain_numbers():
    n = Neuron(2, rng=np.random.default_rng(1))
    ws = [p.data for p in n.parameters()]
    z = n([1.0, -2.0])
    assert z.data == pytest.approx(max(0.0, ws[0] + ws[1] - 2.0 * ws[2]))


def test_neuron_init():
    n = Neuron(5, rng=np.random.default_rng(2))
    assert n.b.data == 0.0
    assert all(-1.0 <= w.data < 1.0 for w in n.w)
    assert len(n.parameters()) == 6
    assert repr(n) == "ReLUNeuron(5)"
    assert repr(Neuron(3, nonlin=False)) == "LinearNeuron(3)"


def test_neuron_input_length_mismatch():
    n = Neuron(2)
    with pytest.raises(ValueError):
        n([1.0])
    with pytest.raises(ValueError):
        Neuron(0)


def test_layer():
    layer = Layer(3, 4, rng=np.random.default_rng(3))
    out = layer([1.0, 2.0, 3.0])
    assert len(out) == 4
    assert len(layer.parameters()) == 4 * 4


def test_mlp_shape_and_parameters():
    model = MLP(2, [16, 16, 1], rng=np.random.default_rng(4))
    assert len(model.parameters()) == (2 * 16 + 16) + (16 * 16 + 16) + (16 + 1)
    assert [n.nonlin for n in model.layers[0].neurons] == [True] * 16
    assert model.layers[-1].neurons[0].nonlin is False
    out = model([0.5, -0.5])
    assert len(out) == 1 and isinstance(out[0], Value)


def test_mlp_rejects_empty_layers():
    with pytest.raises(ValueError):
        MLP(2, [])


def test_zero_grad_resets_parameters():
    model = MLP(2, [4, 1], rng=np.random.default_rng(5))
    out = model([1.0, 2.0])[0]
    backward(out * out + 1.0)
    # the output bias always receives d(out^2)/d(out) = 2*out
    assert model.layers[-1].neurons[0].b.grad == pytest.approx(2 * out.data)
    model.zero_grad()
    assert all(p.grad == 0.0 for p in model.parameters())
