from concurrent.futures import ThreadPoolExecutor

import pytest

from toynet import (
    DEFAULT_BIAS,
    DEFAULT_LEARNING_RATE,
    DimensionMismatch,
    InvalidDimensions,
    Matrix,
    NeuralNet,
    layer_sizes,
    random_uniform,
)
from toynet.operators import sigmoid


def test_topology_with_hidden_layers():
    net = NeuralNet(2, [3, 4, 5], 2)
    assert len(net.weights) == 4
    assert net.shapes == [(3, 2), (4, 3), (5, 4), (2, 5)]


def test_perceptron():
    net = NeuralNet(2, [], 1)
    assert len(net.weights) == 1
    assert net.shapes == [(1, 2)]


def test_defaults():
    net = NeuralNet(3, [2], 1)
    assert net.learning_rate == DEFAULT_LEARNING_RATE == 0.1
    assert net.bias == DEFAULT_BIAS == 1
    assert all(w.data() == [0.0] * w.size for w in net.weights)


def test_layer_sizes():
    assert layer_sizes(2, [3, 4], 1) == [2, 3, 4, 1]
    assert layer_sizes(2, (), 1) == [2, 1]


@pytest.mark.parametrize(
    "input_size, hidden_sizes, output_size",
    [(0, [3], 1), (2, [0], 1), (2, [3], 0), (-1, [], 1), (2, [2.5], 1)],
)
def test_invalid_layer_sizes(input_size, hidden_sizes, output_size):
    with pytest.raises(InvalidDimensions):
        NeuralNet(input_size, hidden_sizes, output_size)


@pytest.mark.parametrize(
    "hidden_sizes, output_size", [([], 1), ([3], 2), ([3, 4, 5], 2), ([1, 7], 4)]
)
def test_output_length(hidden_sizes, output_size):
    net = NeuralNet(2, hidden_sizes, output_size, initializer=random_uniform(seed=3))
    out = net.forward([0.3, -0.7])
    assert len(out) == output_size
    assert all(0.0 < v < 1.0 for v in out)


def test_zero_weights_output_is_fixed():
    # zero weights leave only the bias, so every layer outputs sigmoid(1)
    net = NeuralNet(2, [3], 2)
    assert net.forward([0.0, 0.0]) == pytest.approx([sigmoid(1.0)] * 2)
    assert net.forward([10.0, -4.0]) == net.forward([0.0, 0.0])


def test_forward_matches_manual_computation():
    net = NeuralNet(2, [2], 1)
    net.weights[0] = Matrix.from_values(2, 2, [0.5, -1.0, 2.0, 0.25])
    net.weights[1] = Matrix.from_values(1, 2, [1.5, -0.5])
    x = [1.0, 2.0]

    h = [sigmoid(0.5 * 1.0 - 1.0 * 2.0 + 1), sigmoid(2.0 * 1.0 + 0.25 * 2.0 + 1)]
    expected = sigmoid(1.5 * h[0] - 0.5 * h[1] + 1)
    assert net.forward(x) == pytest.approx([expected])


def test_forward_does_not_mutate_weights():
    net = NeuralNet(2, [3], 1, initializer=random_uniform(seed=7))
    before = [w.data() for w in net.weights]
    first = net.forward([0.1, 0.2])
    assert net.forward([0.1, 0.2]) == first
    assert [w.data() for w in net.weights] == before


def test_forward_rejects_wrong_input_length():
    net = NeuralNet(3, [2], 1)
    with pytest.raises(DimensionMismatch):
        net.forward([1.0, 2.0])


def test_feed_forward_alias():
    net = NeuralNet(2, [], 1)
    assert net.feed_forward([1.0, 1.0]) == net.forward([1.0, 1.0])


def test_random_uniform_is_seeded_and_bounded():
    a = NeuralNet(4, [5], 3, initializer=random_uniform(-0.5, 0.5, seed=11))
    b = NeuralNet(4, [5], 3, initializer=random_uniform(-0.5, 0.5, seed=11))
    assert [w.data() for w in a.weights] == [w.data() for w in b.weights]
    for w in a.weights:
        assert all(-0.5 <= v < 0.5 for v in w.data())
    assert any(v != 0.0 for v in a.weights[0].data())


def test_repr():
    assert repr(NeuralNet(2, [3, 4], 1)) == "NeuralNet(2 -> 3 -> 4 -> 1)"


def test_forward_from_many_threads():
    net = NeuralNet(8, [16, 16], 4, initializer=random_uniform(seed=5))
    expected = net.forward([0.1] * 8)

    def run(_):
        return [net.forward([0.1] * 8) for _ in range(100)]

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(run, range(8)))

    assert all(out == expected for batch in results for out in batch)


def test_package_namespace():
    import types

    import toynet

    assert isinstance(toynet.datasets, types.ModuleType)
    for name in ("random", "np", "logging", "Callable", "zeros"):
        assert not hasattr(toynet, name)
    assert toynet.NeuralNet is NeuralNet
