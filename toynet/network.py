from __future__ import annotations

import logging
import random
from typing import Callable, List, Optional, Protocol, Sequence, Tuple

import numpy as np

from .errors import DimensionMismatch, InvalidDimensions
from .fast_ops import add_scalar_map, sigmoid_map
from .matrix import Matrix

__all__ = [
    "DEFAULT_BIAS",
    "DEFAULT_LEARNING_RATE",
    "Initializer",
    "NeuralNet",
    "Trainable",
    "layer_sizes",
    "random_uniform",
]

logger = logging.getLogger(__name__)

DEFAULT_LEARNING_RATE = 0.1
DEFAULT_BIAS = 1

Initializer = Callable[[float, int, int], float]


def zeros(value: float, row: int, col: int) -> float:
    """Initializer that leaves every weight at zero."""
    return 0.0


def random_uniform(
    low: float = -1.0, high: float = 1.0, seed: Optional[int] = None
) -> Initializer:
    """Initializer drawing every weight uniformly from [low, high).

    Args:
    ----
        low (float): Lower bound.
        high (float): Upper bound.
        seed (Optional[int]): Seed for a private random generator, for reproducible weights.

    Returns:
    -------
        Initializer: A `transform` callback.

    """
    rng = random.Random(seed)

    def init(value: float, row: int, col: int) -> float:
        return low + (high - low) * rng.random()

    return init


def layer_sizes(
    input_size: int, hidden_sizes: Sequence[int], output_size: int
) -> List[int]:
    """Returns the node count of every layer, input first and output last.

    Raises:
    ------
        InvalidDimensions: when any size is not a positive integer.

    """
    sizes = [input_size, *hidden_sizes, output_size]
    for size in sizes:
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
            raise InvalidDimensions(f"Layer sizes must be integers, got {sizes}.")
        if size <= 0:
            raise InvalidDimensions(f"Layer sizes must be positive, got {sizes}.")
    return [int(size) for size in sizes]


class Trainable(Protocol):
    """Capability of a network whose weights can be fitted to examples.

    Training shares the weight matrices of the inference network and only
    adds the learning rate and an update step on top of them.
    """

    learning_rate: float

    def train(self, inputs: Sequence[float], targets: Sequence[float]) -> None: ...


class NeuralNet:
    """A feed-forward network of fully connected sigmoid layers.

    Data flows from the input layer through every hidden layer to the output
    layer. Each layer transition owns one weight matrix of shape
    (next layer size, previous layer size); a network without hidden layers is
    a single-matrix perceptron.

    Args:
    ----
        input_size (int): Number of input values.
        hidden_sizes (Sequence[int]): Node count of each hidden layer, possibly empty.
        output_size (int): Number of output values.
        initializer (Initializer): `transform` callback run over every freshly
            zeroed weight matrix. Defaults to leaving them at zero.

    Attributes:
    ----------
        weights (List[Matrix]): One matrix per layer transition.
        learning_rate (float): Step size reserved for training.
        bias (int): Constant added to every neuron before activation.

    """

    input_size: int
    hidden_sizes: Tuple[int, ...]
    output_size: int
    weights: List[Matrix]
    learning_rate: float
    bias: int

    def __init__(
        self,
        input_size: int,
        hidden_sizes: Sequence[int] = (),
        output_size: int = 1,
        initializer: Initializer = zeros,
    ):
        sizes = layer_sizes(input_size, hidden_sizes, output_size)
        self.input_size = sizes[0]
        self.hidden_sizes = tuple(sizes[1:-1])
        self.output_size = sizes[-1]
        self.learning_rate = DEFAULT_LEARNING_RATE
        self.bias = DEFAULT_BIAS

        self.weights = []
        for prev, nxt in zip(sizes, sizes[1:]):
            w = Matrix(nxt, prev)
            w.transform(initializer)
            self.weights.append(w)

        logger.debug("Built network %s with weight shapes %s", sizes, self.shapes)

    @property
    def shapes(self) -> List[Tuple[int, int]]:
        """Returns the shape of every weight matrix, in order."""
        return [w.shape for w in self.weights]

    def forward(self, inputs: Sequence[float]) -> List[float]:
        """Propagates `inputs` through the network.

        Each layer multiplies its weights by the previous activations, adds
        the bias and applies the sigmoid. The network itself is not modified.

        Args:
        ----
            inputs (Sequence[float]): Exactly `input_size` values.

        Returns:
        -------
            List[float]: The `output_size` activations of the output layer.

        Raises:
        ------
            DimensionMismatch: when `len(inputs) != input_size`.

        """
        if len(inputs) != self.input_size:
            raise DimensionMismatch(
                f"Expected {self.input_size} inputs, got {len(inputs)}."
            )
        a = Matrix.column(inputs)
        for w in self.weights:
            # the product is a fresh matrix, so the in-place maps never touch weights
            a = Matrix.multiply(w, a)
            add_scalar_map(a, self.bias)
            sigmoid_map(a)
        return a.data()

    feed_forward = forward

    def __repr__(self) -> str:
        sizes = [self.input_size, *self.hidden_sizes, self.output_size]
        return f"NeuralNet({' -> '.join(str(s) for s in sizes)})"
