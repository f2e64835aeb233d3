"""Toy Neural Network Library

This package provides a small dense-matrix library and a feed-forward neural
network built on top of it.

Modules
-------

- `operators`: Scalar operators, including the sigmoid activation and its derivative.
- `errors`: The exceptions raised for bad shapes, sizes and indices.
- `matrix_data`: Handles the flat row-major storage and indexing of matrices.
- `fast_ops`: Provides the elementwise and matrix multiply kernels using numba (only CPU).
- `matrix`: Defines the Matrix object and its operations.
- `network`: Defines the feed-forward NeuralNet and its weight initializers.
- `datasets`: Generators of labelled 2D points to feed a network with.
"""

from .errors import *  # noqa: F401,F403
from .operators import dsigmoid, sigmoid, sigmoid_back  # noqa: F401
from .matrix_data import MatrixData  # noqa: F401
from .matrix import Matrix  # noqa: F401
from .network import *  # noqa: F401,F403
from .datasets import *  # noqa: F401,F403
from . import fast_ops  # noqa: F401
