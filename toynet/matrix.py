from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from . import operators
from .fast_ops import FastOps, add_scalar_map, scale_map
from .matrix_data import MatrixData, check_dimension

if TYPE_CHECKING:
    from typing import Any, Callable, List, Optional, Sequence, Tuple, Union

    import numpy.typing as npt

    from .matrix_data import Storage, UserIndex, UserShape


class Matrix:
    """A dense two-dimensional table of float64 values stored row-major.

    Element (i, j) lives at flat position ``i * cols + j``. Every matrix owns
    its buffer; nothing hands out views into it.
    """

    _matrix: MatrixData

    def __init__(self, rows: int, cols: int, data: Optional[MatrixData] = None):
        """Creates a zero-filled `rows x cols` matrix."""
        if data is None:
            rows = check_dimension("rows", rows)
            cols = check_dimension("cols", cols)
            data = MatrixData(np.zeros(rows * cols, dtype=np.float64), rows, cols)
        self._matrix = data

    @staticmethod
    def from_values(
        rows: int, cols: int, values: Union[Storage, Sequence[float]]
    ) -> Matrix:
        """Creates a matrix from a flat row-major sequence of `rows * cols` values.

        Raises:
        ------
            ShapeMismatch: when `len(values) != rows * cols` or `values` is nested.

        """
        storage = np.array(values, dtype=np.float64)
        return Matrix(rows, cols, MatrixData(storage, rows, cols))

    @staticmethod
    def column(values: Sequence[float]) -> Matrix:
        """Creates a `len(values) x 1` column matrix."""
        return Matrix.from_values(len(values), 1, values)

    @staticmethod
    def from_numpy(array: npt.ArrayLike) -> Matrix:
        """Creates a matrix from a 2-D array, copying it."""
        arr = np.array(array, dtype=np.float64)
        if arr.ndim != 2:
            raise ValueError(f"Expected a 2-D array, got shape {arr.shape}.")
        return Matrix.from_values(arr.shape[0], arr.shape[1], arr.reshape(-1))

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Converts the matrix to a 2-D numpy array (a copy)."""
        return self._matrix._storage.copy().reshape(self.shape)

    @property
    def rows(self) -> int:
        """Returns the number of rows."""
        return self._matrix.rows

    @property
    def cols(self) -> int:
        """Returns the number of columns."""
        return self._matrix.cols

    @property
    def shape(self) -> UserShape:
        """Returns `(rows, cols)`."""
        return self._matrix.shape

    @property
    def size(self) -> int:
        """Returns the number of elements."""
        return self._matrix.size

    def data(self) -> List[float]:
        """Returns a copy of the flat row-major buffer."""
        return self._matrix._storage.tolist()

    def get(self, row: int, col: int) -> float:
        """Returns the value at (row, col).

        Raises:
        ------
            IndexOutOfRange: when the position is outside the matrix.

        """
        return self._matrix.get(row, col)

    def set(self, row: int, col: int, value: float) -> None:
        """Sets the value at (row, col)."""
        self._matrix.set(row, col, value)

    def __getitem__(self, key: UserIndex) -> float:
        row, col = key
        return self.get(row, col)

    def __setitem__(self, key: UserIndex, value: float) -> None:
        row, col = key
        self.set(row, col, value)

    def tuple(self) -> Tuple[Storage, int, int]:
        """Returns the matrix's storage, rows and cols as a tuple."""
        return self._matrix.tuple()

    def zeros(self, shape: Optional[UserShape] = None) -> Matrix:
        """Creates a zero-filled matrix, of this matrix's shape by default."""
        rows, cols = self.shape if shape is None else shape
        return Matrix(rows, cols)

    def copy(self) -> Matrix:
        """Returns an independent copy of this matrix."""
        return Matrix(self.rows, self.cols, self._matrix.copy())

    def transform(self, fn: Callable[[float, int, int], float]) -> None:
        """Replaces every element with `fn(value, row, col)`, in place.

        Elements are visited row-major: row 0 left to right, then row 1 and
        so on. `fn` may be any Python callable.
        """
        storage = self._matrix._storage
        for position, (row, col) in enumerate(self._matrix.indices()):
            storage[position] = fn(float(storage[position]), row, col)

    map = transform

    def apply(self, fn: Callable[[float], float]) -> None:
        """Replaces every element with `fn(value)`, in place.

        `fn` is JIT compiled, so it must be numba-compilable.
        """
        FastOps.map(fn)(self)

    def scale(self, factor: float) -> None:
        """Multiplies every element by `factor`, in place."""
        scale_map(self, factor)

    def add_scalar(self, value: float) -> None:
        """Adds `value` to every element, in place."""
        add_scalar_map(self, value)

    @staticmethod
    def multiply(a: Matrix, b: Matrix) -> Matrix:
        """Returns the matrix product `a x b`.

        Raises:
        ------
            DimensionMismatch: when `a.cols != b.rows`.

        """
        return FastOps.matrix_multiply(a, b)

    def __matmul__(self, b: Matrix) -> Matrix:
        return Matrix.multiply(self, b)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self.data() == other.data()

    def is_close(self, other: Matrix) -> bool:
        """Checks that both matrices have the same shape and close values."""
        return self.shape == other.shape and all(
            operators.is_close(x, y) for x, y in zip(self.data(), other.data())
        )

    def __repr__(self) -> str:
        return self._matrix.to_string()
