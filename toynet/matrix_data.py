from __future__ import annotations

from typing import Iterable, Sequence, Tuple, Union

import numpy as np
import numpy.typing as npt
from numpy import array, float64
from typing_extensions import TypeAlias

from .errors import IndexOutOfRange, InvalidDimensions, ShapeMismatch

Storage: TypeAlias = npt.NDArray[np.float64]

UserIndex: TypeAlias = Tuple[int, int]
UserShape: TypeAlias = Tuple[int, int]


def index_to_position(row: int, col: int, cols: int) -> int:
    """Convert a (row, col) index to a position in row-major storage."""
    return row * cols + col


def to_index(ordinal: int, cols: int) -> UserIndex:
    """Convert a storage position back to its (row, col) index."""
    return ordinal // cols, ordinal % cols


def check_dimension(name: str, value: int) -> int:
    """Validate a single matrix dimension and return it."""
    # bool is an int subclass but never a valid size
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidDimensions(f"{name} must be an integer, got {value!r}.")
    if value < 0:
        raise InvalidDimensions(f"{name} must be non-negative, got {value}.")
    return int(value)


class MatrixData:
    _storage: Storage
    rows: int
    cols: int
    size: int

    def __init__(
        self,
        storage: Union[Sequence[float], Storage],
        rows: int,
        cols: int,
    ):
        """Initialize matrix data from row-major storage and its dimensions."""
        self.rows = check_dimension("rows", rows)
        self.cols = check_dimension("cols", cols)
        self.size = self.rows * self.cols

        if isinstance(storage, np.ndarray):
            self._storage = storage.astype(float64, copy=False)
        else:
            self._storage = array(list(storage), dtype=float64)

        if self._storage.ndim != 1:
            raise ShapeMismatch(
                f"Expected a flat sequence of values, got shape {self._storage.shape}."
            )

        if len(self._storage) != self.size:
            raise ShapeMismatch(
                f"Got {len(self._storage)} values for a {self.rows}x{self.cols} "
                f"matrix, expected {self.size}."
            )

    @property
    def shape(self) -> UserShape:
        return (self.rows, self.cols)

    def index(self, row: int, col: int) -> int:
        """Convert a (row, col) index to a storage position, checking bounds."""
        for i in (row, col):
            if isinstance(i, bool) or not isinstance(i, (int, np.integer)):
                raise IndexOutOfRange(
                    f"Index ({row!r}, {col!r}) must be a pair of integers."
                )
        if row < 0 or col < 0:
            raise IndexOutOfRange(
                f"Negative indexing for ({row}, {col}) not supported."
            )
        if row >= self.rows or col >= self.cols:
            raise IndexOutOfRange(
                f"Index ({row}, {col}) out of range {self.shape}."
            )
        return index_to_position(row, col, self.cols)

    def indices(self) -> Iterable[UserIndex]:
        """Yield every (row, col) index in row-major order."""
        for i in range(self.size):
            yield to_index(i, self.cols)

    def get(self, row: int, col: int) -> float:
        """Get the value at a specific index."""
        return float(self._storage[self.index(row, col)])

    def set(self, row: int, col: int, val: float) -> None:
        """Set a value at a specific index."""
        self._storage[self.index(row, col)] = val

    def tuple(self) -> Tuple[Storage, int, int]:
        """Return the core matrix data as a tuple, as consumed by the kernels."""
        return (self._storage, self.rows, self.cols)

    def copy(self) -> MatrixData:
        """Return an independent copy of this data."""
        return MatrixData(self._storage.copy(), self.rows, self.cols)

    def to_string(self) -> str:
        """Return a string representation of the matrix."""
        s = "["
        for row in range(self.rows):
            if row > 0:
                s += "\n "
            s += "["
            s += " ".join(
                f"{self._storage[index_to_position(row, col, self.cols)]:3.2f}"
                for col in range(self.cols)
            )
            s += "]"
        s += "]"
        return s
