from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar, Any

from numba import njit as _njit

from . import operators
from .errors import DimensionMismatch
from .matrix_data import index_to_position

if TYPE_CHECKING:
    from typing import Callable

    from .matrix import Matrix
    from .matrix_data import Storage

# TIP: Use `NUMBA_DISABLE_JIT=1 pytest tests/` to run the tests without JIT.

Fn = TypeVar("Fn")


def njit(fn: Fn, **kwargs: Any) -> Fn:
    """JIT compiles the given function with numba, always inlining it into
    its callers.

    Args:
    ----
        fn (Fn): The function to compile.
        **kwargs (Any): Additional options for numba's njit.

    Returns:
    -------
        Fn: The compiled function.

    """
    return _njit(inline="always", **kwargs)(fn)  # type: ignore


index_to_position = njit(index_to_position)


class FastOps:
    @staticmethod
    def map(fn: Callable[[float], float]) -> Callable[[Matrix], Matrix]:
        """Build an in-place elementwise map of `fn` over a matrix.

        Args:
        ----
            fn: numba-compilable function mapping a float to a float.

        Returns:
        -------
            Function that rewrites every element of its argument and returns it.

        """
        f = matrix_map(njit(fn))

        def ret(a: Matrix) -> Matrix:
            f(a.tuple()[0])
            return a

        return ret

    @staticmethod
    def scalar(
        fn: Callable[[float, float], float],
    ) -> Callable[[Matrix, float], Matrix]:
        """Build an in-place elementwise combination of each element with a scalar.

        Args:
        ----
            fn: numba-compilable function `fn(element, scalar) -> float`.

        Returns:
        -------
            Function `ret(a, k)` that rewrites every element of `a` with fn(x, k).

        """
        f = matrix_scalar(njit(fn))

        def ret(a: Matrix, k: float) -> Matrix:
            f(a.tuple()[0], float(k))
            return a

        return ret

    @staticmethod
    def matrix_multiply(a: Matrix, b: Matrix) -> Matrix:
        """Matrix multiply ::

            for i:
              for j:
                for k:
                  out[i, j] += a[i, k] * b[k, j]

        Args:
        ----
            a : left operand of shape (m, n)
            b : right operand of shape (n, p)

        Returns:
        -------
            New matrix of shape (m, p)

        Raises:
        ------
            DimensionMismatch: when a.cols != b.rows

        """
        if a.cols != b.rows:
            raise DimensionMismatch(
                f"Cannot multiply {a.shape} by {b.shape}: "
                f"left columns {a.cols} must equal right rows {b.rows}."
            )
        out = a.zeros((a.rows, b.cols))
        matrix_multiply(*out.tuple(), *a.tuple(), *b.tuple())
        return out


# Implementations


def matrix_map(
    fn: Callable[[float], float],
) -> Callable[[Storage], None]:
    """NUMBA low level in-place map.

    Optimizations:

    * Sequential loop, no thread pool
    * Storage is contiguous row-major, so no indexing is needed

    Args:
    ----
        fn: function mapping floats-to-floats to apply.

    Returns:
    -------
        Storage map function.

    """

    def _map(storage: Storage) -> None:
        for i in range(len(storage)):
            storage[i] = fn(storage[i])

    return njit(_map)  # type: ignore


def matrix_scalar(
    fn: Callable[[float, float], float],
) -> Callable[[Storage, float], None]:
    """NUMBA low level in-place map of every element against one scalar.

    Args:
    ----
        fn: function combining an element and the scalar.

    Returns:
    -------
        Storage map function taking the scalar as its second argument.

    """

    def _scalar(storage: Storage, k: float) -> None:
        for i in range(len(storage)):
            storage[i] = fn(storage[i], k)

    return njit(_scalar)  # type: ignore


def _matrix_multiply(
    out: Storage,
    out_rows: int,
    out_cols: int,
    a_storage: Storage,
    a_rows: int,
    a_cols: int,
    b_storage: Storage,
    b_rows: int,
    b_cols: int,
) -> None:
    """NUMBA matrix multiply function.

    Requires `a_cols == b_rows`; the caller checks it.

    Optimizations:

    * Sequential loop, no thread pool
    * No index buffers
    * Inner loop has no global writes, 1 multiply.

    Args:
    ----
        out (Storage): storage for `out` matrix
        out_rows (int): rows of `out`
        out_cols (int): cols of `out`
        a_storage (Storage): storage for `a` matrix
        a_rows (int): rows of `a`
        a_cols (int): cols of `a`
        b_storage (Storage): storage for `b` matrix
        b_rows (int): rows of `b`
        b_cols (int): cols of `b`

    Returns:
    -------
        None : Fills in `out`

    """
    for i in range(out_rows):
        for j in range(out_cols):
            # the dot product of row i of a with column j of b, summed in
            # ascending k with no compensation
            tmp = 0.0
            for k in range(a_cols):
                tmp += (
                    a_storage[index_to_position(i, k, a_cols)]
                    * b_storage[index_to_position(k, j, b_cols)]
                )
            out[index_to_position(i, j, out_cols)] = tmp


matrix_multiply = njit(_matrix_multiply)
assert matrix_multiply is not None

scale_map = FastOps.scalar(operators.mul)
add_scalar_map = FastOps.scalar(operators.add)
sigmoid_map = FastOps.map(operators.sigmoid)
