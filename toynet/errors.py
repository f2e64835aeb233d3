class MatrixError(RuntimeError):
    """Base class for errors raised by matrices and networks."""

    pass


class ShapeMismatch(MatrixError):
    """Exception raised when flat data does not fill rows x cols exactly."""

    pass


class DimensionMismatch(MatrixError):
    """Exception raised when operand shapes are incompatible."""

    pass


class IndexOutOfRange(MatrixError):
    """Exception raised for element access outside the matrix bounds."""

    pass


class InvalidDimensions(MatrixError):
    """Exception raised for negative or non-integer sizes."""

    pass
