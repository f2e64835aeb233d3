"""Collection of the scalar operators used by the matrix kernels and the network."""

import math


def mul(x: float, y: float) -> float:
    """Multiplies two numbers and returns their product.

    Args:
    ----
        x (float): The first number.
        y (float): The second number.

    Returns:
    -------
        float: The product of x and y.

    """
    return x * y


def add(x: float, y: float) -> float:
    """Adds two numbers and returns their sum.

    Args:
    ----
        x (float): The first number.
        y (float): The second number.

    Returns:
    -------
        float: The sum of x and y.

    """
    return x + y


def is_close(x: float, y: float) -> bool:
    """Checks if two numbers are close to each other within a small tolerance.

    Args:
    ----
        x (float): The first number.
        y (float): The second number.

    Returns:
    -------
        bool: True if the absolute difference between x and y is less than 1e-2, False otherwise.

    """
    return abs(x - y) < 1e-2


def sigmoid(x: float) -> float:
    """Computes the sigmoid function for the input number.

    For negative inputs the equivalent form exp(x) / (1 + exp(x)) is used so
    that exp never overflows.

    Args:
    ----
        x (float): The input number.

    Returns:
    -------
        float: The sigmoid of x, in (0, 1).

    """
    if x >= 0:
        return 1 / (1 + math.exp(-1 * x))
    else:
        a = math.exp(x)
        return a / (1 + a)


def sigmoid_back(y: float) -> float:
    """Computes the derivative of the sigmoid in terms of its output.

    Args:
    ----
        y (float): An already activated value, sigmoid(x).

    Returns:
    -------
        float: d sigmoid / dx evaluated at x, i.e. y * (1 - y).

    """
    return y * (1 - y)


dsigmoid = sigmoid_back
