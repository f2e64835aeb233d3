import random
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

__all__ = ["Graph", "Point", "circle", "diag", "make_pts", "simple", "split", "xor"]

Point = Tuple[float, float]


def make_pts(N: int, rng: Optional[random.Random] = None) -> List[Point]:
    """Generates N random 2D points in the unit square.

    Args:
    ----
        N (int): The number of points to generate.
        rng (Optional[random.Random]): Generator to draw from; the module generator if None.

    Returns:
    -------
        List[Point]: The points (x_1, x_2).

    """
    draw = rng.random if rng is not None else random.random
    return [(draw(), draw()) for _ in range(N)]


@dataclass
class Graph:
    """Labelled 2D points, the two coordinates being a network's inputs.

    Attributes
    ----------
        N (int): The number of points.
        X (List[Point]): The points.
        y (List[int]): A 0/1 label for each point.

    """

    N: int
    X: List[Point]
    y: List[int]


def _labelled(
    N: int, rule: Callable[[float, float], bool], seed: Optional[int]
) -> Graph:
    X = make_pts(N, random.Random(seed) if seed is not None else None)
    y = [1 if rule(x_1, x_2) else 0 for x_1, x_2 in X]
    return Graph(N, X, y)


def simple(N: int, seed: Optional[int] = None) -> Graph:
    """Label is 1 when x_1 < 0.5."""
    return _labelled(N, lambda x_1, x_2: x_1 < 0.5, seed)


def diag(N: int, seed: Optional[int] = None) -> Graph:
    """Label is 1 when x_1 + x_2 < 0.5."""
    return _labelled(N, lambda x_1, x_2: x_1 + x_2 < 0.5, seed)


def split(N: int, seed: Optional[int] = None) -> Graph:
    """Label is 1 when x_1 < 0.2 or x_1 > 0.8."""
    return _labelled(N, lambda x_1, x_2: x_1 < 0.2 or x_1 > 0.8, seed)


def xor(N: int, seed: Optional[int] = None) -> Graph:
    """Label is 1 when the point lies in the top-left or bottom-right quadrant."""
    return _labelled(
        N,
        lambda x_1, x_2: (x_1 < 0.5 and x_2 > 0.5) or (x_1 > 0.5 and x_2 < 0.5),
        seed,
    )


def circle(N: int, seed: Optional[int] = None) -> Graph:
    """Label is 1 outside the circle of radius sqrt(0.1) around (0.5, 0.5)."""

    def outside(x_1: float, x_2: float) -> bool:
        x1, x2 = x_1 - 0.5, x_2 - 0.5
        return x1 * x1 + x2 * x2 > 0.1

    return _labelled(N, outside, seed)


datasets: Dict[str, Callable[..., Graph]] = {
    "Simple": simple,
    "Diag": diag,
    "Split": split,
    "Xor": xor,
    "Circle": circle,
}
