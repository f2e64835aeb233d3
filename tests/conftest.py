import pytest

from toynet import Matrix


@pytest.fixture
def left():
    return Matrix.from_values(2, 3, [1, 2, 3, 4, 5, 6])


@pytest.fixture
def right():
    return Matrix.from_values(3, 2, [7, 8, 9, 10, 11, 12])
