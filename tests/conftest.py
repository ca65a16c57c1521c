import random

import pytest

from int_matrix import Matrix, ModularMatrix

SEEDS = [3, 17, 2024]


def random_grid(rng: random.Random, rows: int, cols: int, low: int = -50, high: int = 50) -> list:
    return [[rng.randint(low, high) for _ in range(cols)] for _ in range(rows)]


@pytest.fixture(params=SEEDS)
def rng(request: pytest.FixtureRequest) -> random.Random:
    """Seeded generator, one per seed so failures are reproducible."""
    return random.Random(request.param)


@pytest.fixture
def m3x3() -> Matrix:
    return Matrix([
        [1, 2, 3],
        [4, 5, 6],
        [7, 8, 9],
    ])


@pytest.fixture
def mod3() -> ModularMatrix:
    return ModularMatrix([[1, 2], [3, 4]], 3)
