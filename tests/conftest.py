import matplotlib
matplotlib.use("Agg")

import pytest
from redmart.grid import Grid


REDMART_4X4 = [
    [4, 8, 7, 3],
    [2, 5, 9, 3],
    [6, 3, 2, 5],
    [4, 4, 1, 6],
]


@pytest.fixture
def redmart_grid():
    return Grid.from_rows(REDMART_4X4)


def serpentine(W, H):
    """Grid whose only long run snakes through every cell, top-left highest."""
    n = W * H
    rows = []
    pos = 0
    for r in range(H):
        row = [0] * W
        cols = range(W) if r % 2 == 0 else range(W - 1, -1, -1)
        for c in cols:
            row[c] = n - 1 - pos
            pos += 1
        rows.append(row)
    return Grid.from_rows(rows)
