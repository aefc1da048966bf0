# models.py
from dataclasses import dataclass
import numpy as np
from redmart.config import LENGTH_LINE, DROP_LINE

@dataclass
class CellTable:
    length: np.ndarray   # (R,C) longest descending run from each cell, in cells
    drop: np.ndarray     # (R,C) best drop over runs of that length

@dataclass(frozen=True)
class SolveResult:
    best_length: int
    best_drop: int
    n_cells: int = 0
    n_local_minima: int = 0
    n_best_starts: int = 0

    def __iter__(self):
        yield self.best_length
        yield self.best_drop

    def lines(self) -> str:
        return LENGTH_LINE.format(self.best_length) + "\n" + DROP_LINE.format(self.best_drop) + "\n"
