# region Imports
from typing import Iterable, List, Sequence, Tuple
import numpy as np
from redmart.config import STEPS_4, ELEV_MIN, ELEV_MAX, DTYPE
from redmart.errors import MalformedInput
# endregion

# region Index Helpers
def idx_to_rc(i: int, W: int) -> Tuple[int, int]:
    return (i // W, i % W)


def rc_to_idx(r: int, c: int, W: int) -> int:
    return r * W + c


def neighbors_4(u, H, W):
    r, c = u
    for dr, dc in STEPS_4:
        rr, cc = r + dr, c + dc
        if 0 <= rr < H and 0 <= cc < W:
            yield (rr, cc)
# endregion

# region Elevation Parsing
def _to_elevations(values: Iterable) -> np.ndarray:
    try:
        z = np.array([int(v) for v in values], dtype=DTYPE)
    except (TypeError, ValueError, OverflowError) as e:
        raise MalformedInput(f"bad elevation value: {e}") from e

    bad = np.flatnonzero((z < ELEV_MIN) | (z > ELEV_MAX))
    if bad.size:
        i = int(bad[0])
        raise MalformedInput(
            f"elevation {int(z[i])} at index {i} outside [{ELEV_MIN}, {ELEV_MAX}]"
        )
    return z
# endregion

# region Grid
class Grid:
    """
    Rectangular elevation map stored row-major as a flat int64 array.

    Cells are addressed by linear index i = r * columns + c. The elevation
    array is read-only once the grid is built.
    """

    def __init__(self, columns: int, rows: int, elevations: Iterable):
        if columns < 0 or rows < 0:
            raise MalformedInput(f"negative grid dimensions {columns}x{rows}")

        z = _to_elevations(elevations)
        if z.size != columns * rows:
            raise MalformedInput(
                f"expected {columns * rows} elevations for a {columns}x{rows} grid, got {z.size}"
            )
        z.flags.writeable = False

        self.columns = columns
        self.rows = rows
        self.elevations = z
        # plain ints are much faster than numpy scalars in per-cell loops
        self._z: List[int] = z.tolist()

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Grid":
        rows = [list(row) for row in rows]
        if not rows:
            return cls(0, 0, [])
        W = len(rows[0])
        for r, row in enumerate(rows):
            if len(row) != W:
                raise MalformedInput(f"row {r} has {len(row)} cells, expected {W}")
        return cls(W, len(rows), [v for row in rows for v in row])

    # region Geometry
    @property
    def size(self) -> int:
        return self.columns * self.rows

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.columns)

    def as_array(self) -> np.ndarray:
        return self.elevations.reshape(self.shape)

    def elev(self, i: int) -> int:
        if not 0 <= i < self.size:
            raise IndexError(f"cell index {i} out of range for {self.size} cells")
        return self._z[i]

    def descending_neighbors(self, i: int) -> List[int]:
        """Indices of 4-neighbors strictly lower than cell i, ordered left, right, up, down."""
        W = self.columns
        z = self._z
        e = self.elev(i)
        r, c = idx_to_rc(i, W)
        out = []
        for rr, cc in neighbors_4((r, c), self.rows, W):
            j = rc_to_idx(rr, cc, W)
            if e > z[j]:
                out.append(j)
        return out
    # endregion

    # region Symmetry Transforms
    def _from_array(self, a: np.ndarray) -> "Grid":
        H, W = a.shape
        return Grid(W, H, a.ravel())

    def flipped(self, axis: int) -> "Grid":
        """axis=0 reverses row order, axis=1 mirrors each row."""
        return self._from_array(np.flip(self.as_array(), axis=axis))

    def rotated(self, k: int = 1) -> "Grid":
        return self._from_array(np.rot90(self.as_array(), k))

    def shifted(self, offset: int) -> "Grid":
        return self._from_array(self.as_array() + offset)

    def scaled(self, k: int) -> "Grid":
        return self._from_array(self.as_array() * k)
    # endregion

    def __repr__(self):
        return f"Grid(columns={self.columns}, rows={self.rows})"
# endregion
