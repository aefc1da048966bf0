# region Imports
import logging
from typing import List, Tuple
import numpy as np
from redmart.config import DTYPE, DEFAULT_STRATEGY
from redmart.errors import EmptyGrid, InternalInvariant
from redmart.grid import Grid
from redmart.models import CellTable, SolveResult
# endregion

logger = logging.getLogger(__name__)

UNVISITED, IN_PROGRESS, FINALIZED = 0, 1, 2

# region Candidate Reduction
def _fold(cur_len: int, cur_drop: int, cand_len: int, cand_drop: int) -> Tuple[int, int]:
    # a longer run invalidates the drop recorded for the shorter one
    if cand_len > cur_len:
        return cand_len, cand_drop
    if cand_len == cur_len and cand_drop > cur_drop:
        return cur_len, cand_drop
    return cur_len, cur_drop
# endregion

# region Elevation-Sorted Pass
def _fill_sorted(grid: Grid) -> Tuple[List[int], List[int]]:
    """
    Visit cells from lowest to highest. Every descending neighbor of a cell is
    strictly lower, so it is already final when the cell reads it.
    """
    n = grid.size
    z = grid.elevations.tolist()
    length = [1] * n
    drop = [0] * n

    for v in np.argsort(grid.elevations, kind="stable").tolist():
        lv, dv = 1, 0
        zv = z[v]
        for u in grid.descending_neighbors(v):
            lv, dv = _fold(lv, dv, length[u] + 1, drop[u] + zv - z[u])
        length[v] = lv
        drop[v] = dv

    return length, drop
# endregion

# region Iterative DFS
def _fill_dfs(grid: Grid) -> Tuple[List[int], List[int]]:
    """
    Post-order DFS over the descending-neighbor DAG with an explicit stack.

    Frames are [cell, descending neighbors, next neighbor position]. A frame
    only advances past a neighbor once that neighbor is finalized, then folds
    it into the cell.
    """
    n = grid.size
    z = grid.elevations.tolist()
    length = [1] * n
    drop = [0] * n
    state = [UNVISITED] * n

    for root in range(n):
        if state[root] == FINALIZED:
            continue
        state[root] = IN_PROGRESS
        stack = [[root, grid.descending_neighbors(root), 0]]

        while stack:
            frame = stack[-1]
            v, nbrs, pos = frame

            if pos == len(nbrs):
                if state[v] != IN_PROGRESS:
                    raise InternalInvariant(f"cell {v} finalized twice")
                state[v] = FINALIZED
                stack.pop()
                continue

            u = nbrs[pos]
            su = state[u]
            if su == UNVISITED:
                state[u] = IN_PROGRESS
                stack.append([u, grid.descending_neighbors(u), 0])
                continue
            if su == IN_PROGRESS:
                raise InternalInvariant(f"cell {u} re-entered while in progress (cycle via {v})")

            length[v], drop[v] = _fold(length[v], drop[v], length[u] + 1, drop[u] + z[v] - z[u])
            frame[2] = pos + 1

    return length, drop
# endregion

# region Public API
_STRATEGIES = {
    "sorted": _fill_sorted,
    "dfs": _fill_dfs,
}


def cell_table(grid: Grid, strategy: str = DEFAULT_STRATEGY) -> CellTable:
    """Per-cell (length, drop) as (R,C) arrays."""
    if grid.size == 0:
        raise EmptyGrid(f"grid {grid.columns}x{grid.rows} has no cells")
    try:
        fill = _STRATEGIES[strategy]
    except KeyError:
        raise ValueError(f"unknown strategy {strategy!r}, expected one of {sorted(_STRATEGIES)}") from None

    length, drop = fill(grid)
    return CellTable(
        length=np.array(length, dtype=DTYPE).reshape(grid.shape),
        drop=np.array(drop, dtype=DTYPE).reshape(grid.shape),
    )


def solve(grid: Grid, strategy: str = DEFAULT_STRATEGY) -> SolveResult:
    """
    Longest strictly-descending 4-connected run and the best drop among runs
    of that length.

    Returns:
      SolveResult, which unpacks as (best_length, best_drop).

    Raises:
      EmptyGrid when the grid has no cells.
    """
    logger.debug("solving %dx%d grid with %s strategy", grid.columns, grid.rows, strategy)
    table = cell_table(grid, strategy)

    best_length = int(table.length.max())
    longest = table.length == best_length
    best_drop = int(table.drop[longest].max())

    result = SolveResult(
        best_length=best_length,
        best_drop=best_drop,
        n_cells=grid.size,
        n_local_minima=int(np.count_nonzero(table.length == 1)),
        n_best_starts=int(np.count_nonzero(longest & (table.drop == best_drop))),
    )
    logger.debug(
        "%d cells, %d local minima, %d best starts -> length %d drop %d",
        result.n_cells, result.n_local_minima, result.n_best_starts,
        result.best_length, result.best_drop,
    )
    return result
# endregion
