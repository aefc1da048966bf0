"""Longest steepest ski run on a rectangular elevation map."""
from redmart.errors import RedmartError, UsageError, MalformedInput, EmptyGrid, InternalInvariant
from redmart.grid import Grid
from redmart.models import CellTable, SolveResult
from redmart.reader import parse_grid, read_grid
from redmart.solver import solve, cell_table

__version__ = "0.1.0"

__all__ = [
    "CellTable",
    "EmptyGrid",
    "Grid",
    "InternalInvariant",
    "MalformedInput",
    "RedmartError",
    "SolveResult",
    "UsageError",
    "cell_table",
    "parse_grid",
    "read_grid",
    "solve",
]
