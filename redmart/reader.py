# region Imports
import logging
from typing import BinaryIO, Union
from redmart.errors import MalformedInput
from redmart.grid import Grid
# endregion

logger = logging.getLogger(__name__)

# region Token Parsing
def _dimension(token: bytes, name: str) -> int:
    try:
        return int(token)
    except ValueError as e:
        raise MalformedInput(f"bad {name} {token!r}") from e


def parse_grid(data: Union[bytes, str]) -> Grid:
    """
    Build a Grid from whitespace-separated tokens: columns, rows, then
    columns*rows elevations in row-major order.
    """
    if isinstance(data, str):
        data = data.encode()
    tokens = data.split()
    if len(tokens) < 2:
        raise MalformedInput("missing grid dimensions")

    columns = _dimension(tokens[0], "column count")
    rows = _dimension(tokens[1], "row count")
    logger.debug("map header: %d columns x %d rows, %d elevation tokens",
                 columns, rows, len(tokens) - 2)
    return Grid(columns, rows, tokens[2:])


def read_grid(stream: BinaryIO) -> Grid:
    return parse_grid(stream.read())
# endregion
