# cli.py: `redmart <path>` prints the longest ski run and its drop
# region Imports
import argparse
import logging
import sys
from typing import List, Optional
from redmart.config import USAGE, CANT_OPEN, EXIT_OK, EXIT_FAILURE
from redmart.errors import UsageError, MalformedInput, EmptyGrid
from redmart.reader import read_grid
from redmart.solver import solve
# endregion

logger = logging.getLogger(__name__)

# region Argument Parsing
class _Parser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="redmart",
        description="Longest strictly-descending run on an elevation map and its drop",
        add_help=False,
    )
    parser.add_argument("path", help="map file: columns, rows, then the elevations")
    return parser
# endregion

# region Entry Point
def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    try:
        args = build_parser().parse_args(argv)
    except UsageError as e:
        logger.debug("usage error: %s", e)
        print(USAGE, file=sys.stderr)
        return EXIT_FAILURE

    try:
        with open(args.path, "rb") as f:
            grid = read_grid(f)
    except OSError as e:
        logger.debug("open failed: %s", e)
        print(CANT_OPEN.format(args.path), file=sys.stderr)
        return EXIT_FAILURE
    except MalformedInput as e:
        print(f"{args.path}: malformed map: {e}", file=sys.stderr)
        return EXIT_FAILURE

    try:
        result = solve(grid)
    except EmptyGrid as e:
        print(f"{args.path}: {e}", file=sys.stderr)
        return EXIT_FAILURE

    sys.stdout.write(result.lines())
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
# endregion
