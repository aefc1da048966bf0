# config.py
import numpy as np

# Neighbor steps as (dr, dc): left, right, up, down
STEPS_4 = ((0, -1), (0, 1), (-1, 0), (1, 0))

# Elevations must fit a signed 32-bit integer and be non-negative
ELEV_MIN = 0
ELEV_MAX = 2**31 - 1

# Elevations and accumulators are both kept in 64 bits
DTYPE = np.int64

DEFAULT_STRATEGY = "sorted"

LENGTH_LINE = "Length: {}"
DROP_LINE = "Drop: {}"

USAGE = "Usage: redmart /path/to/map/file"
CANT_OPEN = "Can't open {}"

EXIT_OK = 0
EXIT_FAILURE = 1
