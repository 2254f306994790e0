"""
Sentinel values and shared constants for graph analysis.
"""

import sys

# Returned by get_weight when no such edge exists. Weights are validated
# non-negative, so this never collides with a stored weight.
MISSING_WEIGHT: int = -1

# Shortest-path distance of a vertex unreachable from the source.
INFINITY: int = sys.maxsize

# Header line is the declared vertex count, data lines are "u v w".
EDGE_LINE_TOKENS = 3
