"""tunable constants for the maze solver

these values can be adjusted to change scoring and limits:
- cost weights decide which routes count as optimal
- tile symbols must match the maze text format
"""

import numpy as np

from mazesolver.tools.movement import Direction

# cost of one step forward into the next cell
STEP_COST: int = 1

# cost of one 90 degree turn in place
# higher value = straighter routes win over shorter ones
TURN_COST: int = 1000

# heaviest fused move edge: a half turn plus a step
MAX_EDGE_WEIGHT: int = 2 * TURN_COST + STEP_COST

# distance table entry for a vertex the search never reached
UNREACHED: int = int(np.iinfo(np.int64).max)

# facing of the reindeer on the start tile unless told otherwise
DEFAULT_START_DIRECTION: Direction = Direction.EAST

# worklist used by the forward relaxation: "heap" or "stack"
# heap = dijkstra order, stack = label-correcting with re-queuing
DEFAULT_WORKLIST: str = "heap"
WORKLISTS: tuple[str, ...] = ("heap", "stack")

# maze text symbols
WALL: str = "#"
OPEN: str = "."
START: str = "S"
GOAL: str = "E"
TILES: str = WALL + OPEN + START + GOAL

# symbol used when drawing the cells on optimal routes
OPTIMAL_MARK: str = "O"

# largest width or height accepted over the API
MAX_MAZE_SIDE: int = 500
