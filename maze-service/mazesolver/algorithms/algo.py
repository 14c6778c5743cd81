from dataclasses import dataclass
from typing import Iterator, Union
import heapq
import logging
import time

import numpy as np

from mazesolver.entities.entity import Cell, Maze, parse_maze
from mazesolver.tools.consts import (
    STEP_COST,
    TURN_COST,
    MAX_EDGE_WEIGHT,
    UNREACHED,
    DEFAULT_START_DIRECTION,
    DEFAULT_WORKLIST,
    WORKLISTS,
)
from mazesolver.tools.movement import Direction

logger = logging.getLogger(__name__)

Vertex = tuple[int, int, Direction]  # (x, y, facing)
Edge = tuple[Vertex, int]  # (vertex, weight)


class OrientedStateSpace:
    """
    Search graph over (cell, facing) vertices of a maze.

    Two kinds of edge leave a vertex:
        move: turn towards a walkable neighbour and step into it, arriving
              facing the direction of travel. Weight is TURN_COST per quarter
              turn plus STEP_COST.
        rotation: turn in place to another facing. Weight is TURN_COST per
              quarter turn.
    """

    def __init__(self, maze: Maze) -> None:
        self.maze = maze
        self.neighbor_cache: dict[Vertex, list[Edge]] = {}
        self.predecessor_cache: dict[Vertex, list[Edge]] = {}

    @staticmethod
    def edge_weight(facing: Direction, travel: Direction) -> int:
        """Cost of turning from facing to travel and stepping once."""
        return TURN_COST * Direction.turn_distance(facing, travel) + STEP_COST

    @staticmethod
    def vertices_at(cell: Cell) -> list[Vertex]:
        """The four facing-vertices of a cell."""
        return [(cell[0], cell[1], direction) for direction in Direction]

    def neighbors_of(self, vertex: Vertex) -> list[Edge]:
        """
        Move edges out of a vertex, one per compass direction with a walkable neighbour.

        Returns:
            list[Edge]: (target vertex, weight) pairs. Weights are in [1, MAX_EDGE_WEIGHT]
        """
        if vertex in self.neighbor_cache:
            return self.neighbor_cache[vertex]

        x, y, facing = vertex
        neighbors = []
        for direction in Direction:
            neighbor = self.maze.neighbor((x, y), direction)
            if neighbor is None:
                continue
            weight = self.edge_weight(facing, direction)
            assert STEP_COST <= weight <= MAX_EDGE_WEIGHT, f"Edge weight {weight} out of range"
            neighbors.append(((neighbor[0], neighbor[1], direction), weight))

        self.neighbor_cache[vertex] = neighbors
        return neighbors

    @staticmethod
    def rotations_of(vertex: Vertex) -> list[Edge]:
        """In-place rotation edges to the other three facings of the same cell."""
        x, y, facing = vertex
        return [
            ((x, y, direction), TURN_COST * Direction.turn_distance(facing, direction))
            for direction in Direction
            if direction != facing
        ]

    def predecessors_of(self, vertex: Vertex) -> list[Edge]:
        """
        Every (u, w) such that a move or rotation edge u -> vertex of weight w exists.
        """
        if vertex in self.predecessor_cache:
            return self.predecessor_cache[vertex]

        x, y, facing = vertex
        predecessors = [
            ((x, y, direction), TURN_COST * Direction.turn_distance(direction, facing))
            for direction in Direction
            if direction != facing
        ]

        # a move arriving facing `facing` came from the cell behind
        previous = self.maze.neighbor((x, y), facing.opposite())
        if previous is not None:
            for direction in Direction:
                predecessors.append(
                    ((previous[0], previous[1], direction), self.edge_weight(direction, facing))
                )

        self.predecessor_cache[vertex] = predecessors
        return predecessors


class DistanceTable:
    """
    Minimum known cost of every (cell, facing) vertex.

    Backed by a (height, width, 4) int64 array. Unreached vertices hold UNREACHED.
    Costs only ever go down while the table is open, and it is read-only once frozen.
    """

    def __init__(self, width: int, height: int) -> None:
        self.costs = np.full((height, width, len(Direction)), UNREACHED, dtype=np.int64)

    def __getitem__(self, vertex: Vertex) -> int:
        x, y, direction = vertex
        return int(self.costs[y, x, direction])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DistanceTable):
            return NotImplemented
        return np.array_equal(self.costs, other.costs)

    def __repr__(self) -> str:
        return f"DistanceTable(shape={self.costs.shape}, reached={self.reached_count()}, frozen={self.frozen})"

    @property
    def frozen(self) -> bool:
        return not self.costs.flags.writeable

    def freeze(self) -> None:
        self.costs.setflags(write=False)

    def is_reached(self, vertex: Vertex) -> bool:
        return self[vertex] != UNREACHED

    def lower(self, vertex: Vertex, cost: int) -> bool:
        """
        Record cost for vertex if it beats the known one.

        Returns:
            bool: True if the entry improved
        """
        if cost < 0:
            raise ValueError(f"Negative cost {cost} for {vertex}. This should never happen.")
        x, y, direction = vertex
        if cost < self.costs[y, x, direction]:
            self.costs[y, x, direction] = cost
            return True
        return False

    def reached_count(self) -> int:
        return int(np.count_nonzero(self.costs != UNREACHED))

    def reached(self) -> Iterator[tuple[Vertex, int]]:
        """Every reached vertex with its cost."""
        for y, x, direction in np.argwhere(self.costs != UNREACHED):
            yield (int(x), int(y), Direction(int(direction))), int(self.costs[y, x, direction])

    def goal_cost(self, cell: Cell) -> Union[int, None]:
        """Cheapest facing at cell, or None if no facing was reached."""
        x, y = cell
        best = int(self.costs[y, x].min())
        return None if best == UNREACHED else best


def relax(
        space: OrientedStateSpace,
        start: Vertex,
        worklist: str = DEFAULT_WORKLIST,
) -> DistanceTable:
    """
    Compute the minimum cost from start to every reachable vertex.

    Every time a vertex improves through a move, the new cost is also carried
    to the other facings of that cell through the rotation edges, so each cell
    ends up holding the true minimum for all four orientations.

    Args:
        space: state space to search
        start: start vertex, cost 0
        worklist: "heap" pops the cheapest vertex first (dijkstra order),
            "stack" pops the most recently improved one and re-queues on improvement

    Returns:
        DistanceTable: frozen table of minimum costs
    """
    if worklist not in WORKLISTS:
        raise ValueError(f"Invalid worklist {worklist!r}, expected one of {WORKLISTS}")

    maze = space.maze
    distances = DistanceTable(maze.width, maze.height)
    queue: list[tuple[int, int, int, Direction]] = []  # (cost, x, y, direction)

    def push(vertex: Vertex, cost: int) -> None:
        entry = (cost, vertex[0], vertex[1], vertex[2])
        if worklist == "heap":
            heapq.heappush(queue, entry)
        else:
            queue.append(entry)

    def improve(vertex: Vertex, cost: int) -> bool:
        if not distances.lower(vertex, cost):
            return False
        push(vertex, cost)
        for rotated, weight in space.rotations_of(vertex):
            if distances.lower(rotated, cost + weight):
                push(rotated, cost + weight)
        return True

    improve(start, 0)

    pops = 0
    relaxations = 0
    while queue:
        cost, x, y, direction = heapq.heappop(queue) if worklist == "heap" else queue.pop()
        vertex = (x, y, direction)

        # superseded by a cheaper entry pushed later
        if cost != distances[vertex]:
            continue
        pops += 1

        for neighbor, weight in space.neighbors_of(vertex):
            assert weight >= 0, f"Negative edge weight {weight} from {vertex}"
            if improve(neighbor, cost + weight):
                relaxations += 1

    distances.freeze()
    logger.debug(
        f"Relaxation ({worklist}) done: {pops} pops, {relaxations} relaxations, "
        f"{distances.reached_count()} vertices reached"
    )
    return distances


def reconstruct(
        space: OrientedStateSpace,
        distances: DistanceTable,
        goal: Cell,
        best: Union[int, None],
) -> frozenset[Cell]:
    """
    Collect every cell that lies on at least one route of cost best.

    Walks backwards from each goal facing that costs exactly best, following
    only edges u -> v with distances[u] + weight == distances[v]. The table is
    only read.

    Returns:
        frozenset[Cell]: cells on optimal routes, empty if best is None
    """
    if best is None:
        return frozenset()

    stack = [vertex for vertex in space.vertices_at(goal) if distances[vertex] == best]
    seen: set[Vertex] = set(stack)
    cells: set[Cell] = set()

    while stack:
        vertex = stack.pop()
        cost = distances[vertex]
        cells.add((vertex[0], vertex[1]))

        for predecessor, weight in space.predecessors_of(vertex):
            if predecessor in seen or not distances.is_reached(predecessor):
                continue
            if distances[predecessor] + weight == cost:
                seen.add(predecessor)
                stack.append(predecessor)

    return frozenset(cells)


@dataclass
class SolveResult:
    """Answers for one maze."""
    minimum_cost: Union[int, None]
    optimal_cells: frozenset[Cell]
    distances: DistanceTable
    runtime: float = 0.0

    @property
    def reachable(self) -> bool:
        return self.minimum_cost is not None

    @property
    def optimal_cell_count(self) -> int:
        return len(self.optimal_cells)


class MazeSolver:
    """
    Finds the cheapest way through a maze where every step costs STEP_COST
    and every quarter turn costs TURN_COST, and every cell on such a route.
    """

    def __init__(self, maze: Maze, worklist: str = DEFAULT_WORKLIST) -> None:
        """
        Args:
            maze: maze to solve
            worklist: relaxation worklist, "heap" or "stack"
        """
        if worklist not in WORKLISTS:
            raise ValueError(f"Invalid worklist {worklist!r}, expected one of {WORKLISTS}")
        self.maze = maze
        self.worklist = worklist
        self.space = OrientedStateSpace(maze)

    def start_vertex(self) -> Vertex:
        return self.maze.start[0], self.maze.start[1], self.maze.start_direction

    def solve(self) -> SolveResult:
        start = time.time()
        distances = relax(self.space, self.start_vertex(), self.worklist)
        best = distances.goal_cost(self.maze.goal)
        if best is None:
            logger.info(f"Goal {self.maze.goal} unreachable from {self.maze.start}")
        cells = reconstruct(self.space, distances, self.maze.goal, best)
        runtime = time.time() - start
        return SolveResult(best, cells, distances, runtime)


def solve_maze(
        text: Union[str, list[str]],
        start_direction: Direction = DEFAULT_START_DIRECTION,
        worklist: str = DEFAULT_WORKLIST,
) -> SolveResult:
    """Parse maze text and solve it."""
    return MazeSolver(parse_maze(text, start_direction), worklist).solve()
