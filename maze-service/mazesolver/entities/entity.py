"""Entity classes for the maze"""

from pathlib import Path
from typing import Iterator, Union

from mazesolver.tools.consts import (
    WALL, OPEN, START, GOAL, TILES, DEFAULT_START_DIRECTION
)
from mazesolver.tools.movement import Direction

Cell = tuple[int, int]  # (x, y) = (col, row)


class MalformedGridError(ValueError):
    """Raised when maze text cannot be turned into a Maze."""


class Maze:
    """Rectangular grid of walkable and blocked cells with a start and a goal."""

    def __init__(
        self,
        width: int,
        height: int,
        walls: set[Cell],
        start: Cell,
        goal: Cell,
        start_direction: Direction = DEFAULT_START_DIRECTION,
    ) -> None:
        """
        Args:
            width (int): Number of columns
            height (int): Number of rows
            walls (set[Cell]): Blocked cells, every other in-bounds cell is walkable
            start (Cell): Cell the reindeer starts on
            goal (Cell): Cell the reindeer must reach
            start_direction (Direction): Facing on the start cell. Default is EAST

        Raises:
            MalformedGridError: start or goal is out of bounds or on a wall
        """
        self.width = width
        self.height = height
        self.walls: frozenset[Cell] = frozenset(walls)
        self.start = start
        self.goal = goal
        self.start_direction = Direction(start_direction)

        for name, cell in (("Start", start), ("Goal", goal)):
            if not self.is_walkable(cell):
                raise MalformedGridError(f"{name} {cell} is out of bounds or on a wall")

    def __repr__(self) -> str:
        return (
            f"Maze(width={self.width}, height={self.height}, start={self.start}, "
            f"goal={self.goal}, start_direction={self.start_direction.name})"
        )

    def is_valid_coord(self, x: int, y: int) -> bool:
        """Checks if given position is within bounds."""
        return 0 <= x < self.width and 0 <= y < self.height

    def is_walkable(self, cell: Cell) -> bool:
        """Checks whether the cell is inside the maze and not a wall."""
        return self.is_valid_coord(*cell) and cell not in self.walls

    def neighbor(self, cell: Cell, direction: Direction) -> Union[Cell, None]:
        """
        Walkable cell one step away in the given direction.

        Returns:
            Cell | None: the neighbour, or None if it is a wall or out of bounds
        """
        dx, dy = direction.delta
        candidate = (cell[0] + dx, cell[1] + dy)
        return candidate if self.is_walkable(candidate) else None

    def walkable_cells(self) -> Iterator[Cell]:
        for y in range(self.height):
            for x in range(self.width):
                if (x, y) not in self.walls:
                    yield x, y

    def to_lines(self) -> list[str]:
        """Maze text with S and E restored."""
        lines = []
        for y in range(self.height):
            row = []
            for x in range(self.width):
                if (x, y) == self.start:
                    row.append(START)
                elif (x, y) == self.goal:
                    row.append(GOAL)
                elif (x, y) in self.walls:
                    row.append(WALL)
                else:
                    row.append(OPEN)
            lines.append("".join(row))
        return lines


def parse_maze(
    text: Union[str, list[str]],
    start_direction: Direction = DEFAULT_START_DIRECTION,
) -> Maze:
    """
    Build a Maze from its text form.

    Tiles: '#' wall, '.' open, 'S' start, 'E' goal. Blank lines around the
    block and whitespace around each row are ignored.

    Args:
        text: maze text, or its rows
        start_direction: facing on the start tile

    Raises:
        MalformedGridError: empty maze, jagged rows, unknown tiles, or not
            exactly one start and one goal
    """
    lines = text.splitlines() if isinstance(text, str) else list(text)
    rows = [line.strip() for line in lines]
    while rows and not rows[0]:
        rows.pop(0)
    while rows and not rows[-1]:
        rows.pop()
    if not rows:
        raise MalformedGridError("Maze is empty")

    width = len(rows[0])
    walls: set[Cell] = set()
    starts: list[Cell] = []
    goals: list[Cell] = []

    for y, row in enumerate(rows):
        if len(row) != width:
            raise MalformedGridError(
                f"Row {y} has {len(row)} tiles, expected {width}"
            )
        for x, tile in enumerate(row):
            if tile not in TILES:
                raise MalformedGridError(f"Invalid tile {tile!r} at ({x}, {y})")
            if tile == WALL:
                walls.add((x, y))
            elif tile == START:
                starts.append((x, y))
            elif tile == GOAL:
                goals.append((x, y))

    if len(starts) != 1:
        raise MalformedGridError(f"Expected exactly one {START!r}, found {len(starts)}")
    if len(goals) != 1:
        raise MalformedGridError(f"Expected exactly one {GOAL!r}, found {len(goals)}")

    return Maze(width, len(rows), walls, starts[0], goals[0], start_direction)


def load_maze(
    path: Union[str, Path],
    start_direction: Direction = DEFAULT_START_DIRECTION,
) -> Maze:
    """Read and parse a maze file."""
    return parse_maze(Path(path).read_text(), start_direction)
