"""Text rendering of solver output."""

from typing import Iterable

from mazesolver.entities.entity import Cell, Maze
from mazesolver.tools.consts import OPTIMAL_MARK


def render_optimal_cells(
        maze: Maze, cells: Iterable[Cell], mark: str = OPTIMAL_MARK
) -> list[str]:
    """
    Draw the maze with every cell on an optimal route replaced by mark.

    Example (mark 'O'):
        #####        #####
        #...#        #OOO#
        #S#E#   ->   #O#O#
        #...#        #OOO#
        #####        #####

    Returns:
        list[str]: one string per maze row
    """
    if len(mark) != 1:
        raise ValueError(f"Mark must be a single character, got {mark!r}")

    lines = [list(line) for line in maze.to_lines()]
    for x, y in cells:
        if not maze.is_walkable((x, y)):
            raise ValueError(f"Cell ({x}, {y}) is not walkable. This should never happen.")
        lines[y][x] = mark
    return ["".join(line) for line in lines]
