"""Tests for the maze model and parser."""

import pytest

from mazesolver.entities.entity import MalformedGridError, Maze, load_maze, parse_maze
from mazesolver.tools.movement import Direction


class TestParseMaze:
    def test_simple_maze(self, loop: str) -> None:
        maze = parse_maze(loop)

        assert maze.width == 5
        assert maze.height == 5
        assert maze.start == (1, 2)
        assert maze.goal == (3, 2)
        assert maze.start_direction == Direction.EAST
        assert (2, 2) in maze.walls
        assert len(list(maze.walkable_cells())) == 8

    def test_accepts_list_of_rows(self) -> None:
        maze = parse_maze(["S.", ".E"])
        assert maze.start == (0, 0)
        assert maze.goal == (1, 1)

    def test_ignores_surrounding_blank_lines_and_indent(self) -> None:
        maze = parse_maze("""
            S.E
        """)
        assert maze.width == 3
        assert maze.height == 1

    def test_start_direction(self) -> None:
        maze = parse_maze("S.E", Direction.NORTH)
        assert maze.start_direction == Direction.NORTH

    def test_round_trips_to_lines(self, first_example: str) -> None:
        assert parse_maze(first_example).to_lines() == first_example.splitlines()

    @pytest.mark.parametrize(
        "text, message",
        [
            ("", "empty"),
            ("S.\n.E.", "Row 1"),
            ("S.x.E", "Invalid tile"),
            ("...E", "exactly one 'S'"),
            ("S.S.E", "exactly one 'S'"),
            ("S...", "exactly one 'E'"),
            ("S.E.E", "exactly one 'E'"),
        ],
    )
    def test_malformed(self, text: str, message: str) -> None:
        with pytest.raises(MalformedGridError, match=message):
            parse_maze(text)

    def test_malformed_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_maze("")

    def test_load_maze(self, tmp_path, loop: str) -> None:
        path = tmp_path / "maze.txt"
        path.write_text(loop)
        maze = load_maze(path, Direction.SOUTH)
        assert maze.goal == (3, 2)
        assert maze.start_direction == Direction.SOUTH


class TestMaze:
    def test_is_walkable(self, loop: str) -> None:
        maze = parse_maze(loop)
        assert maze.is_walkable((1, 1))
        assert maze.is_walkable(maze.start)
        assert not maze.is_walkable((0, 0))
        assert not maze.is_walkable((-1, 2))
        assert not maze.is_walkable((5, 2))

    def test_neighbor(self, loop: str) -> None:
        maze = parse_maze(loop)
        assert maze.neighbor((1, 2), Direction.NORTH) == (1, 1)
        assert maze.neighbor((1, 2), Direction.EAST) is None
        assert maze.neighbor((1, 2), Direction.WEST) is None

    def test_neighbor_out_of_bounds(self) -> None:
        maze = Maze(2, 1, set(), (0, 0), (1, 0))
        assert maze.neighbor((0, 0), Direction.WEST) is None
        assert maze.neighbor((0, 0), Direction.NORTH) is None
        assert maze.neighbor((0, 0), Direction.EAST) == (1, 0)

    @pytest.mark.parametrize(
        "start, goal, message",
        [
            ((-1, 0), (1, 0), "Start"),
            ((0, 0), (2, 0), "Goal"),
            ((0, 0), (1, 1), "Goal"),
        ],
    )
    def test_start_and_goal_must_be_walkable(self, start, goal, message: str) -> None:
        """Negative or oversized coordinates would otherwise wrap around the distance table."""
        with pytest.raises(MalformedGridError, match=message):
            Maze(2, 2, {(1, 1)}, start, goal)
