"""Entities module with maze objects."""

from .entity import Cell, Maze, MalformedGridError, parse_maze, load_maze

__all__ = ["Cell", "Maze", "MalformedGridError", "parse_maze", "load_maze"]
