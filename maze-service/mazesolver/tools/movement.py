"""Compass directions used for the facing part of a search state."""

from enum import IntEnum


class Direction(IntEnum):
    """
    Facing direction of the reindeer.
    Values follow the clockwise compass order so turn distance is modular arithmetic.
    """
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    def __int__(self):
        return self.value

    def __repr__(self) -> str:
        return f"Direction.{self.name}"

    @staticmethod
    def turn_distance(d1: 'Direction', d2: 'Direction') -> int:
        """
        Number of 90 degree turns needed to face d2 when facing d1.

        Examples:
            NORTH -> EAST: 1
            NORTH -> WEST: 1 (not 3, turning counter-clockwise is shorter)
            NORTH -> SOUTH: 2
        """
        diff = abs(int(d1) - int(d2))
        return min(diff, 4 - diff)

    def opposite(self) -> 'Direction':
        return Direction((self.value + 2) % 4)

    @property
    def delta(self) -> tuple[int, int]:
        """(dx, dy) of one step; y grows downwards like the rows of the maze text."""
        return _DELTAS[self]

    @classmethod
    def from_letter(cls, letter: str) -> 'Direction':
        """Parse 'N', 'E', 'S' or 'W' (case-insensitive)."""
        for direction in cls:
            if direction.name[0] == letter.upper():
                return direction
        raise ValueError(f"Invalid direction letter {letter!r}")


_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.NORTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
}

