"""
Core type definitions for robot movement processing.

This module contains the direction vocabulary, the magnitude ceiling and the
position state shared by the validator and the movement engine.
"""

from enum import Enum

from attrs import frozen
from pydantic import BaseModel

MAX_MAGNITUDE = 100


class Direction(Enum):
    """Cardinal direction a command can move the robot in."""

    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"

    @property
    def delta(self) -> tuple[int, int]:
        """Unit displacement along (x, y) for this direction."""
        return _DELTAS[self]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]


_DELTAS = {
    Direction.NORTH: (0, 1),
    Direction.SOUTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.WEST: (-1, 0),
}

_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}


@frozen
class ParsedCommand:
    """A command that passed every validation rule.

    Params:
        direction: Direction to move in
        magnitude: Distance to move, always within 1..MAX_MAGNITUDE
    """

    direction: Direction
    magnitude: int

    def __str__(self) -> str:
        return f"{self.direction.value} {self.magnitude}"


class Position(BaseModel):
    """
    Mutable 2D grid position of the robot.

    Starts at the origin and is only moved by executing a validated command.
    """

    x: int = 0
    y: int = 0

    def apply(self, command: ParsedCommand) -> None:
        """
        Move by the displacement encoded in a parsed command.

        Params:
            command: Validated command to apply
        """
        dx, dy = command.direction.delta
        self.x += dx * command.magnitude
        self.y += dy * command.magnitude

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
