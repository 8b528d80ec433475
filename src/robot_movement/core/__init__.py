"""
Core robot movement components.

This package provides the fundamental types shared by validation and
execution: directions, parsed commands and the robot position.
"""

from robot_movement.core.types import (
    MAX_MAGNITUDE,
    Direction,
    ParsedCommand,
    Position,
)

__all__ = [
    "MAX_MAGNITUDE",
    "Direction",
    "ParsedCommand",
    "Position",
]
