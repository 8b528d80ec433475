"""
Robot movement exception classes.

This package provides the exception types raised by the file handling and
configuration layer around the movement engine.
"""

from robot_movement.exceptions.core import (
    CommandFileError,
    ConfigurationError,
    RobotMovementError,
)

__all__ = [
    "RobotMovementError",
    "CommandFileError",
    "ConfigurationError",
]
