"""
Robot movement execution.

This package provides the movement engine and the correction strategies it
applies to malformed commands.
"""

from robot_movement.execution.engine import MovementEngine, OutputLog

__all__ = [
    "MovementEngine",
    "OutputLog",
]
