"""
Robot Movement - validate, auto-correct and execute grid movement commands

Commands such as ``N 10`` move a robot on a 2D grid. Malformed commands are
repaired where a deterministic fix exists and rejected otherwise, with every
execution, correction and rejection recorded in an output log.
"""

from importlib.metadata import version

from robot_movement.core.types import MAX_MAGNITUDE, Direction, ParsedCommand, Position
from robot_movement.execution.engine import MovementEngine
from robot_movement.parsing.validator import CommandFailure, FailureKind
from robot_movement.runner import process_commands, process_file

__version__ = version("robot-movement")

__all__ = [
    "__version__",
    "MAX_MAGNITUDE",
    "CommandFailure",
    "Direction",
    "FailureKind",
    "MovementEngine",
    "ParsedCommand",
    "Position",
    "process_commands",
    "process_file",
]
