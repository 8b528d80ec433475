"""
Robot movement command parsing.

This package provides the ordered command validator and the failure kinds
it reports.
"""

from robot_movement.parsing.validator import (
    CommandFailure,
    CommandValidator,
    FailureKind,
    split_tokens,
    validate_command,
)

__all__ = [
    "CommandFailure",
    "CommandValidator",
    "FailureKind",
    "split_tokens",
    "validate_command",
]
