"""
Shared test fixtures for the robot_movement test suite.
"""

import pytest

from robot_movement.execution.engine import MovementEngine
from robot_movement.parsing.validator import CommandValidator


@pytest.fixture
def engine():
    """Fresh movement engine positioned at the origin."""
    return MovementEngine()


@pytest.fixture
def validator():
    return CommandValidator()


@pytest.fixture
def command_file(tmp_path):
    """Write command lines to a file and return its path.

    Usage:
        def test_something(command_file):
            path = command_file(["N 5", "Q"])
    """

    def _write(lines, name="commands.txt"):
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write
