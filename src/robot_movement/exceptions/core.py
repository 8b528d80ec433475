"""
Exception classes for robot movement processing.

Malformed commands are never exceptions: the validator reports them as
`CommandFailure` values and the engine handles every one of them. The types
defined here cover the surrounding layer, where reading command files,
writing log files and loading settings can fail.
"""

from pathlib import Path


class RobotMovementError(Exception):
    """Base exception for all robot movement errors."""

    pass


class CommandFileError(RobotMovementError):
    """Raised when a command or log file cannot be read or written."""

    def __init__(self, path: str | Path, reason: str):
        """
        Initialize the exception.

        Params:
            path: The file that could not be accessed
            reason: The underlying reason for the failure
        """
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Cannot access file '{self.path}': {reason}")


class ConfigurationError(RobotMovementError):
    """Raised when run settings cannot be loaded or are invalid."""

    def __init__(self, setting: str, reason: str):
        """
        Initialize the exception.

        Params:
            setting: Name of the setting or settings source at fault
            reason: Why the setting is invalid
        """
        self.setting = setting
        self.reason = reason
        super().__init__(f"Invalid setting '{setting}': {reason}")
