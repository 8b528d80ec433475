"""
Validator for robot movement commands.

A well-formed command is a direction symbol and a magnitude separated by a
single space, e.g. ``N 10``. Validation runs an ordered series of checks and
stops at the first rule the command breaks. The order matters: a lowercase
cardinal letter is reported as such and not as an invalid symbol, and the
multiple-symbols check only sees symbol tokens that survived the
single-character checks.
"""

import re
from enum import Enum

from attrs import frozen

from robot_movement.core.types import MAX_MAGNITUDE, Direction, ParsedCommand


class FailureKind(Enum):
    """Reason a command failed validation."""

    NO_SPACE_SEPARATOR = "no_space_separator"
    UNINTERPRETABLE = "uninterpretable"
    LOWERCASE_LETTER = "lowercase_letter"
    INVALID_CAPITAL_LETTER = "invalid_capital_letter"
    INVALID_SYMBOL = "invalid_symbol"
    MULTIPLE_SYMBOLS = "multiple_symbols"
    INVALID_NUMBER_FORMAT = "invalid_number_format"
    NEGATIVE_NUMBER = "negative_number"
    ZERO_NUMBER = "zero_number"
    NUMBER_EXCEEDS_LIMIT = "number_exceeds_limit"


@frozen
class CommandFailure:
    """
    Outcome of a command that broke a validation rule.

    Params:
        kind: Which rule was broken
        command: The command text as it was validated
        message: Human-readable description of the problem
    """

    kind: FailureKind
    command: str
    message: str


def split_tokens(command: str) -> list[str]:
    """
    Split a command on single spaces.

    Consecutive spaces produce empty tokens, but trailing empty tokens are
    dropped, so ``"N 5 "`` still yields two tokens.

    Params:
        command: Raw command text

    Returns:
        List of tokens
    """
    tokens = command.split(" ")
    while tokens and not tokens[-1]:
        tokens.pop()
    return tokens


class CommandValidator:
    """Validator for direction/magnitude movement commands."""

    LOWERCASE_PATTERN = re.compile(r"[nsew]")
    CARDINAL_PATTERN = re.compile(r"[NSEW]")
    CAPITAL_PATTERN = re.compile(r"[A-Z]")
    NUMBER_PATTERN = re.compile(r"[+-]?[0-9]+")

    def validate(self, command: str) -> ParsedCommand | CommandFailure:
        """
        Validate a raw command without executing it.

        Params:
            command: Raw command text

        Returns:
            ParsedCommand when every rule passes, otherwise a CommandFailure
            describing the first rule that was broken
        """
        if " " not in command:
            return CommandFailure(
                FailureKind.NO_SPACE_SEPARATOR,
                command,
                f"No space separator in command: {command}.",
            )

        tokens = split_tokens(command)
        if len(tokens) != 2:
            return CommandFailure(
                FailureKind.UNINTERPRETABLE,
                command,
                f"Cannot interpret command: {command}.",
            )
        symbol, number_token = tokens

        if self.LOWERCASE_PATTERN.fullmatch(symbol):
            return CommandFailure(
                FailureKind.LOWERCASE_LETTER,
                command,
                f"Lowercase letter used: {symbol}.",
            )
        if not self.CARDINAL_PATTERN.fullmatch(symbol):
            if self.CAPITAL_PATTERN.fullmatch(symbol):
                return CommandFailure(
                    FailureKind.INVALID_CAPITAL_LETTER,
                    command,
                    f"Invalid capital letter used: {symbol}.",
                )
            # An empty symbol (leading space) counts as a bad single symbol
            if len(symbol) <= 1:
                return CommandFailure(
                    FailureKind.INVALID_SYMBOL,
                    command,
                    f"Invalid symbol used: {symbol}.",
                )
        if len(symbol) > 1:
            return CommandFailure(
                FailureKind.MULTIPLE_SYMBOLS,
                command,
                f"Multiple symbols used: {symbol}.",
            )

        if not self.NUMBER_PATTERN.fullmatch(number_token):
            return CommandFailure(
                FailureKind.INVALID_NUMBER_FORMAT,
                command,
                f"Invalid number format used: {number_token}.",
            )
        try:
            number = int(number_token)
        except ValueError:
            # Literal longer than the interpreter allows for str-to-int conversion
            return CommandFailure(
                FailureKind.INVALID_NUMBER_FORMAT,
                command,
                f"Invalid number format used: {number_token}.",
            )
        if number < 0:
            return CommandFailure(
                FailureKind.NEGATIVE_NUMBER,
                command,
                f"Negative number used: {number}.",
            )
        if number == 0:
            return CommandFailure(
                FailureKind.ZERO_NUMBER,
                command,
                "Zero number not allowed.",
            )
        if number > MAX_MAGNITUDE:
            return CommandFailure(
                FailureKind.NUMBER_EXCEEDS_LIMIT,
                command,
                f"Number exceeds limit {MAX_MAGNITUDE}: {number}.",
            )

        return ParsedCommand(Direction(symbol), number)


def validate_command(command: str) -> ParsedCommand | CommandFailure:
    """
    Convenience function to validate a command string.

    Params:
        command: The command string to validate

    Returns:
        ParsedCommand on success, CommandFailure otherwise
    """
    validator = CommandValidator()
    return validator.validate(command)
