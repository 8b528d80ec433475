"""
Correction strategies for malformed movement commands.

Each recoverable failure kind has exactly one deterministic repair. The
functions here only rewrite text; deciding when to apply them and
resubmitting the result is the engine's job.
"""

from robot_movement.core.types import Direction
from robot_movement.parsing.validator import split_tokens

SPLIT_NOTICE = "Split multiple symbols into separate commands."


def insert_missing_space(command: str) -> str | None:
    """
    Insert a space at the first letter-to-digit boundary.
    Digits are ASCII only, the same set the number token accepts.

    The scan runs left to right and stops at the first boundary found, so
    ``"NE5"`` becomes ``"NE 5"`` and ``"N5E6"`` becomes ``"N 5E6"``.

    Params:
        command: Command text without a space separator

    Returns:
        Corrected command, or None if no letter is directly followed by a digit
    """
    for i in range(1, len(command)):
        if command[i - 1].isalpha() and "0" <= command[i] <= "9":
            return f"{command[:i]} {command[i:]}"
    return None


def uppercase_command(command: str) -> str:
    return command.upper()


def invert_negative(command: str) -> str:
    """
    Turn a negative move into a positive move in the opposite direction.

    Params:
        command: Command with a cardinal symbol and a negative integer

    Returns:
        Command such as ``"S 10"`` for ``"N -10"``
    """
    symbol, number_token = split_tokens(command)
    direction = Direction(symbol).opposite
    return f"{direction.value} {abs(int(number_token))}"


def split_symbols(command: str) -> list[str]:
    """
    Fan a multi-symbol command out into one command per symbol character.

    Params:
        command: Command whose symbol token has several characters

    Returns:
        Sub-commands in symbol order, all sharing the original number token
    """
    symbols, number_token = split_tokens(command)
    return [f"{symbol} {number_token}" for symbol in symbols]


def correction_message(label: str, before: str, after: str) -> str:
    return f"Corrected {label}: {before} -> {after}."


def zero_removal_message(command: str) -> str:
    return f"Removed command with zero number: {command}."


def error_message(message: str) -> str:
    return f"Error: {message}"
