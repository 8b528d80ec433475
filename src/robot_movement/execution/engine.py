"""
Movement engine: command execution and the correction cascade.

The engine owns the robot position for one processing run. Every raw command
is validated; valid commands move the robot, and malformed ones go through
the correction cascade until they are either executed or rejected. Every
outcome is recorded as a line in the caller's output log.
"""

import logging

from robot_movement.core.types import ParsedCommand, Position
from robot_movement.execution.corrections import (
    SPLIT_NOTICE,
    correction_message,
    error_message,
    insert_missing_space,
    invert_negative,
    split_symbols,
    uppercase_command,
    zero_removal_message,
)
from robot_movement.parsing.validator import (
    CommandFailure,
    CommandValidator,
    FailureKind,
)

logger = logging.getLogger(__name__)

OutputLog = list[str]


class MovementEngine:
    """
    Validates, corrects and executes movement commands against one position.

    Correction is driven by an explicit worklist of pending command strings
    instead of recursion. Resubmitted and split commands are pushed on top of
    the stack, so each input line (and each split sub-command) is resolved
    completely before the next one starts and log order follows input order.
    """

    def __init__(self, validator: CommandValidator | None = None):
        self.validator = validator or CommandValidator()
        self.position = Position()

    def execute(self, command: ParsedCommand) -> str:
        """
        Apply a validated command to the position.

        Params:
            command: Validated command

        Returns:
            Execution log entry embedding the new position
        """
        self.position.apply(command)
        return f"Executed command: {command} -> Position: {self.position}."

    def validate_and_execute(
        self, command: str, output: OutputLog
    ) -> CommandFailure | None:
        """
        Validate a raw command and execute it if it is well-formed.

        Nothing is mutated or logged when validation fails.

        Params:
            command: Raw command text
            output: Log to append the execution entry to

        Returns:
            None on success, otherwise the failure reported by the validator
        """
        result = self.validator.validate(command)
        if isinstance(result, CommandFailure):
            return result
        output.append(self.execute(result))
        return None

    def process(self, command: str, output: OutputLog) -> None:
        """
        Process one raw command line through the full correction cascade.

        Params:
            command: Raw command text
            output: Log to append execution, correction and rejection entries to
        """
        pending = [command]
        while pending:
            current = pending.pop()
            failure = self.validate_and_execute(current, output)
            if failure is None:
                continue
            logger.debug(
                "Command %r failed validation: %s", current, failure.kind.value
            )
            # Reversed so the first resubmitted command is popped first
            pending.extend(reversed(self._correct(failure, output)))

    def _correct(self, failure: CommandFailure, output: OutputLog) -> list[str]:
        """
        Apply the correction strategy mapped to a failure kind.

        Params:
            failure: Failure reported for the command
            output: Log to append correction or rejection entries to

        Returns:
            Commands to resubmit; empty when the outcome is terminal
        """
        command = failure.command

        if failure.kind == FailureKind.NO_SPACE_SEPARATOR:
            corrected = insert_missing_space(command)
            if corrected is None:
                output.append(error_message(f"Cannot interpret command: {command}."))
                return []
            output.append(correction_message("missing space", command, corrected))
            return [corrected]

        if failure.kind == FailureKind.LOWERCASE_LETTER:
            corrected = uppercase_command(command)
            output.append(correction_message("lowercase letter", command, corrected))
            return [corrected]

        if failure.kind == FailureKind.MULTIPLE_SYMBOLS:
            output.append(SPLIT_NOTICE)
            sub_commands = split_symbols(command)
            logger.debug("Split %r into %s", command, sub_commands)
            return sub_commands

        if failure.kind == FailureKind.NEGATIVE_NUMBER:
            corrected = invert_negative(command)
            output.append(correction_message("negative number", command, corrected))
            return [corrected]

        if failure.kind == FailureKind.ZERO_NUMBER:
            output.append(zero_removal_message(command))
            return []

        logger.debug("Rejected command %r: %s", command, failure.message)
        output.append(error_message(failure.message))
        return []
