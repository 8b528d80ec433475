"""
File handling around the movement engine.

Reads command lines until the ``Q`` sentinel, feeds them to a single
MovementEngine and writes the resulting log lines out.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from robot_movement.config import RunConfig
from robot_movement.exceptions.core import CommandFileError
from robot_movement.execution.engine import MovementEngine, OutputLog

logger = logging.getLogger(__name__)

SENTINEL = "Q"


def take_commands(lines: Iterable[str]) -> Iterator[str]:
    """
    Yield command lines up to, but not including, the sentinel line.

    Line terminators are stripped; nothing else is, since spacing is part of
    command validation.

    Params:
        lines: Raw input lines, with or without trailing newlines

    Yields:
        Command lines in input order
    """
    for line in lines:
        command = line.rstrip("\r\n")
        if command == SENTINEL:
            logger.info("Sentinel reached, ignoring remaining input")
            return
        yield command


def process_commands(
    lines: Iterable[str], engine: MovementEngine | None = None
) -> OutputLog:
    """
    Run command lines through one engine.

    Params:
        lines: Raw input lines
        engine: Engine to use; a fresh one starting at the origin by default

    Returns:
        Log lines in input order
    """
    engine = engine or MovementEngine()
    output: OutputLog = []
    for command in take_commands(lines):
        engine.process(command, output)
    return output


def read_commands(path: str | Path, encoding: str = "utf-8") -> OutputLog:
    """
    Read a command file and process it.

    Params:
        path: Command file, one command per line
        encoding: Text encoding of the file

    Returns:
        Log lines for every command before the sentinel

    Raises:
        CommandFileError: If the file cannot be read
    """
    try:
        with open(path, encoding=encoding) as f:
            return process_commands(f)
    except (OSError, UnicodeDecodeError) as e:
        raise CommandFileError(path, str(e)) from e


def write_output(path: str | Path, output: OutputLog, encoding: str = "utf-8") -> None:
    """
    Write log lines to a file, newline separated with no trailing newline.

    Raises:
        CommandFileError: If the file cannot be written
    """
    try:
        with open(path, "w", encoding=encoding, newline="\n") as f:
            f.write("\n".join(output))
    except OSError as e:
        raise CommandFileError(path, str(e)) from e


def process_file(
    input_path: str | Path,
    output_path: str | Path,
    config: RunConfig | None = None,
) -> OutputLog:
    """
    Process a command file into a log file.

    Params:
        input_path: Command file to read
        output_path: Log file to write
        config: Run settings; defaults apply when omitted

    Returns:
        The log lines that were written
    """
    config = config or RunConfig()
    logger.info("Processing commands from %s", input_path)
    output = read_commands(input_path, encoding=config.encoding)
    write_output(output_path, output, encoding=config.encoding)
    logger.info("Wrote %d log entries to %s", len(output), output_path)
    return output
