"""Robot movement CLI -- process movement command files from the terminal.

Loaded via the ``robot-movement`` entry point defined in pyproject.toml.
"""

from __future__ import annotations

import logging

import click

from robot_movement.config import LOG_LEVELS, RunConfig
from robot_movement.exceptions.core import RobotMovementError
from robot_movement.runner import process_commands, process_file


def _load_config(config_path: str | None, log_level: str | None) -> RunConfig:
    """Build run settings from an optional YAML file and CLI overrides."""
    config = RunConfig.from_yaml(config_path) if config_path else RunConfig()
    if log_level:
        config = RunConfig(encoding=config.encoding, log_level=log_level)
    logging.basicConfig(
        level=config.logging_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return config


@click.group()
@click.option(
    "--config",
    "config_path",
    default=None,
    envvar="ROBOT_MOVEMENT_CONFIG",
    type=click.Path(dir_okay=False),
    help="YAML file with run settings.",
)
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Diagnostic log level (overrides the config file).",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, log_level: str | None) -> None:
    """Validate, auto-correct and execute robot movement commands."""
    ctx.ensure_object(dict)
    try:
        ctx.obj["config"] = _load_config(config_path, log_level)
    except RobotMovementError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1) from None


@cli.command()
@click.argument("input_path", type=click.Path(dir_okay=False))
@click.argument("output_path", type=click.Path(dir_okay=False))
@click.pass_context
def run(ctx: click.Context, input_path: str, output_path: str) -> None:
    """Process the commands in INPUT_PATH and write the log to OUTPUT_PATH."""
    try:
        output = process_file(input_path, output_path, ctx.obj["config"])
    except RobotMovementError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1) from None
    click.echo(f"Wrote {len(output)} log entries to {output_path}")


@cli.command()
@click.argument("commands", nargs=-1, required=True)
def explain(commands: tuple[str, ...]) -> None:
    """Process COMMANDS in one run and print every log entry."""
    for line in process_commands(commands):
        click.echo(line)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
