"""CLI interface for taskpad."""

from __future__ import annotations

import json
from pathlib import Path

import click
from pydantic import ValidationError
from rich.console import Console
from rich.text import Text

from taskpad import __version__
from taskpad.config import TaskpadConfig
from taskpad.logging_setup import setup_logging
from taskpad.session import TaskSession

console = Console()

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="taskpad")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON file with display and logging settings",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Diagnostic log level (written to stderr)",
)
@click.pass_context
def main(ctx: click.Context, config_path: Path | None, log_level: str | None) -> None:
    """taskpad - a console task list manager.

    Tasks live in memory for the duration of one session.

    \b
    Usage:
      taskpad                # Start the interactive session
      taskpad run            # Same, explicitly
    """
    ctx.ensure_object(dict)

    try:
        config = TaskpadConfig.load(config_path)
    except (ValidationError, json.JSONDecodeError, UnicodeDecodeError) as e:
        console.print("[red]Invalid config file:[/red]", Text(str(config_path)))
        console.print(Text(str(e), style="dim"), highlight=False)
        ctx.exit(1)

    if log_level:
        config.log_level = log_level.upper()
    setup_logging(config.log_level)

    ctx.obj["config"] = config

    if ctx.invoked_subcommand is None:
        ctx.invoke(run)


@main.command()
@click.pass_context
def run(ctx: click.Context) -> None:
    """Start the interactive task manager session."""
    config: TaskpadConfig = ctx.obj["config"]
    TaskSession(console=console, config=config).run()
