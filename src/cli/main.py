"""CLI entry point for moodtrack."""

import click

from cli.commands import (
    calendar,
    entries,
    export,
    init,
    log,
    serve,
    stats,
    suggest,
    tags,
    trend,
    week,
)
from cli.config import load_config
from cli.logging_config import setup_logging


@click.group()
@click.version_option(version="0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """moodtrack - Personal mood tracker."""
    try:
        config = load_config()
    except ValueError:
        # Commands report config errors themselves; log with defaults meanwhile
        setup_logging(level="DEBUG" if verbose else "WARNING")
        return
    setup_logging(
        json_mode=config.logging.json_mode,
        level="DEBUG" if verbose else config.logging.level,
        log_file=config.paths.log_file,
        file_level=config.logging.file_level,
    )


for command in (log, suggest, entries, week, calendar, trend, stats, tags, export, init, serve):
    cli.add_command(command)


if __name__ == "__main__":
    cli()
