"""CLI entry point for the wellness tracker."""

import sys
from pathlib import Path

import click

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from cli.commands import (  # noqa: E402
    checkin,
    clear,
    delete,
    export,
    init,
    list_entries,
    recommend,
    score,
    stats,
    trends,
)
from cli.config import get_paths, load_config_model  # noqa: E402
from cli.logging_config import setup_logging  # noqa: E402


@click.group()
@click.version_option(version="0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """Wellness - daily mood check-ins, trends and recommendations."""
    try:
        config = load_config_model()
    except ValueError as e:
        click.echo(f"Config error: {e}", err=True)
        sys.exit(1)

    level = "DEBUG" if verbose else config.logging.level
    log_file = get_paths(config.to_dict())["log_file"]
    setup_logging(json_mode=config.logging.json_mode, level=level, log_file=log_file)


cli.add_command(checkin)
cli.add_command(list_entries)
cli.add_command(delete)
cli.add_command(clear)
cli.add_command(stats)
cli.add_command(trends)
cli.add_command(recommend)
cli.add_command(score)
cli.add_command(export)
cli.add_command(init)


if __name__ == "__main__":
    cli()
