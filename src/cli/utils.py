"""Shared CLI utilities."""

import sys

import structlog
from rich.console import Console

console = Console()
logger = structlog.get_logger()


def get_components() -> dict:
    """Initialize the entry store and config."""
    from checkin.storage import EntryStore
    from cli.config import get_paths, load_config, load_config_model

    try:
        config_model = load_config_model()
    except ValueError as e:
        console.print(f"[red]Config error:[/] {e}")
        sys.exit(1)

    config = load_config()
    paths = get_paths(config)

    return {
        "config": config,
        "config_model": config_model,
        "paths": paths,
        "store": EntryStore(paths["entries_file"]),
    }
