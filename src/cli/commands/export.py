"""Data export CLI command."""

from pathlib import Path
from typing import Optional

import click
import structlog
from rich.console import Console

from cli.utils import get_components

console = Console()
logger = structlog.get_logger()


@click.command()
@click.option(
    "-o", "--output", type=click.Path(), help="Output path (default: wellness-entries-<date>.json)"
)
def export(output: Optional[str]):
    """Export all check-ins as JSON."""
    from checkin.export import EntryExporter

    c = get_components()
    exporter = EntryExporter(c["store"])

    with console.status("Exporting..."):
        path, count = exporter.export_json(Path(output) if output else None)

    logger.info("export.written", path=str(path), count=count)
    console.print(f"[green]Exported {count} entries to {path}[/]")
