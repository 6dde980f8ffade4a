"""Init CLI command."""

import sys

import click
import yaml
from rich.console import Console

from cli.config import default_config_path, get_paths, load_config
from cli.config_models import WellnessConfig

console = Console()

SAMPLE_CHECKINS = [
    (4, "Feeling calm and grateful after a long walk."),
    (2, "A bit anxious and tired before the deadline."),
    (3, "Ordinary day, nothing special."),
]


@click.command()
@click.option("--samples", is_flag=True, help="Create sample check-ins for demo/onboarding")
def init(samples: bool):
    """Initialize data directories, config, and optionally sample data."""
    config = load_config()
    paths = get_paths(config)

    for name, path in paths.items():
        path.parent.mkdir(parents=True, exist_ok=True)
        console.print(f"[green]✓[/] {name}: {path}")

    config_path = default_config_path()
    if not config_path.exists():
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w") as f:
            yaml.safe_dump(WellnessConfig().to_yaml_dict(), f, default_flow_style=False)
        console.print(f"[green]✓[/] Created config: {config_path}")

    if samples:
        from checkin.models import new_entry
        from checkin.storage import EntryStore, StoreReadError

        store = EntryStore(paths["entries_file"])
        for mood, note in SAMPLE_CHECKINS:
            entry = new_entry(mood, note=note)
            try:
                store.add(entry)
            except StoreReadError as e:
                console.print(f"[red]Store error:[/] {e}")
                sys.exit(1)
            console.print(f"[green]✓[/] Sample: {entry.id} ({note})")

    console.print("\n[bold]Ready![/] Run [cyan]wellness checkin 3 'How was today?'[/] to start.")
