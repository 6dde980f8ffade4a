"""Check-in CLI commands."""

import sys
from typing import Optional

import click
import structlog
from rich.console import Console
from rich.table import Table

from checkin.models import EntryValidationError, mood_label, new_entry
from checkin.sentiment import analyze_sentiment
from checkin.storage import StoreReadError
from cli.utils import get_components

console = Console()
logger = structlog.get_logger()

MOOD_STYLE = {1: "red", 2: "yellow", 3: "white", 4: "green", 5: "bold green"}


def _sentiment_str(value: Optional[float]) -> str:
    return f"{round(value or 0.0, 2):+.2f}"


@click.command()
@click.argument("mood", type=int)
@click.argument("note", required=False, default="")
@click.option("-d", "--date", "entry_date", help="Check-in date (YYYY-MM-DD, defaults to today)")
def checkin(mood: int, note: str, entry_date: Optional[str]):
    """Record a check-in: MOOD from 1 (low) to 5 (great) and an optional NOTE."""
    c = get_components()

    try:
        entry = new_entry(mood, note=note, date=entry_date)
    except EntryValidationError as e:
        console.print(f"[red]Invalid check-in:[/] {e}")
        sys.exit(1)

    try:
        c["store"].add(entry)
    except StoreReadError as e:
        console.print(f"[red]Store error:[/] {e}")
        sys.exit(1)
    logger.info("checkin.created", entry_id=entry.id, date=entry.date, mood=entry.mood)
    logger.debug(
        "checkin.scored", entry_id=entry.id, sentiment=entry.sentiment, note_preview=note[:80]
    )

    label = analyze_sentiment(note)["label"]
    console.print(
        f"[green]Saved:[/] {entry.date} mood {entry.mood}/5 ({mood_label(entry.mood)}), "
        f"sentiment {_sentiment_str(entry.sentiment)} {label}"
    )


@click.command("list")
@click.option("-n", "--limit", default=None, type=int, help="Max entries to show")
def list_entries(limit: Optional[int]):
    """List recent check-ins."""
    c = get_components()
    limit = limit or c["config_model"].analysis.recent_display
    entries = c["store"].load()[:limit]

    if not entries:
        console.print("[yellow]No entries yet, make your first check-in![/]")
        return

    table = Table(show_header=True)
    table.add_column("Date", style="cyan")
    table.add_column("Mood")
    table.add_column("Sentiment", justify="right")
    table.add_column("Note")
    table.add_column("ID", style="dim")

    for e in entries:
        style = MOOD_STYLE.get(e.mood, "dim")
        mood = f"[{style}]{mood_label(e.mood)}[/] {e.mood if e.mood is not None else '?'}/5"
        table.add_row(e.date, mood, _sentiment_str(e.sentiment), e.note[:40], e.id)

    console.print(table)


@click.command()
@click.argument("entry_id")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
def delete(entry_id: str, yes: bool):
    """Delete a check-in by id."""
    c = get_components()
    try:
        entry = c["store"].get(entry_id)
    except StoreReadError as e:
        console.print(f"[red]Store error:[/] {e}")
        sys.exit(1)
    if entry is None:
        console.print(f"[red]Not found:[/] {entry_id}")
        sys.exit(1)

    if not yes and not click.confirm(f"Delete check-in from {entry.date}?"):
        return

    c["store"].delete(entry_id)
    logger.info("checkin.deleted", entry_id=entry_id)
    console.print(f"[green]Deleted:[/] {entry_id}")


@click.command()
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
def clear(yes: bool):
    """Delete all check-ins."""
    c = get_components()
    if not yes and not click.confirm("Delete all entries? This cannot be undone."):
        return

    try:
        count = c["store"].clear()
    except StoreReadError as e:
        console.print(f"[red]Store error:[/] {e}")
        sys.exit(1)
    console.print(f"[green]Cleared[/] {count} entries")
