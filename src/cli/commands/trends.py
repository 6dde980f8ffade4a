"""Trends and stats CLI commands."""

import click
from rich.console import Console
from rich.table import Table

from cli.utils import get_components
from shared_types import MoodTrend

console = Console()

DIRECTION_STYLE = {
    MoodTrend.IMPROVING: "[green]improving[/]",
    MoodTrend.STABLE: "[dim]stable[/]",
    MoodTrend.DECLINING: "[red]declining[/]",
}


def _fmt(value) -> str:
    return "—" if value is None else f"{value}"


@click.command()
def trends():
    """Show daily mood and sentiment trends."""
    from checkin.trends import aggregate, mood_direction

    c = get_components()
    points = aggregate(c["store"].load())

    if not points:
        console.print("[yellow]No trends to show yet, add a few check-ins.[/]")
        return

    table = Table(title="Mood & sentiment by day", show_header=True)
    table.add_column("Date", style="cyan")
    table.add_column("Mood", justify="right")
    table.add_column("Sentiment", justify="right")
    table.add_column("Trend", min_width=5)

    for p in points:
        bar = "█" * round(p.mean_mood)
        table.add_row(p.date, f"{p.mean_mood:.2f}", f"{p.mean_sentiment:+.2f}", bar)

    console.print(table)

    threshold = c["config_model"].analysis.trend_threshold
    direction = mood_direction(points, threshold=threshold)
    console.print(f"\n[bold]Mood direction:[/] {DIRECTION_STYLE[direction]}")


@click.command()
def stats():
    """Show quick stats across all check-ins."""
    from checkin.trends import quick_stats

    c = get_components()
    s = quick_stats(c["store"].load())

    console.print(f"Entries: [bold]{s.count}[/]")
    console.print(f"Average mood: [bold]{_fmt(s.avg_mood)}[/]")
    console.print(f"Average sentiment: [bold]{_fmt(s.avg_sentiment)}[/]")
