"""Recommendation and scoring CLI commands."""

import click
from rich.console import Console

from cli.utils import get_components

console = Console()


@click.command()
def recommend():
    """Personalized recommendations from your recent check-ins."""
    from checkin.recommendations import recent_window
    from checkin.recommendations import recommend as build_recommendations

    c = get_components()
    window = c["config_model"].analysis.recent_window
    recs = build_recommendations(recent_window(c["store"].load(), size=window))

    console.print("[bold]Personalized recommendations[/]")
    for rec in recs:
        console.print(f"  • {rec.text}")


@click.command()
@click.argument("text")
def score(text: str):
    """Score the sentiment of TEXT without saving anything."""
    from checkin.sentiment import analyze_sentiment

    result = analyze_sentiment(text)
    console.print(
        f"Score: [bold]{result['score']:+.2f}[/] ({result['label']}) | "
        f"positive terms: {result['positive_count']} | negative terms: {result['negative_count']}"
    )
