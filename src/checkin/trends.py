"""Daily mood and sentiment trends over check-in entries."""

from collections import defaultdict
from typing import Iterable, Sequence

import numpy as np

from shared_types import MoodTrend

from .models import Entry, QuickStats, TrendPoint

NEUTRAL_MOOD = 3


def _mood_or_default(entry: Entry) -> float:
    return entry.mood if entry.mood is not None else NEUTRAL_MOOD


def _sentiment_or_default(entry: Entry) -> float:
    return entry.sentiment if entry.sentiment is not None else 0.0


def aggregate(entries: Iterable[Entry]) -> list[TrendPoint]:
    """Group entries by date and reduce each day to its mean mood and sentiment.

    Dates without entries are absent from the result. Points are sorted
    ascending by date string. Missing sentiment counts as 0, missing mood
    as neutral (3).
    """
    buckets: dict[str, list[Entry]] = defaultdict(list)
    for entry in entries:
        buckets[entry.date].append(entry)

    points = []
    for day, group in buckets.items():
        count = len(group)
        points.append(
            TrendPoint(
                date=day,
                mean_mood=round(sum(_mood_or_default(e) for e in group) / count, 2),
                mean_sentiment=round(sum(_sentiment_or_default(e) for e in group) / count, 2),
            )
        )

    return sorted(points, key=lambda p: p.date)


def quick_stats(entries: Sequence[Entry]) -> QuickStats:
    """Overall entry count and averages across the whole collection."""
    if not entries:
        return QuickStats()

    count = len(entries)
    return QuickStats(
        count=count,
        avg_mood=round(sum(_mood_or_default(e) for e in entries) / count, 2),
        avg_sentiment=round(sum(_sentiment_or_default(e) for e in entries) / count, 2),
    )


def _calc_slope(values: list[float]) -> float:
    """Least-squares slope of values over their index."""
    if len(values) < 2:
        return 0.0
    x = np.arange(len(values), dtype=float)
    y = np.array(values, dtype=float)
    return float(np.polyfit(x, y, 1)[0])


def mood_direction(points: Sequence[TrendPoint], threshold: float = 0.1) -> MoodTrend:
    """Classify the mood series as improving, declining or stable."""
    slope = _calc_slope([p.mean_mood for p in points])
    if slope > threshold:
        return MoodTrend.IMPROVING
    if slope < -threshold:
        return MoodTrend.DECLINING
    return MoodTrend.STABLE
