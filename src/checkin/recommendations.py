"""Rule-based wellness recommendations from recent check-ins."""

from typing import Sequence

from .models import MOOD_MAX, MOOD_MIN, Entry, Recommendation

RECENT_WINDOW = 10

LOW_MOOD_MAX = 2.5
MID_MOOD_MAX = 3.5
NEGATIVE_SENTIMENT_BELOW = -0.1
NEUTRAL_MOOD = 3

COLD_START = (
    Recommendation("r_default", "Try a short 5-minute breathing exercise to start your day."),
    Recommendation("r_walk", "Go for a 10-minute walk outside, nature helps mood."),
)

LOW_MOOD = (
    Recommendation(
        "r_ground",
        "Try a grounding exercise: name 5 things you can see, 4 you can touch, 3 you can hear.",
    ),
    Recommendation("r_talk", "Consider reaching out to a friend or family for emotional support."),
)

MID_MOOD = (
    Recommendation("r_breathe", "Try a 3-4-5 breathing cycle for 3 minutes."),
    Recommendation("r_walk2", "Short physical activity (walk/stretch) can improve mood."),
)

HIGH_MOOD = (
    Recommendation(
        "r_keep", "You're doing well, keep your current routines and celebrate small wins."
    ),
)

NEGATIVE_SENTIMENT = (
    Recommendation(
        "r_journal", "Try journaling: write one honest paragraph about what's on your mind."
    ),
    Recommendation("r_sleep", "Focus on sleep hygiene: limit screens 1 hour before bed."),
)


def _mood_for_average(entry: Entry) -> int:
    mood = entry.mood
    if mood is None or not MOOD_MIN <= mood <= MOOD_MAX:
        return NEUTRAL_MOOD
    return mood


def _dedupe(candidates: list[Recommendation]) -> list[Recommendation]:
    """Drop later recommendations whose text was already seen."""
    seen = set()
    unique = []
    for rec in candidates:
        if rec.text in seen:
            continue
        seen.add(rec.text)
        unique.append(rec)
    return unique


def recommend(recent_entries: Sequence[Entry]) -> list[Recommendation]:
    """Select recommendations for the given recent window (newest first).

    The window is used as-is; callers trim it with ``recent_window``.
    """
    if not recent_entries:
        return list(COLD_START)

    count = len(recent_entries)
    avg_mood = sum(_mood_for_average(e) for e in recent_entries) / count
    avg_sentiment = (
        sum(e.sentiment if e.sentiment is not None else 0.0 for e in recent_entries) / count
    )

    if avg_mood <= LOW_MOOD_MAX:
        candidates = list(LOW_MOOD)
    elif avg_mood <= MID_MOOD_MAX:
        candidates = list(MID_MOOD)
    else:
        candidates = list(HIGH_MOOD)

    if avg_sentiment < NEGATIVE_SENTIMENT_BELOW:
        candidates.extend(NEGATIVE_SENTIMENT)

    return _dedupe(candidates)


def recent_window(entries: Sequence[Entry], size: int = RECENT_WINDOW) -> list[Entry]:
    """Newest-first slice of the collection, sorted by date (stable)."""
    ordered = sorted(entries, key=lambda e: e.date, reverse=True)
    return ordered[:size]
