"""Data models for check-ins and the insight derived from them."""

import uuid
from dataclasses import dataclass
from datetime import date as date_cls
from datetime import datetime
from typing import Optional

from .sentiment import score

MOOD_MIN = 1
MOOD_MAX = 5
MOOD_LABELS = ("Low", "Meh", "Okay", "Good", "Great")


class EntryValidationError(ValueError):
    """Raised when a check-in fails validation at construction time."""


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass
class Entry:
    """One check-in record.

    ``mood`` and ``sentiment`` are optional so that records loaded from
    older or hand-edited stores survive; the analysis functions apply
    their own defaults for missing values.
    """

    id: str
    date: str
    mood: Optional[int] = None
    note: str = ""
    sentiment: Optional[float] = None
    created_at: str = ""

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "date": self.date,
            "mood": self.mood,
            "note": self.note,
            "sentiment": self.sentiment,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: dict, default_date: Optional[str] = None) -> "Entry":
        """Build an entry from its persisted form, tolerating missing or mistyped fields.

        Values of the wrong type are dropped to their defaults rather than
        passed on to the analysis functions.
        """
        mood = data.get("mood")
        sentiment = data.get("sentiment")
        note = data.get("note")
        entry_date = data.get("date")
        if not isinstance(entry_date, str) or not entry_date:
            entry_date = default_date or date_cls.today().isoformat()
        created_at = data.get("createdAt")

        return cls(
            id=str(data.get("id") or uuid.uuid4().hex[:8]),
            date=entry_date,
            mood=mood if _is_number(mood) and isinstance(mood, int) else None,
            note=note if isinstance(note, str) else "",
            sentiment=float(sentiment) if _is_number(sentiment) else None,
            created_at=created_at if isinstance(created_at, str) else "",
        )


@dataclass(frozen=True)
class TrendPoint:
    """Mean mood and sentiment for one calendar date."""

    date: str
    mean_mood: float
    mean_sentiment: float

    def to_dict(self) -> dict:
        return {"date": self.date, "meanMood": self.mean_mood, "meanSentiment": self.mean_sentiment}


@dataclass(frozen=True)
class Recommendation:
    id: str
    text: str


@dataclass(frozen=True)
class QuickStats:
    count: int = 0
    avg_mood: Optional[float] = None
    avg_sentiment: Optional[float] = None


def _validate_mood(mood) -> int:
    if isinstance(mood, bool) or not isinstance(mood, int):
        raise EntryValidationError(f"Mood must be an integer, got {mood!r}")
    if not MOOD_MIN <= mood <= MOOD_MAX:
        raise EntryValidationError(f"Mood must be between {MOOD_MIN} and {MOOD_MAX}, got {mood}")
    return mood


def _validate_date(value: str) -> str:
    try:
        return date_cls.fromisoformat(value).isoformat()
    except (TypeError, ValueError):
        raise EntryValidationError(f"Date must be YYYY-MM-DD, got {value!r}")


def new_entry(
    mood,
    note: str = "",
    date: Optional[str] = None,
    now: Optional[datetime] = None,
) -> Entry:
    """Create a validated entry with its sentiment derived from ``note``.

    Raises:
        EntryValidationError: If mood is not an integer in [1, 5] or date is malformed
    """
    mood = _validate_mood(mood)
    now = now or datetime.now()
    entry_date = _validate_date(date) if date else now.date().isoformat()
    note = note or ""

    return Entry(
        id=uuid.uuid4().hex[:8],
        date=entry_date,
        mood=mood,
        note=note,
        sentiment=score(note),
        created_at=now.isoformat(),
    )


def mood_label(mood: Optional[int]) -> str:
    """Human label for a mood rating, clamped to the ends of the scale."""
    if mood is None:
        return "?"
    index = min(MOOD_MAX, max(MOOD_MIN, int(mood))) - MOOD_MIN
    return MOOD_LABELS[index]
