"""CLI command modules."""

from .checkin import checkin, clear, delete, list_entries
from .export import export
from .init import init
from .recommend import recommend, score
from .trends import stats, trends

__all__ = [
    "checkin",
    "list_entries",
    "delete",
    "clear",
    "stats",
    "trends",
    "recommend",
    "score",
    "export",
    "init",
]
