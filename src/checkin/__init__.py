from .models import Entry, EntryValidationError, Recommendation, TrendPoint, new_entry
from .recommendations import recommend, recent_window
from .sentiment import score
from .storage import EntryStore
from .trends import aggregate

__all__ = [
    "Entry",
    "EntryValidationError",
    "EntryStore",
    "Recommendation",
    "TrendPoint",
    "aggregate",
    "new_entry",
    "recent_window",
    "recommend",
    "score",
]
