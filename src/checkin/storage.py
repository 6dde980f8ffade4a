"""JSON-file persistence for the check-in collection."""

import json
import os
import tempfile
from datetime import date
from pathlib import Path

import structlog

from .models import Entry

logger = structlog.get_logger()

STORAGE_KEY = "wellness_app_entries_v1"


class StoreReadError(ValueError):
    """Raised when the store file exists but cannot be read or parsed."""


def sort_newest_first(entries: list[Entry]) -> list[Entry]:
    return sorted(entries, key=lambda e: e.date, reverse=True)


class EntryStore:
    """Key-value JSON file holding the serialized entry list under one slot."""

    def __init__(self, path: str | Path, key: str = STORAGE_KEY):
        self.path = Path(path).expanduser()
        self.key = key

    def _read_slots(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with open(self.path) as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise StoreReadError(f"Cannot read {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StoreReadError(f"Expected a JSON object in {self.path}")
        return data

    def _load_strict(self) -> list[Entry]:
        """Load entries newest first, raising StoreReadError on a damaged store."""
        raw = self._read_slots().get(self.key) or []
        if not isinstance(raw, list):
            raise StoreReadError(f"Slot '{self.key}' in {self.path} is not a list")

        today = date.today().isoformat()
        entries = [
            Entry.from_dict(item, default_date=today) for item in raw if isinstance(item, dict)
        ]
        return sort_newest_first(entries)

    def load(self) -> list[Entry]:
        """Load entries newest first. Unreadable stores yield an empty list."""
        try:
            return self._load_strict()
        except StoreReadError as e:
            logger.error("store.load_failed", path=str(self.path), error=str(e))
            return []

    def save(self, entries: list[Entry]) -> None:
        """Write entries to the slot, keeping any other slots in the file.

        Raises:
            StoreReadError: If the existing file is damaged; it is left untouched
        """
        slots = self._read_slots()
        slots[self.key] = [e.to_dict() for e in entries]

        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=".entries_", suffix=".json")
        try:
            with os.fdopen(fd, "w") as f:
                json.dump(slots, f, indent=2)
            os.replace(tmp, self.path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise

        logger.debug("store.saved", path=str(self.path), count=len(entries))

    def add(self, entry: Entry) -> list[Entry]:
        """Prepend an entry, re-sort newest first, persist. Returns the new collection."""
        entries = sort_newest_first([entry, *self._load_strict()])
        self.save(entries)
        return entries

    def get(self, entry_id: str) -> Entry | None:
        for entry in self._load_strict():
            if entry.id == entry_id:
                return entry
        return None

    def delete(self, entry_id: str) -> bool:
        entries = self._load_strict()
        remaining = [e for e in entries if e.id != entry_id]
        if len(remaining) == len(entries):
            return False
        self.save(remaining)
        return True

    def clear(self) -> int:
        """Remove all entries. Returns how many were removed."""
        count = len(self._load_strict())
        self.save([])
        logger.info("store.cleared", count=count)
        return count
