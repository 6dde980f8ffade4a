"""Check-in export functionality."""

import json
from datetime import date
from pathlib import Path
from typing import Optional

from .storage import EntryStore


def default_export_name(today: Optional[date] = None) -> str:
    return f"wellness-entries-{(today or date.today()).isoformat()}.json"


class EntryExporter:
    """Export the entry collection as JSON."""

    def __init__(self, store: EntryStore):
        self.store = store

    def export_json(self, output_path: Optional[Path] = None) -> tuple[Path, int]:
        """Export all entries to JSON.

        Args:
            output_path: Output file path (defaults to wellness-entries-<today>.json in cwd)

        Returns:
            (path written, number of entries exported)
        """
        entries = self.store.load()
        output_path = Path(output_path) if output_path else Path.cwd() / default_export_name()
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w") as f:
            json.dump([e.to_dict() for e in entries], f, indent=2)

        return output_path, len(entries)
