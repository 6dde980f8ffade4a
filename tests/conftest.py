"""Shared test fixtures for the wellness tracker."""

import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from checkin.models import Entry  # noqa: E402


@pytest.fixture
def make_entry():
    """Factory for entries with explicit fields (no scoring, no validation)."""
    counter = {"n": 0}

    def _make(date="2024-01-01", mood=3, sentiment=0.0, note=""):
        counter["n"] += 1
        return Entry(
            id=f"e{counter['n']}",
            date=date,
            mood=mood,
            note=note,
            sentiment=sentiment,
            created_at=f"{date}T09:00:00",
        )

    return _make


@pytest.fixture
def entries_file(tmp_path):
    return tmp_path / "data" / "entries.json"


@pytest.fixture
def store(entries_file):
    from checkin.storage import EntryStore

    return EntryStore(entries_file)


@pytest.fixture
def isolated_home(tmp_path, monkeypatch):
    """Point HOME and cwd at a temp dir so no real config or data is touched."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    return home
