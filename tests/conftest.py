"""Pytest fixtures for post tests."""

from pathlib import Path

import pytest

from post.errors import ClipboardUnavailable
from post.store import NoteStore


class RecordingClipboard:
    """Clipboard sink that remembers what it was given."""

    def __init__(self):
        self.copied = []

    def copy(self, text):
        self.copied.append(text)


class FailingClipboard:
    """Clipboard sink that is never available."""

    def __init__(self):
        self.calls = 0

    def copy(self, text):
        self.calls += 1
        raise ClipboardUnavailable("no clipboard in tests")


@pytest.fixture
def notes_path(tmp_path) -> Path:
    return tmp_path / "home" / "notes"


@pytest.fixture
def store(notes_path):
    return NoteStore(notes_path)


@pytest.fixture
def filled_store(store):
    """A store holding note-0 .. note-4, oldest first."""
    for i in range(5):
        store.append(f"note-{i}")
    return store


@pytest.fixture
def clipboard():
    return RecordingClipboard()


@pytest.fixture
def failing_clipboard():
    return FailingClipboard()
