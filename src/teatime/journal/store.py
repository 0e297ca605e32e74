"""NoteStore protocol — the contract between the journal engines and storage.

The reminder and reference engines only ever read through this protocol,
so any backend that can list, read and test for named markdown blobs keyed
by (project, category, name) can be plugged in. ``MarkdownNoteStore`` in
``teatime.journal.local`` is the filesystem implementation.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .models import NoteFile
from .periods import Category


@runtime_checkable
class NoteStore(Protocol):
    """Read-side contract for journal backends."""

    def list_notes(self, project: str, category: Category) -> list[NoteFile]:
        """Return every note of one category for a project.

        A missing category directory is created rather than reported.

        Raises:
            StoreError: If the listing itself cannot be performed.
        """
        ...

    def read_note(self, project: str, category: Category, name: str) -> str:
        """Return the note's text, or ``""`` if no such note exists.

        Raises:
            StoreError: On any I/O failure other than "not found".
        """
        ...

    def note_exists(self, project: str, category: Category, name: str) -> bool:
        """Whether the note exists. Never raises."""
        ...
