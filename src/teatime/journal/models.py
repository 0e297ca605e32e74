"""Value types shared by the Note Store, the engines and the front-end.

All of them are immutable and computed on demand; nothing here is cached.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .periods import Category


@dataclass(frozen=True)
class NoteFile:
    """A markdown note on disk.

    Attributes:
        name: Period name without extension, e.g. ``"2025-01-15"``.
        category: Which category directory the note lives in.
        path: Full path to the ``.md`` file.
    """

    name: str
    category: Category
    path: Path


@dataclass(frozen=True)
class Reminder:
    """A past period that has daily entries but no summary note yet."""

    category: Category
    name: str
    label: str

    @classmethod
    def for_period(cls, category: Category, name: str) -> Reminder:
        return cls(category=category, name=name, label=f"{category.adjective} summary for {name}")

    def __str__(self) -> str:
        return self.label
