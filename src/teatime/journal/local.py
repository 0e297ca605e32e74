"""
Filesystem Note Store.

Layout::

    ~/.teatime/
        <project>/
            days/       2025-01-15.md ...
            weeks/      2025-W03.md ...
            months/     2025-01.md ...
            quarters/   2025-Q1.md ...
            years/      2025.md ...

One human-readable markdown file per note, no index or manifest.
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path

from loguru import logger

from teatime.core.exceptions import StoreError, StoreKeyError
from teatime.core.utils.file_io import read_if_exists, safe_write, sanitize_name

from .models import NoteFile
from .periods import Category

DEFAULT_ROOT = Path.home() / ".teatime"
NOTE_SUFFIX = ".md"


class MarkdownNoteStore:
    """Markdown-file-backed Note Store rooted at a single directory."""

    def __init__(self, root: str | Path = DEFAULT_ROOT) -> None:
        self.root = Path(root).expanduser().resolve()
        try:
            self.root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StoreError(f"Could not create teatime directory {self.root}: {e}") from e

    # -- path helpers ----------------------------------------------------------

    @staticmethod
    def _check_segment(value: str, what: str) -> str:
        """Reject names that could escape the root or collide with hidden dirs."""
        raw = value or ""
        if not raw.strip():
            raise StoreError(f"{what} name cannot be empty.")
        if raw != raw.strip():
            raise StoreError(f"{what} name {value!r} has leading or trailing whitespace.")
        if "\x00" in raw:
            raise StoreError(f"{what} name cannot contain null bytes.")
        if "/" in raw or "\\" in raw or raw in (".", "..") or raw.startswith("."):
            raise StoreError(f"Unsafe {what.lower()} name {value!r}.")
        return raw

    def _project_dir(self, project: str) -> Path:
        return self.root / self._check_segment(project, "Project")

    def _category_dir(self, project: str, category: Category) -> Path:
        return self._project_dir(project) / Category(category).value

    def note_path(self, project: str, category: Category, name: str) -> Path:
        """Path of a note on disk (the file need not exist)."""
        return self._category_dir(project, category) / (self._check_segment(name, "Note") + NOTE_SUFFIX)

    # -- projects --------------------------------------------------------------

    def list_projects(self) -> list[str]:
        """Names of all project directories, sorted alphabetically."""
        try:
            entries = list(os.scandir(self.root))
        except OSError as e:
            raise StoreError(f"Could not read teatime directory {self.root}: {e}") from e
        return sorted(e.name for e in entries if e.is_dir() and not e.name.startswith("."))

    def create_project(self, name: str) -> str:
        """Create a project with all category directories.

        Returns:
            The sanitized project name actually used on disk.

        Raises:
            ValueError: If nothing usable is left after sanitizing.
        """
        clean = sanitize_name(name)
        if not clean:
            raise ValueError("Project name cannot be empty")
        project_dir = self._project_dir(clean)
        for category in Category:
            directory = project_dir / category.value
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise StoreError(f"Could not create directory {directory}: {e}") from e
        logger.info(f"Created project {clean!r}")
        return clean

    def delete_project(self, name: str) -> None:
        """Remove a project directory and everything in it."""
        project_dir = self._project_dir(name)
        if not project_dir.is_dir():
            raise StoreKeyError(f"Project {name!r} does not exist")
        try:
            shutil.rmtree(project_dir)
        except OSError as e:
            raise StoreError(f"Could not delete project {name!r}: {e}") from e
        logger.info(f"Deleted project {name!r}")

    def project_exists(self, name: str) -> bool:
        try:
            return self._project_dir(name).is_dir()
        except (StoreError, OSError):
            return False

    # -- notes -----------------------------------------------------------------

    def list_notes(self, project: str, category: Category) -> list[NoteFile]:
        """All notes of a category, most recent (highest name) first.

        The category directory is created if it is missing.
        """
        category = Category(category)
        directory = self._category_dir(project, category)
        try:
            directory.mkdir(parents=True, exist_ok=True)
            entries = list(os.scandir(directory))
        except OSError as e:
            raise StoreError(f"Could not read directory {directory}: {e}") from e

        notes = [
            NoteFile(name=entry.name[: -len(NOTE_SUFFIX)], category=category, path=Path(entry.path))
            for entry in entries
            if entry.name.endswith(NOTE_SUFFIX) and not entry.is_dir()
        ]
        notes.sort(key=lambda n: n.name, reverse=True)
        return notes

    def read_note(self, project: str, category: Category, name: str) -> str:
        """Note content, or ``""`` when the note does not exist."""
        path = self.note_path(project, category, name)
        try:
            return read_if_exists(path)
        except (OSError, UnicodeDecodeError) as e:
            raise StoreError(f"Could not read note {path}: {e}") from e

    def write_note(self, project: str, category: Category, name: str, content: str) -> None:
        """Create or overwrite a note."""
        path = self.note_path(project, category, name)
        try:
            safe_write(path, content)
        except OSError as e:
            raise StoreError(f"Could not write note {path}: {e}") from e
        logger.info(f"Saved {Category(category).value}/{name} in {project!r} ({len(content)} chars)")

    def delete_note(self, project: str, category: Category, name: str) -> None:
        path = self.note_path(project, category, name)
        if not os.path.isfile(path):
            raise StoreKeyError(f"Note {name!r} does not exist")
        try:
            path.unlink()
        except OSError as e:
            raise StoreError(f"Could not delete note {path}: {e}") from e
        logger.info(f"Deleted {Category(category).value}/{name} in {project!r}")

    def note_exists(self, project: str, category: Category, name: str) -> bool:
        try:
            path = self.note_path(project, category, name)
        except StoreError:
            return False
        return os.path.exists(path)
