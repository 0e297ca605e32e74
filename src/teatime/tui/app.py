"""Interactive journal — terminal front-end with rich formatting."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from datetime import datetime

import click
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Confirm
from rich.table import Table
from rich.text import Text

from teatime.core.exceptions import ParseError, StoreError
from teatime.journal.config import JournalSettings
from teatime.journal.local import MarkdownNoteStore
from teatime.journal.models import NoteFile, Reminder
from teatime.journal.periods import Category, default_name, validate_period_name
from teatime.journal.reference import gather_reference
from teatime.journal.reminders import compute_reminders

from .render import (
    APP_TITLE,
    MENU_ITEMS,
    help_bar,
    note_body,
    notes_view,
    project_menu,
    projects_view,
    reference_label,
)

Editor = Callable[[str], str | None]

_MENU_CATEGORIES = {key: category for key, _, category in MENU_ITEMS if key != "e"}


def _parse_index(value: str, count: int) -> int | None:
    """1-based menu number -> 0-based index, or None if not a valid choice."""
    if not value.isdigit():
        return None
    idx = int(value) - 1
    return idx if 0 <= idx < count else None


class JournalApp:
    """Terminal journal with project list, project view, note list and editor.

    Runs an input loop on a rich console. Reminder scans and reference
    gathering run in a worker thread; each view captures "now" once through
    ``clock`` and passes it down.
    """

    def __init__(
        self,
        store: MarkdownNoteStore,
        settings: JournalSettings | None = None,
        *,
        console: Console | None = None,
        editor: Editor | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.store = store
        self.settings = settings or JournalSettings()
        self.console = console or Console()
        self.editor = editor or self._external_editor
        self.clock = clock
        self._running = False

    # -- lifecycle -------------------------------------------------------------

    async def start(self) -> None:
        """Start the interactive loop; returns when the user quits."""
        self._running = True
        self.console.print(
            Panel("Daily notes, rolled up into weekly, monthly, quarterly and yearly summaries.", title=APP_TITLE)
        )
        while self._running:
            project = self._project_list()
            if project is None:
                break
            await self._project_view(project)
        self.console.print("Goodbye!")

    async def stop(self) -> None:
        self._running = False

    # -- input / status helpers ------------------------------------------------

    def _ask(self, prompt: str) -> str:
        try:
            return self.console.input(f"[bold cyan]{escape(prompt)}>[/] ").strip()
        except (EOFError, KeyboardInterrupt):
            self.console.print()
            self._running = False
            return "q"

    def _confirm(self, question: str) -> bool:
        try:
            return Confirm.ask(question, console=self.console, default=False)
        except (EOFError, KeyboardInterrupt):
            return False

    def _success(self, message: str) -> None:
        self.console.print(Text(message, style="bold green"))

    def _error(self, message: str) -> None:
        self.console.print(Text(message, style="bold red"))

    def _external_editor(self, text: str) -> str | None:
        # None when the user quits without saving.
        return click.edit(text=text, editor=self.settings.editor or None, extension=".md", require_save=True)

    # -- screen: project list --------------------------------------------------

    def _project_list(self) -> str | None:
        refresh = True
        projects: list[str] = []
        while self._running:
            if refresh:
                try:
                    projects = self.store.list_projects()
                except StoreError as e:
                    self._error(f"Error: {e}")
                    projects = []
                self.console.print()
                self.console.print(Panel(projects_view(projects), title="Projects", title_align="left"))
                self.console.print(help_bar(("N", "open"), ("n", "new project"), ("x N", "delete"), ("q", "quit")))
            refresh = True

            cmd, _, arg = self._ask("project").partition(" ")
            arg = arg.strip()
            if cmd == "q":
                self._running = False
                return None
            if cmd == "n":
                self._new_project(arg)
                continue
            if cmd == "x":
                self._delete_project(projects, arg)
                continue
            idx = _parse_index(cmd, len(projects))
            if idx is not None:
                return projects[idx]
            if cmd:
                self._error(f"Unknown choice: {cmd}")
            refresh = False
        return None

    def _new_project(self, name: str) -> None:
        name = name or self._ask("Project name")
        if not name or not self._running:
            return
        try:
            created = self.store.create_project(name)
        except (ValueError, StoreError) as e:
            self._error(f"Error creating project: {e}")
            return
        self._success(f"Project {created!r} created ✓")

    def _delete_project(self, projects: list[str], arg: str) -> None:
        idx = _parse_index(arg, len(projects))
        if idx is None:
            self._error("Usage: x <project number>")
            return
        name = projects[idx]
        if not self._confirm(f"Delete project {escape(name)!r} and all its notes?"):
            return
        try:
            self.store.delete_project(name)
        except StoreError as e:
            self._error(f"Error deleting project: {e}")
            return
        self._success(f"Project {name!r} deleted")

    # -- screen: project view --------------------------------------------------

    async def _load_reminders(self, project: str, as_of: datetime) -> list[Reminder]:
        if not self.settings.show_reminders:
            return []
        try:
            return await asyncio.to_thread(compute_reminders, self.store, project, as_of)
        except StoreError as e:
            # Reminders are advisory; the view still works without them.
            logger.warning(f"Reminder scan failed for {project!r}: {e}")
            self._error(f"Could not check for missing summaries: {e}")
            return []

    async def _project_view(self, project: str) -> None:
        refresh = True
        reminders: list[Reminder] = []
        today = ""
        while self._running:
            if refresh:
                as_of = self.clock()
                today = default_name(Category.DAILY, as_of)
                reminders = await self._load_reminders(project, as_of)
                self._show_project_view(project, today, reminders)
            refresh = True

            choice = self._ask(project)
            if choice == "q":
                self._running = False
                return
            if choice == "b":
                return
            if choice == "e":
                await self._edit(project, Category.DAILY, today)
                continue
            if choice in _MENU_CATEGORIES:
                await self._note_list(project, _MENU_CATEGORIES[choice])
                continue
            idx = _parse_index(choice, len(reminders))
            if idx is not None:
                await self._edit(project, reminders[idx].category, reminders[idx].name)
                continue
            if choice:
                self._error(f"Unknown choice: {choice}")
            refresh = False

    def _show_project_view(self, project: str, today: str, reminders: list[Reminder]) -> None:
        try:
            today_note = self.store.read_note(project, Category.DAILY, today)
        except StoreError as e:
            self._error(f"Error loading note: {e}")
            today_note = ""

        grid = Table.grid(expand=True, padding=(0, 1))
        grid.add_column(ratio=2)
        grid.add_column(ratio=3)
        grid.add_row(
            Panel(project_menu(project, reminders), border_style="cyan"),
            Panel(
                note_body(
                    today_note,
                    markdown=self.settings.render_markdown,
                    empty_message="No entry for today yet.\nPress [e] to start writing.",
                ),
                title=f"📅 {today}",
                title_align="left",
            ),
        )
        self.console.print()
        self.console.print(Panel(grid, title=APP_TITLE, title_align="left", border_style="magenta"))
        self.console.print(help_bar(("N", "open reminder"), ("key", "menu"), ("b", "back"), ("q", "quit")))

    # -- screen: note list -----------------------------------------------------

    async def _note_list(self, project: str, category: Category) -> None:
        refresh = True
        notes: list[NoteFile] = []
        while self._running:
            if refresh:
                try:
                    notes = self.store.list_notes(project, category)
                except StoreError as e:
                    self._error(f"Error listing notes: {e}")
                    return
                self.console.print()
                self.console.print(
                    Panel(notes_view(category, notes), title=f"{APP_TITLE} — {project}", title_align="left")
                )
                self.console.print(
                    help_bar(
                        ("N", "edit"), ("v N", "preview"), ("n [NAME]", "new note"), ("x N", "delete"), ("b", "back")
                    )
                )
            refresh = True

            cmd, _, arg = self._ask(category.label).partition(" ")
            arg = arg.strip()
            if cmd == "q":
                self._running = False
                return
            if cmd == "b":
                return
            if cmd == "n":
                name = arg or default_name(category, self.clock())
                try:
                    validate_period_name(category, name)
                except ParseError as e:
                    self._error(str(e))
                    refresh = False
                    continue
                await self._edit(project, category, name)
                continue
            if cmd == "v":
                idx = _parse_index(arg, len(notes))
                if idx is None:
                    self._error("Usage: v <note number>")
                else:
                    self._preview(project, notes[idx])
                refresh = False
                continue
            if cmd == "x":
                idx = _parse_index(arg, len(notes))
                if idx is None:
                    self._error("Usage: x <note number>")
                    refresh = False
                else:
                    self._delete_note(project, notes[idx])
                continue
            idx = _parse_index(cmd, len(notes))
            if idx is not None:
                await self._edit(project, category, notes[idx].name)
                continue
            if cmd:
                self._error(f"Unknown choice: {cmd}")
            refresh = False

    def _preview(self, project: str, note: NoteFile) -> None:
        try:
            content = self.store.read_note(project, note.category, note.name)
        except StoreError as e:
            self._error(f"Error loading note: {e}")
            return
        self.console.print(
            Panel(
                note_body(content, markdown=self.settings.render_markdown),
                title=f"📄 {escape(note.name)}",
                title_align="left",
            )
        )

    def _delete_note(self, project: str, note: NoteFile) -> None:
        if not self._confirm(f"Delete {escape(note.name)}?"):
            return
        try:
            self.store.delete_note(project, note.category, note.name)
        except StoreError as e:
            self._error(f"Error deleting note: {e}")
            return
        self._success(f"Deleted {note.name}")

    # -- screen: edit ----------------------------------------------------------

    async def _load_reference(self, project: str, category: Category, name: str) -> str:
        try:
            return await asyncio.to_thread(gather_reference, self.store, project, category, name)
        except (StoreError, ParseError) as e:
            return f"(error loading reference: {e})"

    async def _edit(self, project: str, category: Category, name: str) -> None:
        self.console.print()
        self.console.rule(escape(f"{APP_TITLE} — {project} — {name} [edit]"), align="left")
        self.console.print(Text(category.label, style="dim"))

        if category is not Category.DAILY:
            reference = await self._load_reference(project, category, name)
            self.console.print(
                Panel(
                    note_body(reference, markdown=self.settings.render_markdown),
                    title=reference_label(category),
                    title_align="left",
                    border_style="magenta",
                )
            )

        try:
            content = self.store.read_note(project, category, name)
        except StoreError as e:
            self._error(f"Error loading note: {e}")
            return

        edited = self.editor(content)
        if edited is None:
            self.console.print(Text("Edit cancelled", style="dim"))
            return

        try:
            self.store.write_note(project, category, name, edited)
        except StoreError as e:
            self._error(f"Error saving: {e}")
            return
        self._success("Saved ✓")
