"""Rendering helpers for the interactive journal.

Pure functions that turn journal values into rich renderables; the app
decides when and where to print them.
"""

from __future__ import annotations

from rich.console import RenderableType
from rich.markdown import Markdown
from rich.table import Table
from rich.text import Text

from teatime.journal.models import NoteFile, Reminder
from teatime.journal.periods import Category

APP_TITLE = "🍵 teatime"

# (key, label, category) for the project view menu
MENU_ITEMS: tuple[tuple[str, str, Category], ...] = (
    ("e", "Edit today", Category.DAILY),
    ("d", "Daily notes", Category.DAILY),
    ("w", "Weekly notes", Category.WEEKLY),
    ("m", "Monthly notes", Category.MONTHLY),
    ("Q", "Quarterly notes", Category.QUARTERLY),
    ("y", "Yearly notes", Category.YEARLY),
)

_REFERENCE_LABELS = {
    Category.WEEKLY: "📋 Daily entries",
    Category.MONTHLY: "📋 Weekly summaries",
    Category.QUARTERLY: "📋 Monthly summaries",
    Category.YEARLY: "📋 Quarterly summaries",
}


def reference_label(category: Category) -> str:
    """Title of the reference pane shown while editing a summary."""
    return _REFERENCE_LABELS.get(category, "📋 Reference")


def help_bar(*entries: tuple[str, str]) -> Text:
    """One-line key help, e.g. ``[n] new project  [q] quit``."""
    text = Text(style="dim")
    for i, (key, action) in enumerate(entries):
        if i:
            text.append("  ")
        text.append(f"[{key}]", style="bold magenta")
        text.append(f" {action}")
    return text


def note_body(content: str, *, markdown: bool = True, empty_message: str = "(empty)") -> RenderableType:
    if not content.strip():
        return Text(empty_message, style="dim")
    return Markdown(content) if markdown else Text(content)


def projects_view(projects: list[str]) -> RenderableType:
    if not projects:
        return Text("No projects yet. Press [n] to create one.", style="dim")
    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_column(style="bold magenta", justify="right")
    table.add_column()
    for i, name in enumerate(projects, 1):
        table.add_row(str(i), name)
    return table


def project_menu(project: str, reminders: list[Reminder]) -> Text:
    """Left pane of the project view: reminders first, then the menu.

    Reminders are numbered so they can be picked directly.
    """
    text = Text()
    text.append(f"{project}\n\n", style="bold underline")
    if reminders:
        text.append("⚠ Missing summaries:\n", style="bold yellow")
        for i, reminder in enumerate(reminders, 1):
            text.append(f"  {i:>2}. ", style="bold magenta")
            text.append(f"• {reminder.label}\n", style="yellow")
        text.append("\n")
    for key, label, _ in MENU_ITEMS:
        text.append(f"  [{key}] ", style="bold magenta")
        text.append(f"{label}\n")
    return text


def notes_view(category: Category, notes: list[NoteFile]) -> RenderableType:
    if not notes:
        return Text("No notes yet.\nPress [n] to create one.", style="dim")
    table = Table(title=category.label, title_justify="left", show_header=False, box=None, padding=(0, 1))
    table.add_column(style="bold magenta", justify="right")
    table.add_column()
    for i, note in enumerate(notes, 1):
        table.add_row(str(i), note.name)
    return table
