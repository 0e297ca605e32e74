"""Missing-summary reminders.

Scans a project's daily notes and reports every *past* week, month, quarter
and year that has at least one daily entry but no summary note of its own.
The still-open period of each granularity is never reminded, and neither
is anything after it (daily notes can be dated in the future).
"""

from __future__ import annotations

from datetime import date, datetime

from loguru import logger

from teatime.core.exceptions import ParseError

from .models import Reminder
from .periods import SUMMARY_CATEGORIES, Category, parse_day, period_identifier
from .store import NoteStore


def compute_reminders(
    store: NoteStore,
    project: str,
    as_of: date | datetime | None = None,
) -> list[Reminder]:
    """Find every past period with daily entries but no summary.

    Args:
        store: Note Store to read from.
        project: Project to scan.
        as_of: The moment that defines the "current" periods. Captured once
            (defaults to now) so every granularity sees the same clock.

    Returns:
        Reminders ordered Weekly < Monthly < Quarterly < Yearly, then by
        period name descending (most recent first).

    Raises:
        StoreError: If the daily notes cannot be listed.
    """
    notes = store.list_notes(project, Category.DAILY)

    dates: list[date] = []
    for note in notes:
        try:
            dates.append(parse_day(note.name))
        except ParseError:
            logger.debug(f"Skipping daily note with unparseable name {note.name!r} in {project!r}")
    if not dates:
        return []

    if as_of is None:
        as_of = datetime.now()
    if isinstance(as_of, datetime):
        as_of = as_of.date()

    pending: dict[Category, set[str]] = {}
    for category in SUMMARY_CATEGORIES:
        current = period_identifier(as_of, category)
        # Canonical names sort chronologically within a category.
        pending[category] = {name for name in (period_identifier(d, category) for d in dates) if name < current}

    reminders = [
        Reminder.for_period(category, name)
        for category, names in pending.items()
        for name in names
        if not store.note_exists(project, category, name)
    ]

    # Two stable sorts: name descending, then category rank ascending.
    reminders.sort(key=lambda r: r.name, reverse=True)
    reminders.sort(key=lambda r: r.category.rank)

    logger.debug(f"Reminder scan for {project!r}: {len(dates)} daily notes, {len(reminders)} missing summaries")
    return reminders
