"""Reference bundles shown while writing a summary.

A weekly summary is written next to that week's daily entries, a monthly
one next to the weekly summaries of the weeks it overlaps, and so on up to
the year. The bundle is a read-only view; it is rebuilt on every request.
"""

from __future__ import annotations

from .periods import (
    Category,
    days_of_week,
    month_word,
    months_of_quarter,
    quarters_of_year,
    weekday_word,
    weeks_overlapping_month,
)
from .store import NoteStore

NO_SUMMARY = "(no summary)"
NO_DAILY_ENTRIES = "(no daily entries for this week)"
NO_WEEKLY_SUMMARIES = "(no weekly summaries for this month)"

BLOCK_SEPARATOR = "\n\n"


def block_header(title: str) -> str:
    return f"── {title} ──"


def _block(title: str, content: str) -> str:
    return f"{block_header(title)}\n{content or NO_SUMMARY}"


def gather_reference(store: NoteStore, project: str, category: Category, name: str) -> str:
    """Content of the period one level below ``name``, with headers.

    Daily notes have no reference and yield ``""``.

    Raises:
        ParseError: If ``name`` is not a valid period of ``category``.
        StoreError: On the first note that cannot be read. Partial bundles
            are never returned.
    """
    category = Category(category)
    if category is Category.WEEKLY:
        return _daily_for_week(store, project, name)
    if category is Category.MONTHLY:
        return _weekly_for_month(store, project, name)
    if category is Category.QUARTERLY:
        return _monthly_for_quarter(store, project, name)
    if category is Category.YEARLY:
        return _quarterly_for_year(store, project, name)
    return ""


def _daily_for_week(store: NoteStore, project: str, name: str) -> str:
    # Only days that actually have an entry are shown.
    parts = []
    for day in days_of_week(name):
        content = store.read_note(project, Category.DAILY, day.isoformat())
        if content:
            parts.append(_block(f"{day.isoformat()} ({weekday_word(day)})", content))
    if not parts:
        return NO_DAILY_ENTRIES
    return BLOCK_SEPARATOR.join(parts)


def _weekly_for_month(store: NoteStore, project: str, name: str) -> str:
    # Every overlapping week is listed so the gaps are visible.
    parts = [
        _block(week, store.read_note(project, Category.WEEKLY, week)) for week in weeks_overlapping_month(name)
    ]
    if not parts:
        return NO_WEEKLY_SUMMARIES
    return BLOCK_SEPARATOR.join(parts)


def _monthly_for_quarter(store: NoteStore, project: str, name: str) -> str:
    parts = [
        _block(f"{month} ({month_word(month)})", store.read_note(project, Category.MONTHLY, month))
        for month in months_of_quarter(name)
    ]
    return BLOCK_SEPARATOR.join(parts)


def _quarterly_for_year(store: NoteStore, project: str, name: str) -> str:
    parts = [
        _block(quarter, store.read_note(project, Category.QUARTERLY, quarter)) for quarter in quarters_of_year(name)
    ]
    return BLOCK_SEPARATOR.join(parts)
