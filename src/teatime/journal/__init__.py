"""Journal core: calendar naming, the Note Store, reminders and references.

Provides the period ``Category`` tag set, pure calendar functions, a
``NoteStore`` protocol with a markdown-directory implementation, the
missing-summary reminder scan and reference-bundle gathering.
"""

from .config import JournalSettings
from .local import MarkdownNoteStore
from .models import NoteFile, Reminder
from .periods import (
    Category,
    days_of_week,
    default_name,
    monday_of_iso_week,
    months_of_quarter,
    period_identifier,
    quarter_of,
    quarters_of_year,
    validate_period_name,
    weeks_overlapping_month,
)
from .reference import gather_reference
from .reminders import compute_reminders
from .store import NoteStore

__all__ = [
    "Category",
    "JournalSettings",
    "MarkdownNoteStore",
    "NoteFile",
    "NoteStore",
    "Reminder",
    "compute_reminders",
    "days_of_week",
    "default_name",
    "gather_reference",
    "monday_of_iso_week",
    "months_of_quarter",
    "period_identifier",
    "quarter_of",
    "quarters_of_year",
    "validate_period_name",
    "weeks_overlapping_month",
]
