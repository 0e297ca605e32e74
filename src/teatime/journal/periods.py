"""Calendar arithmetic and canonical period names.

Every note lives in one of five period categories, finest to coarsest::

    Daily      2025-01-15
    Weekly     2025-W03     (ISO 8601 week numbering)
    Monthly    2025-01
    Quarterly  2025-Q1      (Jan-Mar, Apr-Jun, Jul-Sep, Oct-Dec)
    Yearly     2025

All functions here are pure. Anything that depends on "now" takes the as-of
date as an argument instead of reading the clock.
"""

from __future__ import annotations

import calendar
import re
from datetime import date, datetime, timedelta
from enum import StrEnum

from teatime.core.exceptions import ParseError


class Category(StrEnum):
    """Period category. The value doubles as the on-disk directory name."""

    DAILY = "days"
    WEEKLY = "weeks"
    MONTHLY = "months"
    QUARTERLY = "quarters"
    YEARLY = "years"

    @property
    def rank(self) -> int:
        """Position in the finest-to-coarsest order (Daily = 0)."""
        return _ORDER.index(self)

    @property
    def parent(self) -> Category | None:
        """The next coarser category, or None for Yearly."""
        idx = self.rank + 1
        return _ORDER[idx] if idx < len(_ORDER) else None

    @property
    def child(self) -> Category | None:
        """The next finer category, or None for Daily."""
        return _ORDER[self.rank - 1] if self.rank > 0 else None

    @property
    def adjective(self) -> str:
        return _ADJECTIVES[self]

    @property
    def label(self) -> str:
        return f"{self.adjective} Notes"


_ORDER: tuple[Category, ...] = tuple(Category)

_ADJECTIVES = {
    Category.DAILY: "Daily",
    Category.WEEKLY: "Weekly",
    Category.MONTHLY: "Monthly",
    Category.QUARTERLY: "Quarterly",
    Category.YEARLY: "Yearly",
}

SUMMARY_CATEGORIES: tuple[Category, ...] = _ORDER[1:]

_DAY_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
_WEEK_RE = re.compile(r"^(\d{4})-W(\d{2})$")
_MONTH_RE = re.compile(r"^(\d{4})-(\d{2})$")
_QUARTER_RE = re.compile(r"^(\d{4})-Q([1-4])$")
_YEAR_RE = re.compile(r"^(\d{4})$")


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def _match(pattern: re.Pattern[str], name: str, what: str) -> re.Match[str]:
    m = pattern.match(name) if isinstance(name, str) else None
    if m is None:
        raise ParseError(f"Invalid {what} name: {name!r}")
    return m


def parse_day(name: str) -> date:
    """Parse ``YYYY-MM-DD`` into a date."""
    m = _match(_DAY_RE, name, "day")
    try:
        return date(int(m.group(1)), int(m.group(2)), int(m.group(3)))
    except ValueError as e:
        raise ParseError(f"Invalid day name: {name!r} ({e})") from e


def weeks_in_iso_year(year: int) -> int:
    """Number of ISO weeks (52 or 53) in an ISO year."""
    # Dec 28 always falls in the last ISO week of its year.
    return date(year, 12, 28).isocalendar()[1]


def parse_week(name: str) -> tuple[int, int]:
    """Parse ``YYYY-Www`` into ``(iso_year, week)``."""
    m = _match(_WEEK_RE, name, "week")
    year, week = int(m.group(1)), int(m.group(2))
    if year < 1 or not 1 <= week <= weeks_in_iso_year(year):
        raise ParseError(f"Invalid week name: {name!r} (no such ISO week)")
    return year, week


def parse_month(name: str) -> tuple[int, int]:
    """Parse ``YYYY-MM`` into ``(year, month)``."""
    m = _match(_MONTH_RE, name, "month")
    year, month = int(m.group(1)), int(m.group(2))
    if year < 1 or not 1 <= month <= 12:
        raise ParseError(f"Invalid month name: {name!r}")
    return year, month


def parse_quarter(name: str) -> tuple[int, int]:
    """Parse ``YYYY-Qq`` into ``(year, quarter)``."""
    m = _match(_QUARTER_RE, name, "quarter")
    year = int(m.group(1))
    if year < 1:
        raise ParseError(f"Invalid quarter name: {name!r}")
    return year, int(m.group(2))


def parse_year(name: str) -> int:
    """Parse ``YYYY`` into an int."""
    year = int(_match(_YEAR_RE, name, "year").group(1))
    if year < 1:
        raise ParseError(f"Invalid year name: {name!r}")
    return year


_PARSERS = {
    Category.DAILY: parse_day,
    Category.WEEKLY: parse_week,
    Category.MONTHLY: parse_month,
    Category.QUARTERLY: parse_quarter,
    Category.YEARLY: parse_year,
}


def validate_period_name(category: Category, name: str) -> str:
    """Return ``name`` unchanged if it is canonical for ``category``.

    Raises:
        ParseError: If the name is malformed or names an impossible period.
    """
    _PARSERS[category](name)
    return name


# ---------------------------------------------------------------------------
# Date -> name
# ---------------------------------------------------------------------------


def week_name(d: date) -> str:
    iso_year, week, _ = d.isocalendar()
    return f"{iso_year:04d}-W{week:02d}"


def quarter_of(d: date) -> str:
    """Quarter name containing ``d``: Jan-Mar -> Q1 ... Oct-Dec -> Q4."""
    return f"{d.year:04d}-Q{(d.month - 1) // 3 + 1}"


def period_identifier(d: date, category: Category) -> str:
    """Canonical name of the ``category`` period that contains ``d``."""
    if isinstance(d, datetime):
        d = d.date()
    if category is Category.DAILY:
        return d.isoformat()
    if category is Category.WEEKLY:
        return week_name(d)
    if category is Category.MONTHLY:
        return f"{d.year:04d}-{d.month:02d}"
    if category is Category.QUARTERLY:
        return quarter_of(d)
    return f"{d.year:04d}"


def default_name(category: Category, as_of: date) -> str:
    """Default name for a new note: the period that is current at ``as_of``."""
    return period_identifier(as_of, category)


# ---------------------------------------------------------------------------
# Name -> dates / child periods
# ---------------------------------------------------------------------------


def monday_of_iso_week(name: str) -> date:
    """Monday that starts the ISO week ``YYYY-Www``."""
    year, week = parse_week(name)
    # Jan 4 is always in ISO week 1.
    jan4 = date(year, 1, 4)
    monday_week1 = jan4 - timedelta(days=jan4.isoweekday() - 1)
    return monday_week1 + timedelta(weeks=week - 1)


def days_of_week(name: str) -> list[date]:
    """The 7 dates, Monday through Sunday, of an ISO week."""
    monday = monday_of_iso_week(name)
    try:
        return [monday + timedelta(days=i) for i in range(7)]
    except OverflowError as e:
        raise ParseError(f"Invalid week name: {name!r} (runs past {date.max})") from e


def days_of_month(name: str) -> list[date]:
    year, month = parse_month(name)
    _, length = calendar.monthrange(year, month)
    return [date(year, month, day) for day in range(1, length + 1)]


def weeks_overlapping_month(name: str) -> list[str]:
    """ISO weeks with at least one day in the month, first occurrence order.

    Weeks that straddle a month boundary show up in both months.
    """
    weeks: list[str] = []
    for d in days_of_month(name):
        wk = week_name(d)
        if wk not in weeks:
            weeks.append(wk)
    return weeks


def months_of_quarter(name: str) -> list[str]:
    """The 3 month names of a quarter, in calendar order."""
    year, quarter = parse_quarter(name)
    start_month = (quarter - 1) * 3 + 1
    return [f"{year:04d}-{start_month + i:02d}" for i in range(3)]


def quarters_of_year(name: str) -> list[str]:
    """``YYYY-Q1`` .. ``YYYY-Q4``."""
    year = parse_year(name)
    return [f"{year:04d}-Q{q}" for q in range(1, 5)]


def month_word(name: str) -> str:
    """English month name for ``YYYY-MM`` (e.g. ``"January"``)."""
    _, month = parse_month(name)
    return _MONTH_WORDS[month - 1]


def weekday_word(d: date) -> str:
    return _WEEKDAY_WORDS[d.weekday()]


_MONTH_WORDS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

_WEEKDAY_WORDS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
