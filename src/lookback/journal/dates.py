"""Calendar dates and ISO-8601 week numbers.

Everything here works on naive ``datetime.date`` values, so no local timezone
can shift a note into a neighbouring day or week.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Any

_DATE_PATTERN = re.compile(r"^([0-9]{4})-([0-9]{2})-([0-9]{2})(?:[Tt ].*)?$")


@dataclass(frozen=True)
class DateParts:
    """A validated calendar date.

    Construct through :func:`parse_date`, :func:`coerce_date` or
    :meth:`from_date`; the constructor itself rejects impossible dates.
    """

    year: int
    month: int
    day: int

    def __post_init__(self):
        # raises ValueError for 2026-02-30 and friends
        date(self.year, self.month, self.day)

    @classmethod
    def from_date(cls, value: date) -> DateParts:
        return cls(value.year, value.month, value.day)

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    @property
    def sort_key(self) -> int:
        """``YYYYMMDD`` as an integer; orders dates chronologically."""
        return self.year * 10000 + self.month * 100 + self.day

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.isoformat()


def parse_date(text: Any) -> DateParts | None:
    """Parse ``YYYY-MM-DD`` with an optional time suffix.

    The suffix must start with ``T`` or a space and is ignored. Returns None
    for anything that is not a string, does not have that shape, or does not
    name a real calendar day.
    """
    if not isinstance(text, str):
        return None

    match = _DATE_PATTERN.match(text.strip())
    if not match:
        return None

    year, month, day = (int(group) for group in match.groups())
    try:
        check = date(year, month, day)
    except ValueError:
        return None

    if (check.year, check.month, check.day) != (year, month, day):
        return None
    return DateParts(year, month, day)


def coerce_date(value: Any) -> DateParts | None:
    """Interpret a frontmatter value as a date.

    YAML loads unquoted ``2026-01-09`` as a ``date`` and timestamps as
    ``datetime``, so those are accepted alongside strings. Aware datetimes are
    converted to UTC before taking the calendar day.
    """
    if isinstance(value, str):
        return parse_date(value)
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return DateParts.from_date(value.date())
    if isinstance(value, date):
        return DateParts.from_date(value)
    return None


def iso_week(parts: DateParts) -> int:
    """Return the ISO-8601 week number (1-53) of *parts*.

    The date is moved to the Thursday of its week; that Thursday's year is the
    week-year and its ordinal day, divided by seven and rounded up, is the week.
    """
    day = parts.to_date()
    thursday = day + timedelta(days=4 - day.isoweekday())
    year_start = date(thursday.year, 1, 1)
    day_of_year = (thursday - year_start).days + 1
    return (day_of_year + 6) // 7


def format_iso_week(parts: DateParts) -> str:
    """Format as ``YYYY-Www`` using the ISO week-year."""
    day = parts.to_date()
    thursday = day + timedelta(days=4 - day.isoweekday())
    return f"{thursday.year:04d}-W{iso_week(parts):02d}"
