"""Date/time validation and the interval arithmetic behind conflict checks.

Dates travel as ``DD-MM-YYYY`` text and times as ``HH:MM`` (24h) text at the
edges of the system. Validation helpers never raise; the ``parse_*`` helpers
raise ``ValueError`` and are meant for text that was already validated.
"""

from __future__ import annotations

from datetime import date
from typing import Callable, Optional

from ..domain.models import EVENT_DURATION_MINUTES, Event, EventDate, EventTime
from .config import MAX_YEAR, MIN_YEAR, MINUTES_PER_DAY

_DIGITS = frozenset("0123456789")
_DAYS_IN_MONTH = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(month: int, year: int) -> int:
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month]


def _digits_at(text: str, positions: range | tuple[int, ...]) -> bool:
    return all(text[index] in _DIGITS for index in positions)


def is_valid_date(text: object) -> bool:
    if not isinstance(text, str) or len(text) != 10 or text[2] != "-" or text[5] != "-":
        return False
    if not _digits_at(text, (0, 1, 3, 4, 6, 7, 8, 9)):
        return False
    day, month, year = int(text[0:2]), int(text[3:5]), int(text[6:10])
    if year < MIN_YEAR or year > MAX_YEAR:
        return False
    if month < 1 or month > 12:
        return False
    return 1 <= day <= days_in_month(month, year)


def is_valid_time(text: object) -> bool:
    if not isinstance(text, str) or len(text) != 5 or text[2] != ":":
        return False
    if not _digits_at(text, (0, 1, 3, 4)):
        return False
    hour, minute = int(text[0:2]), int(text[3:5])
    return 0 <= hour <= 23 and 0 <= minute <= 59


def parse_date(text: str) -> EventDate:
    if not is_valid_date(text):
        raise ValueError(f"Invalid date {text!r}; expected DD-MM-YYYY")
    return EventDate(year=int(text[6:10]), month=int(text[3:5]), day=int(text[0:2]))


def parse_time(text: str) -> EventTime:
    if not is_valid_time(text):
        raise ValueError(f"Invalid time {text!r}; expected HH:MM (24h)")
    return EventTime(hour=int(text[0:2]), minute=int(text[3:5]))


def coerce_date(value: EventDate | str) -> Optional[EventDate]:
    """Return ``value`` as an ``EventDate``, or None when the text is malformed."""

    if isinstance(value, EventDate):
        return value
    return parse_date(value) if is_valid_date(value) else None


def to_minutes(value: EventTime | str) -> int:
    if isinstance(value, str):
        value = parse_time(value)
    return value.minutes


def from_minutes(minutes: int) -> EventTime:
    # Negative input clamps to midnight; everything else wraps around the day.
    minutes = max(minutes, 0) % MINUTES_PER_DAY
    return EventTime(hour=minutes // 60, minute=minutes % 60)


def intervals_overlap(start_a: int, end_a: int, start_b: int, end_b: int) -> bool:
    return start_a < end_b and start_b < end_a


def conflicts(first: Event, second: Event) -> bool:
    if first.date != second.date:
        return False
    return intervals_overlap(
        first.start_minutes,
        first.start_minutes + EVENT_DURATION_MINUTES,
        second.start_minutes,
        second.start_minutes + EVENT_DURATION_MINUTES,
    )


def today(clock: Callable[[], date] = date.today) -> EventDate:
    current = clock()
    return EventDate(year=current.year, month=current.month, day=current.day)


__all__ = [
    "conflicts",
    "coerce_date",
    "days_in_month",
    "from_minutes",
    "intervals_overlap",
    "is_leap_year",
    "is_valid_date",
    "is_valid_time",
    "parse_date",
    "parse_time",
    "to_minutes",
    "today",
]
