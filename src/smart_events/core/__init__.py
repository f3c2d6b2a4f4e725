"""Scheduling engine: calendar arithmetic, slot search and the event store."""

from .calendar_math import (
    conflicts,
    days_in_month,
    from_minutes,
    is_leap_year,
    is_valid_date,
    is_valid_time,
    parse_date,
    parse_time,
    to_minutes,
    today,
)
from .config import APP_NAME, DATA_DIR, ensure_data_dir
from .scheduler import find_free_slots, suggest_slots
from .store import EventStore

__all__ = [
    "APP_NAME",
    "DATA_DIR",
    "EventStore",
    "conflicts",
    "days_in_month",
    "ensure_data_dir",
    "find_free_slots",
    "from_minutes",
    "is_leap_year",
    "is_valid_date",
    "is_valid_time",
    "parse_date",
    "parse_time",
    "suggest_slots",
    "to_minutes",
    "today",
]
