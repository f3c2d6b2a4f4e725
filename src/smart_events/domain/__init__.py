"""Domain models for event scheduling."""

from __future__ import annotations

from .enums import AccessRole, OperationStatus
from .models import (
    EVENT_DURATION_MINUTES,
    Event,
    EventDate,
    EventStatistics,
    EventTime,
    OperationResult,
    SlotSuggestion,
    TimeSlot,
)

__all__ = [
    "EVENT_DURATION_MINUTES",
    "AccessRole",
    "Event",
    "EventDate",
    "EventStatistics",
    "EventTime",
    "OperationResult",
    "OperationStatus",
    "SlotSuggestion",
    "TimeSlot",
]
