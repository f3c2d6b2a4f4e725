from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .enums import OperationStatus

# Every event occupies a fixed one-hour block.
EVENT_DURATION_MINUTES = 60


@dataclass(frozen=True, order=True, slots=True)
class EventDate:
    """Calendar day compared as (year, month, day); rendered as DD-MM-YYYY."""

    year: int
    month: int
    day: int

    def __str__(self) -> str:
        return f"{self.day:02d}-{self.month:02d}-{self.year:04d}"


@dataclass(frozen=True, order=True, slots=True)
class EventTime:
    hour: int
    minute: int

    @property
    def minutes(self) -> int:
        return self.hour * 60 + self.minute

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


@dataclass(frozen=True, slots=True)
class Event:
    id: int
    name: str
    date: EventDate
    time: EventTime
    event_type: str
    location: str = ""

    @property
    def start_minutes(self) -> int:
        return self.time.minutes

    @property
    def end_minutes(self) -> int:
        return self.time.minutes + EVENT_DURATION_MINUTES

    @property
    def location_label(self) -> str:
        return self.location or "TBA"

    def sort_key(self) -> Tuple[EventDate, int]:
        return (self.date, self.start_minutes)

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "date": str(self.date),
            "time": str(self.time),
            "type": self.event_type,
            "location": self.location,
        }


@dataclass(frozen=True, slots=True)
class TimeSlot:
    start: EventTime
    end: EventTime

    def __str__(self) -> str:
        return f"{self.start} to {self.end}"


@dataclass(frozen=True, slots=True)
class SlotSuggestion:
    date: EventDate
    duration: int
    slots: Tuple[TimeSlot, ...] = ()

    @property
    def found(self) -> bool:
        return bool(self.slots)


@dataclass(frozen=True, slots=True)
class OperationResult:
    ok: bool
    status: OperationStatus
    message: str
    event: Optional[Event] = None
    conflict: Optional[Event] = None
    suggestion: Optional[SlotSuggestion] = None

    def __bool__(self) -> bool:
        return self.ok


@dataclass(frozen=True, slots=True)
class EventStatistics:
    total: int
    by_type: List[Tuple[str, int]] = field(default_factory=list)
    top_dates: List[Tuple[EventDate, int]] = field(default_factory=list)
