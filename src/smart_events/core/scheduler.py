from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from ..config.settings import SchedulingSettings
from ..domain.models import EVENT_DURATION_MINUTES, Event, EventDate, SlotSuggestion, TimeSlot
from .calendar_math import from_minutes, intervals_overlap


def occupied_intervals(events: Iterable[Event], day: EventDate, *, exclude_id: Optional[int] = None) -> List[Tuple[int, int]]:
    busy = [
        (event.start_minutes, event.start_minutes + EVENT_DURATION_MINUTES)
        for event in events
        if event.date == day and event.id != exclude_id
    ]
    busy.sort()
    return busy


def find_free_slots(
    busy: List[Tuple[int, int]],
    *,
    duration: int = EVENT_DURATION_MINUTES,
    settings: Optional[SchedulingSettings] = None,
) -> List[Tuple[int, int]]:
    """Scan the working window in fixed steps and keep candidates that touch no busy span."""

    settings = settings or SchedulingSettings()
    found: List[Tuple[int, int]] = []
    cursor = settings.work_start
    while cursor + duration <= settings.work_end and len(found) < settings.max_suggestions:
        end = cursor + duration
        if not any(intervals_overlap(cursor, end, start, stop) for start, stop in busy):
            found.append((cursor, end))
        cursor += settings.slot_step
    return found


def suggest_slots(
    events: Iterable[Event],
    day: EventDate,
    *,
    duration: int = EVENT_DURATION_MINUTES,
    settings: Optional[SchedulingSettings] = None,
    exclude_id: Optional[int] = None,
) -> SlotSuggestion:
    busy = occupied_intervals(events, day, exclude_id=exclude_id)
    spans = find_free_slots(busy, duration=duration, settings=settings)
    slots = tuple(TimeSlot(start=from_minutes(start), end=from_minutes(end)) for start, end in spans)
    return SlotSuggestion(date=day, duration=duration, slots=slots)
