from __future__ import annotations

import logging
import threading
from collections import Counter
from dataclasses import replace
from typing import Callable, Iterable, List, Optional, TypeVar

from ..config.settings import SchedulingSettings
from ..domain.enums import OperationStatus
from ..domain.models import (
    EVENT_DURATION_MINUTES,
    Event,
    EventDate,
    EventStatistics,
    OperationResult,
    SlotSuggestion,
)
from .calendar_math import coerce_date, conflicts, is_valid_date, is_valid_time, parse_date, parse_time
from .scheduler import suggest_slots

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _same_name(first: str, second: str) -> bool:
    return first.casefold() == second.casefold()


def _is_blank(value: Optional[str]) -> bool:
    return value is None or value == ""


class EventStore:
    """Owns the live events and applies validated mutations to them.

    Every read and write goes through ``mutate`` so that the duplicate and
    conflict checks, which read the whole collection before writing, never
    interleave with another caller.
    """

    def __init__(self, scheduling: Optional[SchedulingSettings] = None) -> None:
        self.scheduling = scheduling or SchedulingSettings()
        self._events: List[Event] = []
        self._next_id = 1
        self._lock = threading.RLock()

    def mutate(self, callback: Callable[[List[Event]], T]) -> T:
        with self._lock:
            return callback(self._events)

    @property
    def next_id(self) -> int:
        return self._next_id

    def __len__(self) -> int:
        return self.mutate(len)

    def events(self) -> List[Event]:
        return self.mutate(list)

    def get(self, event_id: int) -> Optional[Event]:
        def _find(events: List[Event]) -> Optional[Event]:
            return next((event for event in events if event.id == event_id), None)

        return self.mutate(_find)

    # Validation ----------------------------------------------------------
    @staticmethod
    def _find_duplicate(events: Iterable[Event], candidate: Event) -> Optional[Event]:
        for existing in events:
            if existing.id == candidate.id:
                continue
            if (
                _same_name(existing.name, candidate.name)
                and existing.date == candidate.date
                and existing.time == candidate.time
            ):
                return existing
        return None

    @staticmethod
    def _find_conflict(events: Iterable[Event], candidate: Event) -> Optional[Event]:
        for existing in events:
            if existing.id != candidate.id and conflicts(candidate, existing):
                return existing
        return None

    def _conflict_result(self, events: List[Event], candidate: Event, clash: Event, message: str) -> OperationResult:
        # Suggestions are computed over the committed events, unchanged by the candidate.
        suggestion = suggest_slots(events, candidate.date, settings=self.scheduling)
        logger.info("Rejected event %s: conflicts with event %s at %s", candidate.name, clash.id, clash.time)
        return OperationResult(
            ok=False,
            status=OperationStatus.CONFLICT,
            message=message,
            conflict=clash,
            suggestion=suggestion,
        )

    # CRUD ----------------------------------------------------------------
    def add_event(self, name: str, date: str, time: str, event_type: str, location: str = "") -> OperationResult:
        if not is_valid_date(date):
            return OperationResult(False, OperationStatus.INVALID_DATE, "Invalid date. Use DD-MM-YYYY.")
        if not is_valid_time(time):
            return OperationResult(False, OperationStatus.INVALID_TIME, "Invalid time. Use HH:MM (24h).")
        if not name:
            return OperationResult(False, OperationStatus.INVALID_NAME, "Event name is required.")

        def _add(events: List[Event]) -> OperationResult:
            candidate = Event(
                id=self._next_id,
                name=name,
                date=parse_date(date),
                time=parse_time(time),
                event_type=event_type,
                location=location,
            )
            if self._find_duplicate(events, candidate):
                logger.info("Rejected duplicate event %s on %s at %s", name, date, time)
                return OperationResult(False, OperationStatus.DUPLICATE, "Duplicate event exists.")
            clash = self._find_conflict(events, candidate)
            if clash:
                message = f"Conflict with Event ID {clash.id} ({clash.name}) at {clash.time}."
                return self._conflict_result(events, candidate, clash, message)
            events.append(candidate)
            self._next_id += 1
            logger.info("Added event %s (%s on %s at %s)", candidate.id, name, date, time)
            return OperationResult(
                True,
                OperationStatus.ADDED,
                f"Event added with ID: {candidate.id}",
                event=candidate,
            )

        return self.mutate(_add)

    def edit_event_by_id(
        self,
        event_id: int,
        *,
        name: Optional[str] = None,
        date: Optional[str] = None,
        time: Optional[str] = None,
        event_type: Optional[str] = None,
        location: Optional[str] = None,
    ) -> OperationResult:
        """Apply the supplied fields to an event; blank fields keep their current value.

        The candidate is validated against every other live event and only
        replaces the stored value once all checks pass.
        """

        def _edit(events: List[Event]) -> OperationResult:
            index = next((i for i, event in enumerate(events) if event.id == event_id), None)
            if index is None:
                return OperationResult(False, OperationStatus.NOT_FOUND, "Event not found.")
            current = events[index]

            date_text = str(current.date) if _is_blank(date) else date
            time_text = str(current.time) if _is_blank(time) else time
            if not is_valid_date(date_text):
                return OperationResult(False, OperationStatus.INVALID_DATE, "Invalid date/time. Reverting.")
            if not is_valid_time(time_text):
                return OperationResult(False, OperationStatus.INVALID_TIME, "Invalid date/time. Reverting.")

            candidate = replace(
                current,
                name=current.name if _is_blank(name) else name,
                date=parse_date(date_text),
                time=parse_time(time_text),
                event_type=current.event_type if _is_blank(event_type) else event_type,
                location=current.location if _is_blank(location) else location,
            )
            if self._find_duplicate(events, candidate):
                logger.info("Rejected edit of event %s: duplicate", event_id)
                return OperationResult(False, OperationStatus.DUPLICATE, "Duplicate after edit. Reverting.")
            clash = self._find_conflict(events, candidate)
            if clash:
                message = f"Conflict after edit with ID {clash.id}. Reverting."
                return self._conflict_result(events, candidate, clash, message)

            events[index] = candidate
            logger.info("Updated event %s", event_id)
            return OperationResult(True, OperationStatus.UPDATED, "Event updated.", event=candidate)

        return self.mutate(_edit)

    def _delete_where(self, predicate: Callable[[Event], bool], missing: str) -> OperationResult:
        def _delete(events: List[Event]) -> OperationResult:
            kept = [event for event in events if not predicate(event)]
            removed = len(events) - len(kept)
            if not removed:
                return OperationResult(False, OperationStatus.NOT_FOUND, missing)
            events[:] = kept
            logger.info("Deleted %d event(s)", removed)
            return OperationResult(True, OperationStatus.DELETED, "Deleted.")

        return self.mutate(_delete)

    def delete_by_id(self, event_id: int) -> OperationResult:
        return self._delete_where(lambda event: event.id == event_id, "No event with that ID.")

    def delete_by_name(self, name: str) -> OperationResult:
        return self._delete_where(lambda event: _same_name(event.name, name), "No event with that name.")

    def replace_all(self, events: Iterable[Event]) -> int:
        """Swap the whole collection (snapshot import) and return the next id."""

        incoming = list(events)

        def _replace(current: List[Event]) -> int:
            current[:] = incoming
            self._next_id = max((event.id for event in incoming), default=0) + 1
            return self._next_id

        next_id = self.mutate(_replace)
        logger.info("Replaced store contents with %d events; next id %d", len(incoming), next_id)
        return next_id

    # Scheduling ----------------------------------------------------------
    def suggest_slots(
        self,
        date: EventDate | str,
        duration: int = EVENT_DURATION_MINUTES,
        *,
        exclude_id: Optional[int] = None,
    ) -> Optional[SlotSuggestion]:
        """Free slots on a date, or None when the date text is malformed."""
        day = coerce_date(date)
        if day is None:
            return None
        return self.mutate(
            lambda events: suggest_slots(
                events,
                day,
                duration=duration,
                settings=self.scheduling,
                exclude_id=exclude_id,
            )
        )

    # Queries -------------------------------------------------------------
    def list_all(self) -> List[Event]:
        return sorted(self.events(), key=Event.sort_key)

    def day_view(self, date: EventDate | str) -> List[Event]:
        day = coerce_date(date)
        if day is None:
            return []
        matches = [event for event in self.events() if event.date == day]
        return sorted(matches, key=lambda event: event.start_minutes)

    def todays_events(self, today: EventDate | str) -> List[Event]:
        return self.day_view(today)

    def search(self, keyword: str) -> List[Event]:
        needle = keyword.casefold()
        matches = [
            event
            for event in self.events()
            if needle in event.name.casefold() or needle in event.event_type.casefold()
        ]
        return sorted(matches, key=lambda event: event.id)

    def statistics(self, top: int = 5) -> EventStatistics:
        events = self.events()
        by_type = Counter(event.event_type for event in events)
        by_date = Counter(event.date for event in events)
        # Chronological first so equal counts keep calendar order after the stable sort.
        ranked = sorted(sorted(by_date.items()), key=lambda item: item[1], reverse=True)
        return EventStatistics(
            total=len(events),
            by_type=sorted(by_type.items()),
            top_dates=ranked[:top],
        )


__all__ = ["EventStore"]
