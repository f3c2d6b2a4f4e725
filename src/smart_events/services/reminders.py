from __future__ import annotations

import logging
import re
import sys
from dataclasses import dataclass, field
from typing import Iterable, List, Protocol, TextIO

from ..core.calendar_math import coerce_date
from ..core.store import EventStore
from ..domain import Event, EventDate, OperationResult, OperationStatus

logger = logging.getLogger(__name__)

_TOKEN_SPLIT = re.compile(r"[\s,;]+")


@dataclass(frozen=True, slots=True)
class ReminderMessage:
    subject: str
    body: str
    recipients: tuple[str, ...]

    @property
    def recipient_count(self) -> int:
        return len(self.recipients)


class NotificationSink(Protocol):
    def dispatch(self, message: ReminderMessage) -> None:
        ...


@dataclass
class SimulatedEmailSink:
    """Writes the message to a text stream instead of delivering it."""

    stream: TextIO = field(default_factory=lambda: sys.stdout)

    def dispatch(self, message: ReminderMessage) -> None:
        logger.info("Simulated reminder send to %d recipients: %s", message.recipient_count, message.subject)
        self.stream.write(
            f"[SIMULATED EMAIL SEND] To {message.recipient_count} recipients.\n"
            f"Subject: {message.subject}\n\n"
            f"{message.body}"
            "(Emails not actually sent.)\n"
        )


def parse_attendees(text: str) -> List[str]:
    return [token for token in _TOKEN_SPLIT.split(text) if "@" in token and "." in token]


def render_reminder(day: EventDate, events: Iterable[Event]) -> str:
    lines = [f"Upcoming events on {day}:", ""]
    for event in events:
        lines.append(f"- {event.time} | {event.name} ({event.event_type}) @ {event.location_label}")
    return "\n".join(lines) + "\n"


@dataclass(slots=True)
class ReminderService:
    store: EventStore
    sink: NotificationSink
    attendees: List[str] = field(default_factory=list)

    def load_attendees(self, text: str) -> int:
        self.attendees = parse_attendees(text)
        logger.info("Loaded %d attendee emails", len(self.attendees))
        return len(self.attendees)

    def build_message(self, date: EventDate | str) -> ReminderMessage | None:
        day = coerce_date(date)
        if day is None:
            return None
        events = self.store.day_view(day)
        if not events:
            return None
        return ReminderMessage(
            subject=f"Reminder: Events on {day}",
            body=render_reminder(day, events),
            recipients=tuple(self.attendees),
        )

    def send_reminder_for_date(self, date: EventDate | str) -> OperationResult:
        message = self.build_message(date)
        if message is None:
            return OperationResult(False, OperationStatus.NO_EVENTS, "No events on this date.")
        if not message.recipients:
            return OperationResult(
                False,
                OperationStatus.NO_RECIPIENTS,
                "No attendee emails loaded. Choose 'Load attendees' first.",
            )
        self.sink.dispatch(message)
        return OperationResult(
            True,
            OperationStatus.SENT,
            f"Reminder sent to {message.recipient_count} recipients.",
        )


__all__ = [
    "NotificationSink",
    "ReminderMessage",
    "ReminderService",
    "SimulatedEmailSink",
    "parse_attendees",
    "render_reminder",
]
