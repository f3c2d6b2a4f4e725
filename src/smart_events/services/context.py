from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Callable, List

from ..config import AppSettings, get_settings
from ..core.calendar_math import today
from ..core.store import EventStore
from ..domain import Event, EventDate
from .auth import AuthService
from .reminders import NotificationSink, ReminderService, SimulatedEmailSink
from .snapshot import SnapshotService


@dataclass(slots=True)
class ServiceContext:
    """Aggregate root wiring settings, the event store and the boundary services."""

    settings: AppSettings = field(default_factory=get_settings)
    clock: Callable[[], date] = date.today
    sink: NotificationSink = field(default_factory=SimulatedEmailSink)
    store: EventStore = field(init=False)
    reminders: ReminderService = field(init=False)
    snapshots: SnapshotService = field(init=False)
    auth: AuthService = field(init=False)

    def __post_init__(self) -> None:
        self.store = EventStore(self.settings.scheduling)
        self.reminders = ReminderService(store=self.store, sink=self.sink)
        self.snapshots = SnapshotService(store=self.store)
        self.auth = AuthService(settings=self.settings.admin)

    def today(self) -> EventDate:
        return today(self.clock)

    def todays_events(self) -> List[Event]:
        return self.store.todays_events(self.today())
