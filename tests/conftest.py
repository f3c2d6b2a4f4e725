"""Shared fixtures for the Smart Events test suite."""

from datetime import date
from typing import List

import pytest

from smart_events.api import api_state
from smart_events.config.settings import (
    AdminSettings,
    AppSettings,
    LoggingSettings,
    SchedulingSettings,
    ServerSettings,
)
from smart_events.core import EventStore
from smart_events.services import ServiceContext
from smart_events.services.reminders import ReminderMessage

FIXED_TODAY = date(2030, 1, 1)


class RecordingSink:
    """Notification sink that keeps every dispatched message."""

    def __init__(self) -> None:
        self.messages: List[ReminderMessage] = []

    def dispatch(self, message: ReminderMessage) -> None:
        self.messages.append(message)


@pytest.fixture
def app_settings() -> AppSettings:
    return AppSettings(
        scheduling=SchedulingSettings(),
        admin=AdminSettings(usernames=("admin", "ACMadmin"), password="admin123"),
        server=ServerSettings(host="127.0.0.1", port=8000),
        logging=LoggingSettings(level="INFO"),
    )


@pytest.fixture
def store() -> EventStore:
    return EventStore()


@pytest.fixture
def seeded_store(store: EventStore) -> EventStore:
    """Store holding the kickoff/standup pair plus events on other dates."""
    store.add_event("Kickoff", "01-01-2030", "09:00", "Meeting", "Hall A")
    store.add_event("Standup", "01-01-2030", "10:00", "Meeting", "Hall A")
    store.add_event("Keynote", "15-03-2029", "14:00", "Talk", "")
    store.add_event("Workshop", "02-01-2030", "08:00", "Workshop", "Lab 2")
    return store


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def context(app_settings: AppSettings, sink: RecordingSink) -> ServiceContext:
    return ServiceContext(settings=app_settings, clock=lambda: FIXED_TODAY, sink=sink)


@pytest.fixture
def api_context(context: ServiceContext):
    """Point the process-wide API state at a fresh context for one test."""
    previous = api_state.context
    api_state.reset(context)
    yield context
    api_state.reset(previous)
