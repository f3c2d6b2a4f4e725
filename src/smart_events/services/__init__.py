"""Boundary services around the event store: snapshots, reminders, access."""

from __future__ import annotations

from .auth import AuthService
from .context import ServiceContext
from .reminders import NotificationSink, ReminderMessage, ReminderService, SimulatedEmailSink
from .snapshot import SnapshotService

__all__ = [
    "AuthService",
    "NotificationSink",
    "ReminderMessage",
    "ReminderService",
    "ServiceContext",
    "SimulatedEmailSink",
    "SnapshotService",
]
