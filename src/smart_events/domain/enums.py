from __future__ import annotations

from enum import Enum


class OperationStatus(str, Enum):
    ADDED = "added"
    UPDATED = "updated"
    DELETED = "deleted"
    INVALID_NAME = "invalid_name"
    INVALID_DATE = "invalid_date"
    INVALID_TIME = "invalid_time"
    DUPLICATE = "duplicate"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    IMPORTED = "imported"
    NOTHING_IMPORTED = "nothing_imported"
    SENT = "sent"
    NO_EVENTS = "no_events"
    NO_RECIPIENTS = "no_recipients"


class AccessRole(str, Enum):
    VIEWER = "viewer"
    ADMIN = "admin"
