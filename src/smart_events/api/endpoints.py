from __future__ import annotations

from typing import Any, Dict, Optional

from ..core.calendar_math import is_valid_date
from ..domain import EVENT_DURATION_MINUTES
from .registry import get_api_functions, register_api
from .serializers import (
    serialize_events,
    serialize_result,
    serialize_statistics,
    serialize_suggestion,
)
from .state import api_state


def _require_date(value: str) -> str:
    if not is_valid_date(value):
        raise ValueError(f"Invalid date: {value!r}. Use DD-MM-YYYY.")
    return value


@register_api(
    "list_available_tools",
    description="List every registered function with its category and parameters.",
    category="meta",
    tags=("tools", "metadata"),
)
def list_available_tools() -> Dict[str, Any]:
    tools = [func.describe() for func in sorted(get_api_functions(), key=lambda item: item.name)]
    return {"tools": tools}


# Queries -------------------------------------------------------------------
@register_api(
    "list_events",
    description="All events ordered by date, then start time.",
    category="events",
    tags=("read",),
)
def list_events() -> Dict[str, Any]:
    return {"events": serialize_events(api_state.context.store.list_all())}


@register_api(
    "day_view",
    description="Events on one date (DD-MM-YYYY) ordered by start time.",
    category="events",
    tags=("read",),
)
def day_view(date: str) -> Dict[str, Any]:
    _require_date(date)
    return {"date": date, "events": serialize_events(api_state.context.store.day_view(date))}


@register_api(
    "todays_events",
    description="Events on the current local date.",
    category="events",
    tags=("read",),
)
def todays_events() -> Dict[str, Any]:
    context = api_state.context
    return {"date": str(context.today()), "events": serialize_events(context.todays_events())}


@register_api(
    "search_events",
    description="Case-insensitive keyword match against event name or type, ordered by id.",
    category="events",
    tags=("read",),
)
def search_events(keyword: str) -> Dict[str, Any]:
    return {"keyword": keyword, "events": serialize_events(api_state.context.store.search(keyword))}


@register_api(
    "suggest_slots",
    description="Up to five free start times inside the working window on a date.",
    category="scheduling",
    tags=("read", "availability"),
)
def suggest_slots(date: str, duration: int = EVENT_DURATION_MINUTES) -> Dict[str, Any]:
    _require_date(date)
    if duration <= 0:
        raise ValueError("duration must be a positive number of minutes")
    return serialize_suggestion(api_state.context.store.suggest_slots(date, duration))


# Mutations -----------------------------------------------------------------
@register_api(
    "add_event",
    description="Create a one-hour event after date, time, duplicate and conflict checks.",
    category="events",
    tags=("write",),
    admin_only=True,
)
def add_event(name: str, date: str, time: str, event_type: str = "", location: str = "") -> Dict[str, Any]:
    result = api_state.context.store.add_event(name, date, time, event_type, location)
    return serialize_result(result)


@register_api(
    "edit_event",
    description="Update the supplied fields of an event; omitted or blank fields keep their value.",
    category="events",
    tags=("write",),
    admin_only=True,
)
def edit_event(
    event_id: int,
    name: Optional[str] = None,
    date: Optional[str] = None,
    time: Optional[str] = None,
    event_type: Optional[str] = None,
    location: Optional[str] = None,
) -> Dict[str, Any]:
    result = api_state.context.store.edit_event_by_id(
        int(event_id),
        name=name,
        date=date,
        time=time,
        event_type=event_type,
        location=location,
    )
    return serialize_result(result)


@register_api(
    "delete_event",
    description="Delete the event with the given id.",
    category="events",
    tags=("write",),
    admin_only=True,
)
def delete_event(event_id: int) -> Dict[str, Any]:
    return serialize_result(api_state.context.store.delete_by_id(int(event_id)))


@register_api(
    "delete_events_by_name",
    description="Delete every event whose name matches, ignoring case.",
    category="events",
    tags=("write",),
    admin_only=True,
)
def delete_events_by_name(name: str) -> Dict[str, Any]:
    return serialize_result(api_state.context.store.delete_by_name(name))


@register_api(
    "event_statistics",
    description="Total count, counts per type and the five busiest dates.",
    category="events",
    tags=("read", "stats"),
    admin_only=True,
)
def event_statistics() -> Dict[str, Any]:
    return serialize_statistics(api_state.context.store.statistics())


# Reminders -----------------------------------------------------------------
@register_api(
    "load_attendees",
    description="Replace the attendee list with the email addresses found in the text.",
    category="reminders",
    tags=("write",),
    admin_only=True,
)
def load_attendees(text: str) -> Dict[str, Any]:
    return {"loaded": api_state.context.reminders.load_attendees(text)}


@register_api(
    "send_reminders",
    description="Send the reminder for a date's events to the loaded attendees.",
    category="reminders",
    tags=("write", "notify"),
    admin_only=True,
)
def send_reminders(date: str) -> Dict[str, Any]:
    _require_date(date)
    return serialize_result(api_state.context.reminders.send_reminder_for_date(date))


# Snapshots -----------------------------------------------------------------
@register_api(
    "export_snapshot",
    description="Render every event as id,name,date,time,type,location lines.",
    category="snapshot",
    tags=("read", "csv"),
    admin_only=True,
)
def export_snapshot() -> Dict[str, Any]:
    return {"csv": api_state.context.snapshots.export_snapshot()}


@register_api(
    "import_snapshot",
    description="Replace all events with the valid rows of a snapshot.",
    category="snapshot",
    tags=("write", "csv"),
    admin_only=True,
)
def import_snapshot(csv: str) -> Dict[str, Any]:
    return serialize_result(api_state.context.snapshots.import_snapshot(csv))
