"""Numbered text menu driving the event store.

Input and output are injected callables so the loop can be scripted; the
admin role is decided once at start-up and only changes which entries are
offered.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional

from ..core.calendar_math import is_valid_date
from ..domain import AccessRole, OperationResult
from ..services import ServiceContext
from ..services.formatting import render_statistics, render_suggestion, render_table

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

VIEWER_ENTRIES = (
    ("1", "List all events"),
    ("2", "Day view (pick date)"),
    ("3", "Today's events"),
    ("4", "Search events"),
)
ADMIN_ENTRIES = (
    ("5", "Add event (admin)"),
    ("6", "Edit event by ID (admin)"),
    ("7", "Delete event by ID (admin)"),
    ("8", "Delete event by name (admin)"),
    ("9", "Load attendees (paste emails) (admin)"),
    ("10", "Send reminders (admin)"),
    ("11", "Statistics (admin)"),
    ("12", "Export snapshot CSV (admin)"),
    ("13", "Import snapshot CSV (admin)"),
)


class EventMenu:
    def __init__(
        self,
        context: ServiceContext,
        *,
        input_fn: InputFn = input,
        output: OutputFn = print,
        role: Optional[AccessRole] = None,
    ) -> None:
        self.context = context
        self._input = input_fn
        self._output = output
        self.role = role
        self._eof = False
        self._handlers: Dict[str, Callable[[], None]] = {
            "1": self.list_all,
            "2": self.day_view,
            "3": self.todays_events,
            "4": self.search,
            "5": self.add_event,
            "6": self.edit_event,
            "7": self.delete_by_id,
            "8": self.delete_by_name,
            "9": self.load_attendees,
            "10": self.send_reminders,
            "11": self.statistics,
            "12": self.export_snapshot,
            "13": self.import_snapshot,
        }

    @property
    def is_admin(self) -> bool:
        return self.role is AccessRole.ADMIN

    # I/O helpers ---------------------------------------------------------
    def _ask(self, prompt: str) -> str:
        try:
            return self._input(prompt)
        except EOFError:
            self._eof = True
            return ""

    def _say(self, text: str) -> None:
        self._output(text)

    def _ask_block(self, prompt: str) -> List[str]:
        self._say(prompt)
        lines: List[str] = []
        while True:
            line = self._ask("")
            if not line:
                return lines
            lines.append(line)

    def _ask_id(self, prompt: str) -> Optional[int]:
        raw = self._ask(prompt).strip()
        if not raw or not raw.isascii() or not raw.isdigit():
            self._say("Invalid ID.")
            return None
        return int(raw)

    def _ask_date(self, prompt: str) -> Optional[str]:
        value = self._ask(prompt).strip()
        if not is_valid_date(value):
            self._say("Invalid date.")
            return None
        return value

    def _report(self, result: OperationResult) -> None:
        self._say(result.message)
        if result.suggestion is not None:
            self._say(render_suggestion(result.suggestion))

    # Session -------------------------------------------------------------
    def login(self) -> AccessRole:
        answer = self._ask("Login as admin? (y/N): ").strip()
        if answer not in ("y", "Y"):
            return AccessRole.VIEWER
        self._say("\n== Admin Login ==")
        username = self._ask("Username: ")
        password = self._ask("Password: ")
        role = self.context.auth.login(username, password)
        if role is AccessRole.ADMIN:
            self._say("Logged in as admin.")
        else:
            self._say("Invalid credentials. Continuing as viewer.")
        return role

    def render_menu(self) -> str:
        entries = VIEWER_ENTRIES + (ADMIN_ENTRIES if self.is_admin else ())
        lines = ["", "====== Smart Event Manager ======"]
        lines.extend(f"{key}) {label}" for key, label in entries)
        lines.append("0) Exit")
        return "\n".join(lines)

    def run(self) -> None:
        if self.role is None:
            self.role = self.login()
        logger.info("Menu session started as %s", self.role.value)
        while True:
            self._say(self.render_menu())
            choice = self._ask("Select: ").strip()
            if choice == "0" or self._eof:
                break
            self.dispatch(choice)
        self._say("Goodbye!")

    def dispatch(self, choice: str) -> None:
        handler = self._handlers.get(choice)
        allowed = {key for key, _ in VIEWER_ENTRIES}
        if self.is_admin:
            allowed |= {key for key, _ in ADMIN_ENTRIES}
        if handler is None or choice not in allowed:
            self._say(f"Invalid choice. Try 0-{13 if self.is_admin else 4}.")
            return
        handler()

    # Viewer entries ------------------------------------------------------
    def list_all(self) -> None:
        self._say(render_table(self.context.store.list_all(), empty="No events."))

    def day_view(self) -> None:
        date = self._ask_date("Enter date (DD-MM-YYYY): ")
        if date is None:
            return
        self._say(render_table(self.context.store.day_view(date), empty="No events on this date."))

    def todays_events(self) -> None:
        self._say(render_table(self.context.todays_events(), empty="No events on this date."))

    def search(self) -> None:
        keyword = self._ask("Keyword (name/type): ")
        self._say(render_table(self.context.store.search(keyword), empty="No matches."))

    # Admin entries -------------------------------------------------------
    def add_event(self) -> None:
        name = self._ask("Name: ")
        date = self._ask("Date (DD-MM-YYYY): ").strip()
        time = self._ask("Time (HH:MM 24h): ").strip()
        event_type = self._ask("Type: ")
        location = self._ask("Location (optional): ")
        self._report(self.context.store.add_event(name, date, time, event_type, location))

    def edit_event(self) -> None:
        event_id = self._ask_id("ID to edit: ")
        if event_id is None:
            return
        current = self.context.store.get(event_id)
        if current is None:
            self._say("Event not found.")
            return
        self._say("Editing Event (leave blank to keep current)")
        result = self.context.store.edit_event_by_id(
            event_id,
            name=self._ask(f"Name [{current.name}]: "),
            date=self._ask(f"Date [{current.date}]: ").strip(),
            time=self._ask(f"Time [{current.time}]: ").strip(),
            event_type=self._ask(f"Type [{current.event_type}]: "),
            location=self._ask(f"Location [{current.location}]: "),
        )
        self._report(result)

    def delete_by_id(self) -> None:
        event_id = self._ask_id("ID to delete: ")
        if event_id is not None:
            self._report(self.context.store.delete_by_id(event_id))

    def delete_by_name(self) -> None:
        self._report(self.context.store.delete_by_name(self._ask("Name to delete: ")))

    def load_attendees(self) -> None:
        lines = self._ask_block("Paste emails (comma/space/newline separated). End with a blank line.")
        count = self.context.reminders.load_attendees(" ".join(lines))
        self._say(f"Loaded {count} attendee emails.")

    def send_reminders(self) -> None:
        date = self._ask_date("Send reminders for date (DD-MM-YYYY): ")
        if date is not None:
            self._report(self.context.reminders.send_reminder_for_date(date))

    def statistics(self) -> None:
        self._say(render_statistics(self.context.store.statistics()))

    def export_snapshot(self) -> None:
        self._say(self.context.snapshots.export_snapshot().rstrip("\n"))
        self._say("(Copy the above lines to save. Import with the menu option.)")

    def import_snapshot(self) -> None:
        lines = self._ask_block("Paste CSV lines (header optional). End with a blank line.")
        self._report(self.context.snapshots.import_snapshot(lines))


def run_menu(context: Optional[ServiceContext] = None) -> None:
    EventMenu(context or ServiceContext()).run()
