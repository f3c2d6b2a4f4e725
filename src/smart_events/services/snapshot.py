"""Plain comma-separated snapshots of the event store.

Fields are joined with bare commas and split the same way on import; no
quoting is applied, so a comma inside a field shifts the remaining columns.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from ..core.calendar_math import is_valid_date, is_valid_time, parse_date, parse_time
from ..core.store import EventStore
from ..domain import Event, OperationResult, OperationStatus

logger = logging.getLogger(__name__)

SNAPSHOT_HEADER = "id,name,date,time,type,location"
_COLUMN_COUNT = 6


@dataclass
class ParsedSnapshot:
    events: List[Event] = field(default_factory=list)
    skipped: List[Tuple[int, str]] = field(default_factory=list)

    @property
    def max_id(self) -> int:
        return max((event.id for event in self.events), default=0)


def export_csv(events: Iterable[Event]) -> str:
    lines = [SNAPSHOT_HEADER]
    for event in events:
        lines.append(
            ",".join(
                (
                    str(event.id),
                    event.name,
                    str(event.date),
                    str(event.time),
                    event.event_type,
                    event.location,
                )
            )
        )
    return "\n".join(lines) + "\n"


def _row_problem(columns: List[str]) -> str | None:
    raw_id, name, date, time = columns[0].strip(), columns[1], columns[2], columns[3]
    if not raw_id or not raw_id.isascii() or not raw_id.isdigit() or int(raw_id) == 0:
        return "missing id"
    if not name:
        return "missing name"
    if not is_valid_date(date):
        return "invalid date"
    if not is_valid_time(time):
        return "invalid time"
    return None


def parse_csv(source: str | Iterable[str]) -> ParsedSnapshot:
    lines = source.splitlines() if isinstance(source, str) else list(source)
    parsed = ParsedSnapshot()
    seen_ids: set[int] = set()
    first = True
    for line_no, line in enumerate(lines, start=1):
        line = line.rstrip("\r\n")
        if "," not in line:
            continue
        if first:
            first = False
            if SNAPSHOT_HEADER in line.lower():
                continue
        columns = (line.split(",") + [""] * _COLUMN_COUNT)[:_COLUMN_COUNT]
        problem = _row_problem(columns)
        if problem is None and int(columns[0]) in seen_ids:
            problem = "repeated id"
        if problem:
            logger.debug("Skipping snapshot line %d: %s", line_no, problem)
            parsed.skipped.append((line_no, problem))
            continue
        event = Event(
            id=int(columns[0]),
            name=columns[1],
            date=parse_date(columns[2]),
            time=parse_time(columns[3]),
            event_type=columns[4],
            location=columns[5],
        )
        seen_ids.add(event.id)
        parsed.events.append(event)
    return parsed


@dataclass(slots=True)
class SnapshotService:
    store: EventStore

    def export_snapshot(self) -> str:
        return export_csv(self.store.events())

    def import_snapshot(self, source: str | Iterable[str]) -> OperationResult:
        parsed = parse_csv(source)
        if not parsed.events:
            logger.info("Snapshot import found no valid rows (%d skipped)", len(parsed.skipped))
            return OperationResult(False, OperationStatus.NOTHING_IMPORTED, "Nothing imported.")
        next_id = self.store.replace_all(parsed.events)
        return OperationResult(
            True,
            OperationStatus.IMPORTED,
            f"Imported {len(parsed.events)} events. Next ID: {next_id}",
        )


__all__ = ["SNAPSHOT_HEADER", "ParsedSnapshot", "SnapshotService", "export_csv", "parse_csv"]
