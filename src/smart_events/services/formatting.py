from __future__ import annotations

from typing import Iterable, List

from ..domain import Event, EventStatistics, SlotSuggestion

_COLUMNS = (("ID", 5), ("Name", 22), ("Date", 12), ("Time", 8), ("Type", 14), ("Location", 18))
RULE_WIDTH = 79


def truncate(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return text[: limit - 1] + "…"


def render_header() -> List[str]:
    header = "".join(title.ljust(width) for title, width in _COLUMNS)
    return [header, "-" * RULE_WIDTH]


def render_row(event: Event) -> str:
    cells = (
        str(event.id),
        truncate(event.name, 20),
        str(event.date),
        str(event.time),
        truncate(event.event_type, 12),
        truncate(event.location, 16),
    )
    return "".join(cell.ljust(width) for cell, (_, width) in zip(cells, _COLUMNS))


def render_table(events: Iterable[Event], *, empty: str = "No events.") -> str:
    rows = [render_row(event) for event in events]
    if not rows:
        return empty
    return "\n".join(render_header() + rows)


def render_suggestion(suggestion: SlotSuggestion) -> str:
    lines = [f"Suggested available slots on {suggestion.date}:"]
    if suggestion.found:
        lines.extend(f"  - {slot}" for slot in suggestion.slots)
    else:
        label = "1-hour" if suggestion.duration == 60 else f"{suggestion.duration}-minute"
        lines.append(f"  (No free {label} slots found in working window)")
    return "\n".join(lines)


def render_statistics(stats: EventStatistics) -> str:
    lines = [f"Total events: {stats.total}", "By type:"]
    lines.extend(f"  {event_type}: {count}" for event_type, count in stats.by_type)
    lines.append("Top 5 dates by count:")
    lines.extend(f"  {day}: {count}" for day, count in stats.top_dates)
    return "\n".join(lines)
