from __future__ import annotations

from typing import Any, Dict, Iterable, List

from ..domain import Event, EventStatistics, OperationResult, SlotSuggestion
from .models import EventPayload, ResultPayload, StatisticsPayload, SuggestionPayload


def serialize_event(event: Event) -> Dict[str, Any]:
    return EventPayload.from_domain(event).model_dump(by_alias=True)


def serialize_events(events: Iterable[Event]) -> List[Dict[str, Any]]:
    return [serialize_event(event) for event in events]


def serialize_result(result: OperationResult) -> Dict[str, Any]:
    return ResultPayload.from_domain(result).model_dump(by_alias=True)


def serialize_suggestion(suggestion: SlotSuggestion) -> Dict[str, Any]:
    return SuggestionPayload.from_domain(suggestion).model_dump()


def serialize_statistics(stats: EventStatistics) -> Dict[str, Any]:
    return StatisticsPayload.from_domain(stats).model_dump()
