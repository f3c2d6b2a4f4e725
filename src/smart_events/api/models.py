from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..domain import Event, EventStatistics, OperationResult, SlotSuggestion


class EventPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    date: str
    time: str
    event_type: str = Field(alias="type")
    location: str = Field(default="")

    @classmethod
    def from_domain(cls, event: Event) -> "EventPayload":
        return cls(
            id=event.id,
            name=event.name,
            date=str(event.date),
            time=str(event.time),
            event_type=event.event_type,
            location=event.location,
        )


class SuggestionPayload(BaseModel):
    date: str
    duration: int
    slots: List[str] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, suggestion: SlotSuggestion) -> "SuggestionPayload":
        return cls(
            date=str(suggestion.date),
            duration=suggestion.duration,
            slots=[str(slot) for slot in suggestion.slots],
        )


class ResultPayload(BaseModel):
    ok: bool
    status: str
    message: str
    event: Optional[EventPayload] = Field(default=None)
    conflict: Optional[EventPayload] = Field(default=None)
    suggestion: Optional[SuggestionPayload] = Field(default=None)

    @classmethod
    def from_domain(cls, result: OperationResult) -> "ResultPayload":
        return cls(
            ok=result.ok,
            status=result.status.value,
            message=result.message,
            event=EventPayload.from_domain(result.event) if result.event else None,
            conflict=EventPayload.from_domain(result.conflict) if result.conflict else None,
            suggestion=SuggestionPayload.from_domain(result.suggestion) if result.suggestion else None,
        )


class CountPayload(BaseModel):
    key: str
    count: int


class StatisticsPayload(BaseModel):
    total: int
    by_type: List[CountPayload] = Field(default_factory=list)
    top_dates: List[CountPayload] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, stats: EventStatistics) -> "StatisticsPayload":
        return cls(
            total=stats.total,
            by_type=[CountPayload(key=name, count=count) for name, count in stats.by_type],
            top_dates=[CountPayload(key=str(day), count=count) for day, count in stats.top_dates],
        )
