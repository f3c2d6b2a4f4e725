"""Tests for listing, day view, search and statistics."""

from smart_events.core import EventStore
from smart_events.domain import EventDate


class TestListAll:
    def test_orders_by_calendar_date_then_time(self, store):
        store.add_event("Late", "01-02-2030", "09:00", "Meeting")
        store.add_event("Early", "02-01-2031", "09:00", "Meeting")
        store.add_event("Morning", "01-02-2030", "08:00", "Meeting")
        store.add_event("Past", "31-12-2029", "23:00", "Meeting")

        names = [event.name for event in store.list_all()]

        # text order of DD-MM-YYYY would put 01-02-2030 first
        assert names == ["Past", "Morning", "Late", "Early"]

    def test_empty_store(self, store):
        assert store.list_all() == []


class TestDayView:
    def test_returns_only_that_date_sorted_by_time(self, seeded_store):
        seeded_store.add_event("Breakfast", "01-01-2030", "07:00", "Social")

        events = seeded_store.day_view("01-01-2030")

        assert [event.name for event in events] == ["Breakfast", "Kickoff", "Standup"]

    def test_accepts_event_date(self, seeded_store):
        assert [event.name for event in seeded_store.day_view(EventDate(2030, 1, 2))] == ["Workshop"]

    def test_malformed_date_matches_nothing(self, seeded_store):
        assert seeded_store.day_view("2030-01-01") == []

    def test_todays_events_uses_the_supplied_date(self, seeded_store):
        assert [event.name for event in seeded_store.todays_events("15-03-2029")] == ["Keynote"]


class TestSearch:
    def test_matches_name_or_type_case_insensitively(self, seeded_store):
        names = [event.name for event in seeded_store.search("WORK")]

        assert names == ["Workshop"]

    def test_type_match_sorted_by_id(self, seeded_store):
        ids = [event.id for event in seeded_store.search("meet")]

        assert ids == [1, 2]

    def test_no_match(self, seeded_store):
        assert seeded_store.search("gala") == []


class TestStatistics:
    def test_counts_by_type_and_date(self, seeded_store):
        stats = seeded_store.statistics()

        assert stats.total == 4
        assert stats.by_type == [("Meeting", 2), ("Talk", 1), ("Workshop", 1)]
        assert stats.top_dates[0] == (EventDate(2030, 1, 1), 2)

    def test_top_dates_limited_to_five_with_calendar_tie_break(self):
        store = EventStore()
        for day in range(1, 8):
            store.add_event("Solo", f"{day:02d}-03-2030", "09:00", "Talk")
        store.add_event("Second", "06-03-2030", "11:00", "Talk")

        stats = store.statistics()

        assert len(stats.top_dates) == 5
        assert stats.top_dates[0] == (EventDate(2030, 3, 6), 2)
        assert [str(day) for day, _ in stats.top_dates[1:]] == [
            "01-03-2030",
            "02-03-2030",
            "03-03-2030",
            "04-03-2030",
        ]

    def test_empty_store(self, store):
        stats = store.statistics()

        assert stats.total == 0
        assert stats.by_type == []
        assert stats.top_dates == []
