"""Tests for the comma-separated snapshot export/import."""

from smart_events.core import EventStore
from smart_events.domain import OperationStatus
from smart_events.services.snapshot import SNAPSHOT_HEADER, SnapshotService, export_csv, parse_csv


class TestExport:
    def test_header_and_rows_in_store_order(self, seeded_store):
        text = export_csv(seeded_store.events())

        lines = text.splitlines()
        assert lines[0] == SNAPSHOT_HEADER
        assert lines[1] == "1,Kickoff,01-01-2030,09:00,Meeting,Hall A"
        assert lines[3] == "3,Keynote,15-03-2029,14:00,Talk,"
        assert len(lines) == 5

    def test_empty_store_exports_only_the_header(self, store):
        assert SnapshotService(store).export_snapshot() == SNAPSHOT_HEADER + "\n"

    def test_commas_are_not_escaped(self, store):
        store.add_event("Dinner", "01-01-2030", "19:00", "Social", "Main St, Room 4")

        assert export_csv(store.events()).splitlines()[1] == "1,Dinner,01-01-2030,19:00,Social,Main St, Room 4"


class TestParse:
    def test_skips_header_case_insensitively(self):
        parsed = parse_csv("ID,Name,Date,Time,Type,Location\n3,Gala,05-05-2030,18:00,Social,Hall\n")

        assert [event.id for event in parsed.events] == [3]
        assert parsed.skipped == []

    def test_skips_lines_without_commas_and_blank_lines(self):
        parsed = parse_csv(["garbage", "", "4,Gala,05-05-2030,18:00,Social,Hall"])

        assert len(parsed.events) == 1

    def test_drops_malformed_rows_only(self):
        text = "\n".join(
            [
                SNAPSHOT_HEADER,
                "1,Kickoff,01-01-2030,09:00,Meeting,Hall A",
                "2,Broken,31-02-2030,09:00,Meeting,Hall A",
                "0,NoId,01-01-2030,12:00,Meeting,",
                ",NoId,01-01-2030,13:00,Meeting,",
                "x7,BadId,01-01-2030,14:00,Meeting,",
                "5,,01-01-2030,15:00,Meeting,",
                "6,BadTime,01-01-2030,25:00,Meeting,",
                "7,Review,02-01-2030,10:00,Meeting",
            ]
        )

        parsed = parse_csv(text)

        assert [event.id for event in parsed.events] == [1, 7]
        assert parsed.events[1].location == ""
        assert [reason for _, reason in parsed.skipped] == [
            "invalid date",
            "missing id",
            "missing id",
            "missing id",
            "missing name",
            "invalid time",
        ]

    def test_repeated_ids_keep_the_first_row(self):
        parsed = parse_csv(["2,First,01-01-2030,09:00,Talk,", "2,Second,02-01-2030,09:00,Talk,"])

        assert [event.name for event in parsed.events] == ["First"]
        assert parsed.skipped == [(2, "repeated id")]

    def test_embedded_comma_shifts_columns(self):
        parsed = parse_csv(["1,Dinner,01-01-2030,19:00,Social,Main St, Room 4"])

        assert parsed.events[0].location == "Main St"


class TestImport:
    def test_replaces_store_and_advances_next_id(self, seeded_store):
        service = SnapshotService(seeded_store)

        result = service.import_snapshot(
            "id,name,date,time,type,location\n"
            "10,Gala,05-05-2030,18:00,Social,Hall\n"
            "4,Bad,05-05-2030,99:00,Social,Hall\n"
            "7,Review,02-01-2030,10:00,Meeting,\n"
        )

        assert result.ok and result.status is OperationStatus.IMPORTED
        assert result.message == "Imported 2 events. Next ID: 11"
        assert [event.id for event in seeded_store.events()] == [10, 7]
        assert seeded_store.add_event("Next", "06-05-2030", "09:00", "Talk").event.id == 11

    def test_nothing_valid_leaves_store_untouched(self, seeded_store):
        before = seeded_store.events()

        result = SnapshotService(seeded_store).import_snapshot("id,name,date,time,type,location\nnot,valid\n")

        assert not result.ok
        assert result.status is OperationStatus.NOTHING_IMPORTED
        assert result.message == "Nothing imported."
        assert seeded_store.events() == before
        assert seeded_store.next_id == 5

    def test_export_then_import_restores_the_same_events(self, seeded_store):
        text = SnapshotService(seeded_store).export_snapshot()
        store = EventStore()

        SnapshotService(store).import_snapshot(text)

        assert store.events() == seeded_store.events()
        assert store.next_id == seeded_store.next_id
