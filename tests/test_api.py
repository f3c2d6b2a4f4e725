"""Tests for the role-aware function registry and its endpoints."""

import pytest

from smart_events.api import call_api, get_api_functions
from smart_events.api.registry import register_api
from smart_events.domain import AccessRole

ADMIN = AccessRole.ADMIN


class TestRegistry:
    def test_viewer_sees_only_read_functions(self):
        names = {func.name for func in get_api_functions(AccessRole.VIEWER)}

        assert {"list_events", "day_view", "todays_events", "search_events", "suggest_slots"} <= names
        assert "add_event" not in names
        assert "import_snapshot" not in names

    def test_admin_sees_everything(self):
        assert len(get_api_functions(ADMIN)) == len(get_api_functions())

    def test_duplicate_registration_is_rejected(self):
        with pytest.raises(ValueError, match="already registered"):
            register_api("list_events", description="again", category="events")(lambda: None)

    def test_unknown_function(self):
        with pytest.raises(KeyError):
            call_api("does_not_exist")

    def test_viewer_cannot_mutate(self, api_context):
        with pytest.raises(PermissionError):
            call_api("add_event", name="Kickoff", date="01-01-2030", time="09:00")

        assert len(api_context.store) == 0

    def test_parameter_schema_marks_required_arguments(self):
        described = {func.name: func.describe() for func in get_api_functions()}

        schema = described["edit_event"]["parameters"]
        assert schema["required"] == ["event_id"]
        assert schema["properties"]["event_id"]["type"] == "integer"
        assert schema["properties"]["name"]["type"] == "string"
        assert described["suggest_slots"]["parameters"]["properties"]["duration"] == {"type": "integer", "default": 60}
        assert described["add_event"]["admin_only"] is True


class TestEndpoints:
    def test_add_then_list(self, api_context):
        added = call_api("add_event", role=ADMIN, name="Kickoff", date="01-01-2030", time="09:00", event_type="Meeting")

        assert added["ok"] is True
        assert added["status"] == "added"
        assert added["event"]["type"] == "Meeting"

        listed = call_api("list_events")
        assert [event["name"] for event in listed["events"]] == ["Kickoff"]

    def test_conflict_payload_carries_suggestions(self, api_context):
        call_api("add_event", role=ADMIN, name="Kickoff", date="01-01-2030", time="09:00")

        clash = call_api("add_event", role=ADMIN, name="Standup", date="01-01-2030", time="09:30")

        assert clash["status"] == "conflict"
        assert clash["conflict"]["id"] == 1
        assert clash["suggestion"]["slots"][0] == "08:00 to 09:00"

    def test_edit_and_delete(self, api_context):
        call_api("add_event", role=ADMIN, name="Kickoff", date="01-01-2030", time="09:00")

        edited = call_api("edit_event", role=ADMIN, event_id=1, location="Hall B")
        deleted = call_api("delete_event", role=ADMIN, event_id=1)
        missing = call_api("delete_events_by_name", role=ADMIN, name="Kickoff")

        assert edited["event"]["location"] == "Hall B"
        assert deleted["status"] == "deleted"
        assert missing["status"] == "not_found"

    def test_name_argument_is_forwarded_to_the_function(self, api_context):
        call_api("add_event", role=ADMIN, name="Kickoff", date="01-01-2030", time="09:00")

        result = call_api("delete_events_by_name", role=ADMIN, name="KICKOFF")

        assert result["status"] == "deleted"
        assert len(api_context.store) == 0

    def test_day_view_rejects_malformed_date(self, api_context):
        with pytest.raises(ValueError, match="DD-MM-YYYY"):
            call_api("day_view", date="2030-01-01")

    def test_todays_events_uses_context_clock(self, api_context):
        api_context.store.add_event("Kickoff", "01-01-2030", "09:00", "Meeting")

        result = call_api("todays_events")

        assert result["date"] == "01-01-2030"
        assert len(result["events"]) == 1

    def test_search_and_suggest(self, api_context):
        api_context.store.add_event("Kickoff", "01-01-2030", "09:00", "Meeting")

        assert len(call_api("search_events", keyword="kick")["events"]) == 1
        assert call_api("suggest_slots", date="01-01-2030", duration=30)["slots"][0] == "08:00 to 08:30"

    def test_statistics(self, api_context):
        api_context.store.add_event("Kickoff", "01-01-2030", "09:00", "Meeting")

        stats = call_api("event_statistics", role=ADMIN)

        assert stats["total"] == 1
        assert stats["by_type"] == [{"key": "Meeting", "count": 1}]
        assert stats["top_dates"] == [{"key": "01-01-2030", "count": 1}]

    def test_reminders_round_trip(self, api_context, sink):
        api_context.store.add_event("Kickoff", "01-01-2030", "09:00", "Meeting")

        assert call_api("load_attendees", role=ADMIN, text="a@b.co")["loaded"] == 1
        sent = call_api("send_reminders", role=ADMIN, date="01-01-2030")

        assert sent["status"] == "sent"
        assert len(sink.messages) == 1

    def test_snapshot_export_and_import(self, api_context):
        api_context.store.add_event("Kickoff", "01-01-2030", "09:00", "Meeting")
        exported = call_api("export_snapshot", role=ADMIN)["csv"]

        imported = call_api("import_snapshot", role=ADMIN, csv=exported + "9,Gala,05-05-2030,18:00,Social,\n")

        assert imported["message"] == "Imported 2 events. Next ID: 10"
