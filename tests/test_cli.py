"""Tests for the command line entry point."""

import pytest

from smart_events import cli


class TestParser:
    def test_api_defaults_come_from_settings(self):
        args = cli.build_parser().parse_args(["api"])

        assert args.command == "api"
        assert args.host == "127.0.0.1"
        assert isinstance(args.port, int)

    def test_command_is_required(self):
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args([])


class TestMain:
    def test_menu_command_runs_menu_without_console_logging(self, monkeypatch):
        calls = []
        monkeypatch.setattr(cli, "configure_logging", lambda level, console: calls.append(("log", console)))
        monkeypatch.setattr("smart_events.ui.run_menu", lambda: calls.append(("menu", None)))

        cli.main(["--log-level", "debug", "menu"])

        assert calls == [("log", False), ("menu", None)]

    def test_api_command_starts_server(self, monkeypatch):
        started = {}
        monkeypatch.setattr(cli, "configure_logging", lambda level, console: None)
        monkeypatch.setattr(
            "smart_events.services.http.run_local_server",
            lambda host, port: started.update(host=host, port=port),
        )

        cli.main(["api", "--host", "0.0.0.0", "--port", "9001"])

        assert started == {"host": "0.0.0.0", "port": 9001}
